from ..polynomial import PolynomialError


class PolynomialParseError(PolynomialError, ValueError):
    """Text does not describe a polynomial.

    Raised for a missing or non-numeric degree, a malformed coefficient
    token, or a coefficient count other than degree + 1.
    """

    pass

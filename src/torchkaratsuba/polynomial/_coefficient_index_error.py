from ._polynomial_error import PolynomialError


class CoefficientIndexError(PolynomialError, IndexError):
    """Coefficient index outside [0, degree]."""

    pass

from ._polynomial_error import PolynomialError


class DegreeError(PolynomialError):
    """Raised when degree is invalid for operation."""

    pass


class InvalidDegreeError(DegreeError, ValueError):
    """Coefficient count does not match the declared degree.

    A polynomial of degree n always carries exactly n + 1 coefficients.
    """

    pass


class DegreeMismatchError(DegreeError, ValueError):
    """Operands of a block-recursive product have different degrees.

    Pad the lower-degree operand with polynomial_pad, or use
    polynomial_multiply_auto, which does so itself.
    """

    pass

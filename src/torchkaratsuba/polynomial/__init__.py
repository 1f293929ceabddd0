from ._coefficient_index_error import CoefficientIndexError
from ._degree_error import (
    DegreeError,
    DegreeMismatchError,
    InvalidDegreeError,
)
from ._polynomial import (
    KARATSUBA_THRESHOLD,
    Polynomial,
    coefficient_window_sum,
    next_power_of_two,
    polynomial,
    polynomial_degree,
    polynomial_evaluate,
    polynomial_multiply,
    polynomial_multiply_auto,
    polynomial_multiply_karatsuba,
    polynomial_pad,
    polynomial_to_string,
)
from ._polynomial_error import PolynomialError

__all__ = [
    # Exceptions
    "CoefficientIndexError",
    "DegreeError",
    "DegreeMismatchError",
    "InvalidDegreeError",
    "PolynomialError",
    # Power-basis polynomial
    "KARATSUBA_THRESHOLD",
    "Polynomial",
    "coefficient_window_sum",
    "next_power_of_two",
    "polynomial",
    "polynomial_degree",
    "polynomial_evaluate",
    "polynomial_multiply",
    "polynomial_multiply_auto",
    "polynomial_multiply_karatsuba",
    "polynomial_pad",
    "polynomial_to_string",
]

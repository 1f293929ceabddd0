from ._coefficient_window_sum import coefficient_window_sum
from ._polynomial import Polynomial, polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_multiply_karatsuba import (
    KARATSUBA_THRESHOLD,
    polynomial_multiply_auto,
    polynomial_multiply_karatsuba,
)
from ._polynomial_pad import next_power_of_two, polynomial_pad
from ._polynomial_to_string import polynomial_to_string

__all__ = [
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

"""Reading polynomials from text, files and interactive prompts."""

from ._parse_polynomial import parse_polynomial
from ._polynomial_parse_error import PolynomialParseError
from ._read_polynomial import prompt_polynomial, read_polynomial

__all__ = [
    "PolynomialParseError",
    "parse_polynomial",
    "prompt_polynomial",
    "read_polynomial",
]

import math

import torch

from ..polynomial import InvalidDegreeError, Polynomial, polynomial
from ._polynomial_parse_error import PolynomialParseError


def _parse_coefficient(token: str, index: int) -> float:
    try:
        value = float(token)
    except ValueError as error:
        raise PolynomialParseError(
            f"coefficient {index} is not a number: {token!r}"
        ) from error

    if not math.isfinite(value):
        raise PolynomialParseError(
            f"coefficient {index} is not finite: {token!r}"
        )

    return value


def parse_polynomial(text: str) -> Polynomial:
    """Parse a polynomial from its degree and ascending coefficients.

    Parameters
    ----------
    text : str
        Whitespace-separated tokens: first the degree, a non-negative integer
        written with ASCII digits only, then exactly degree + 1 coefficients
        in ascending exponent order. Line breaks count as whitespace.

    Returns
    -------
    Polynomial
        Polynomial with float64 coefficients.

    Raises
    ------
    PolynomialParseError
        If the text is empty, the degree is not a digit string, a coefficient
        is malformed or not finite, or the coefficient count is wrong.

    Examples
    --------
    >>> parse_polynomial("2\\n2 0 3").coeffs
    tensor([2., 0., 3.], dtype=torch.float64)
    """
    tokens = text.split()

    if not tokens:
        raise PolynomialParseError("expected a degree, got empty input")

    degree_token, *coefficient_tokens = tokens

    if not (degree_token.isascii() and degree_token.isdigit()):
        raise PolynomialParseError(
            f"degree must be a non-negative integer, got {degree_token!r}"
        )

    degree = int(degree_token)

    if len(coefficient_tokens) != degree + 1:
        raise PolynomialParseError(
            f"degree {degree} requires {degree + 1} coefficients, "
            f"got {len(coefficient_tokens)}"
        )

    coeffs = [
        _parse_coefficient(token, index)
        for index, token in enumerate(coefficient_tokens)
    ]

    try:
        return polynomial(torch.tensor(coeffs, dtype=torch.float64), degree)
    except InvalidDegreeError as error:
        raise PolynomialParseError(str(error)) from error

from pathlib import Path
from typing import Callable, Optional, Union

from ..polynomial import Polynomial
from ._parse_polynomial import parse_polynomial
from ._polynomial_parse_error import PolynomialParseError

DEGREE_PROMPT = "Degree of polynomial: "

COEFFICIENTS_PROMPT = "Ascending polynomial's constants: "


def read_polynomial(path: Union[str, Path]) -> Polynomial:
    """Read a polynomial from a file.

    The file holds two lines: the degree, then the space-separated
    coefficients in ascending exponent order.

    Raises
    ------
    PolynomialParseError
        If the file contents do not describe a polynomial.
    OSError
        If the file cannot be read.
    """
    return parse_polynomial(Path(path).read_text())


def prompt_polynomial(
    input_fn: Optional[Callable[[str], str]] = None,
) -> Polynomial:
    """Read a polynomial interactively.

    Asks for the degree, then for the coefficients on one line.

    Parameters
    ----------
    input_fn : callable
        Prompting line reader, the builtin ``input`` when omitted.

    Raises
    ------
    PolynomialParseError
        If the answers do not describe a polynomial, or input ends early.
    """
    if input_fn is None:
        input_fn = input

    try:
        degree = input_fn(DEGREE_PROMPT)
        coefficients = input_fn(COEFFICIENTS_PROMPT)
    except EOFError as error:
        raise PolynomialParseError("input ended before polynomial") from error

    if len(degree.split()) != 1:
        raise PolynomialParseError(
            f"expected a single degree token, got {degree!r}"
        )

    return parse_polynomial(f"{degree}\n{coefficients}")

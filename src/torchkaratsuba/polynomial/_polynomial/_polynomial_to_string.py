from .._polynomial_error import PolynomialError
from ._polynomial import Polynomial


def _format_number(value: float) -> str:
    return f"{value:g}"


def polynomial_to_string(p: Polynomial) -> str:
    """Render a polynomial as a sum of terms in ascending exponent order.

    The constant term is always printed, followed by a space. Each later term
    x^i is printed as " + cx^i" or " - |c|x^i" when |c| > 1 and as " + x^i" or
    " - x^i" when c is exactly 1 or -1. Terms whose coefficient lies strictly
    between -1 and 1, zero included, are left out.

    Examples
    --------
    >>> polynomial_to_string(polynomial(torch.tensor([1.0, 2.0, 1.0])))
    '1  + 2x^1 + x^2'
    >>> polynomial_to_string(polynomial(torch.tensor([2.0, 0.5, -3.0])))
    '2  - 3x^2'
    """
    if p.coeffs.dim() != 1:
        raise PolynomialError(
            f"only a single polynomial can be rendered, got batch shape "
            f"{tuple(p.coeffs.shape[:-1])}"
        )

    if p.coeffs.is_complex():
        raise PolynomialError("complex coefficients cannot be rendered")

    coeffs = p.coeffs.tolist()

    terms = [f"{_format_number(coeffs[0])} "]

    for i, c in enumerate(coeffs[1:], start=1):
        if c > 1:
            terms.append(f" + {_format_number(c)}x^{i}")
        elif c < -1:
            terms.append(f" - {_format_number(abs(c))}x^{i}")
        elif c == 1:
            terms.append(f" + x^{i}")
        elif c == -1:
            terms.append(f" - x^{i}")

    return "".join(terms)

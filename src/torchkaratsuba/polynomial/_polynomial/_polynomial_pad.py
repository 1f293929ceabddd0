import torch

from .._polynomial_error import PolynomialError
from ._polynomial import Polynomial


def next_power_of_two(n: int) -> int:
    """Return the smallest power of 2 >= n."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def polynomial_pad(p: Polynomial, size: int) -> Polynomial:
    """Zero-extend the coefficients of a polynomial to ``size`` entries.

    Parameters
    ----------
    p : Polynomial
        Input polynomial with N coefficients.
    size : int
        Number of coefficients of the result, at least N.

    Returns
    -------
    Polynomial
        Polynomial of degree ``size - 1`` whose first N coefficients are those
        of ``p`` and whose remaining coefficients are zero. When ``size == N``
        ``p`` itself is returned.

    Raises
    ------
    PolynomialError
        If ``size`` is smaller than the number of coefficients of ``p``.
    """
    coeffs = p.coeffs
    n = coeffs.shape[-1]

    if size < n:
        raise PolynomialError(
            f"cannot pad {n} coefficients down to {size}; padding only extends"
        )

    if size == n:
        return p

    padded = torch.zeros(
        *coeffs.shape[:-1], size, dtype=coeffs.dtype, device=coeffs.device
    )
    padded[..., :n] = coeffs

    return Polynomial(coeffs=padded)

"""Block-recursive (Karatsuba) polynomial multiplication.

Splits each operand into a low and a high half of coefficients and replaces
the four half-size products of schoolbook multiplication with three:

    p0 = low(a) * low(b)
    p2 = high(a) * high(b)
    p1 = (low(a) + high(a)) * (low(b) + high(b))

so that a * b = p0 + (p1 - p0 - p2) x^half + p2 x^(2 half). Applied
recursively this takes O(n^log2(3)) coefficient multiplications instead of
O(n^2). Coefficients are real or complex numbers, so the combine step is
plain addition with no carries.
"""

import warnings

import torch
from torch import Tensor

from .._degree_error import DegreeMismatchError
from ._coefficient_window_sum import coefficient_window_sum
from ._polynomial import Polynomial
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_pad import next_power_of_two, polynomial_pad

_LOW_PRECISION_DTYPES = (torch.float16, torch.bfloat16)


def _karatsuba(left: Tensor, right: Tensor, size: int) -> Tensor:
    """Product of two coefficient windows of length ``size``.

    ``size`` must be a power of two. Returns a zero-initialised buffer of
    shape (..., 2 * size + 1); entries past index 2 * size - 2 are zero. The
    uniform buffer length keeps the combine offsets identical at every level.
    """
    result = left.new_zeros((*left.shape[:-1], 2 * size + 1))

    if size == 1:
        result[..., 0] = left[..., 0] * right[..., 0]
        return result

    half = size // 2

    left_low = left[..., :half]
    left_high = left[..., half:size]
    right_low = right[..., :half]
    right_high = right[..., half:size]

    p0 = _karatsuba(left_low, right_low, half)
    p1 = _karatsuba(
        coefficient_window_sum(left_low, left_high, half),
        coefficient_window_sum(right_low, right_high, half),
        half,
    )
    p2 = _karatsuba(left_high, right_high, half)

    result[..., :size] += p0[..., :size]
    result[..., size : 2 * size] += p2[..., :size]
    result[..., half : half + size] += (
        p1[..., :size] - p2[..., :size] - p0[..., :size]
    )

    return result


def polynomial_multiply_karatsuba(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials of equal degree by block recursion.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply. Both must have the same declared degree.

    Returns
    -------
    Polynomial
        Product p * q of degree 2 * (k' - 1), where k' is the number of
        coefficients of each operand rounded up to a power of two. Entries
        past the true product degree deg(p) + deg(q) are zero.

    Raises
    ------
    DegreeMismatchError
        If deg(p) != deg(q).

    Notes
    -----
    Both operands are zero-padded once, here, to k' coefficients so that
    every recursive split is even. Use ``polynomial_multiply_auto`` to get
    a result of the true product degree, or for operands of different
    degrees.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 1.0]))  # 1 + x
    >>> polynomial_multiply_karatsuba(p, p).coeffs
    tensor([1., 2., 1.])
    """
    if p.degree() != q.degree():
        raise DegreeMismatchError(
            f"block multiplication requires equal degrees, "
            f"got {p.degree()} and {q.degree()}"
        )

    size = next_power_of_two(p.num_coefficients())

    left = polynomial_pad(p, size).coeffs
    right = polynomial_pad(q, size).coeffs

    broadcast_batch = torch.broadcast_shapes(
        left.shape[:-1], right.shape[:-1]
    )

    common_dtype = torch.promote_types(left.dtype, right.dtype)
    if common_dtype in _LOW_PRECISION_DTYPES:
        warnings.warn(
            f"Block-recursive multiplication in {common_dtype} accumulates "
            f"rounding error from the p1 - p0 - p2 cancellation. "
            f"Results may be inaccurate.",
            stacklevel=2,
        )

    left = left.expand(*broadcast_batch, size).to(common_dtype)
    right = right.expand(*broadcast_batch, size).to(common_dtype)

    result = _karatsuba(left, right, size)

    return Polynomial(coeffs=result[..., : 2 * size - 1])


# Number of coefficients at which the block recursion overtakes direct
# convolution in polynomial_multiply_auto.
KARATSUBA_THRESHOLD = 64


def polynomial_multiply_auto(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials, automatically selecting the best algorithm.

    Uses block-recursive multiplication for polynomials with at least
    ``KARATSUBA_THRESHOLD`` coefficients and direct convolution otherwise.
    Operands of different degrees are zero-padded to a common degree first.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q of degree deg(p) + deg(q), whichever method is used.
    """
    n_p = p.num_coefficients()
    n_q = q.num_coefficients()
    n = max(n_p, n_q)

    if n < KARATSUBA_THRESHOLD:
        return polynomial_multiply(p, q)

    result = polynomial_multiply_karatsuba(
        polynomial_pad(p, n), polynomial_pad(q, n)
    )

    return Polynomial(coeffs=result.coeffs[..., : n_p + n_q - 1])

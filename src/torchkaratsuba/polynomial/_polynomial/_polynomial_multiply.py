import torch

from ._polynomial import Polynomial


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials by direct convolution.

    Computes c[k] = sum_{i + j = k} p[i] * q[j] for k in [0, deg(p) + deg(q)].
    Result degree is deg(p) + deg(q). Operands of any degrees are accepted.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q.

    Notes
    -----
    Takes O(deg(p) * deg(q)) multiplications. The output is zero-initialised
    and accumulated one shifted row of ``q`` at a time.
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    # Get shapes
    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    # Broadcast batch dimensions
    broadcast_batch = torch.broadcast_shapes(
        p_coeffs.shape[:-1], q_coeffs.shape[:-1]
    )

    p_expanded = p_coeffs.expand(*broadcast_batch, n_p)
    q_expanded = q_coeffs.expand(*broadcast_batch, n_q)

    # Promote to common dtype
    common_dtype = torch.promote_types(p_expanded.dtype, q_expanded.dtype)
    p_expanded = p_expanded.to(common_dtype)
    q_expanded = q_expanded.to(common_dtype)

    n_out = n_p + n_q - 1
    result = torch.zeros(
        *broadcast_batch, n_out, dtype=common_dtype, device=p_coeffs.device
    )

    for i in range(n_p):
        result[..., i : i + n_q] += p_expanded[..., i : i + 1] * q_expanded

    return Polynomial(coeffs=result)

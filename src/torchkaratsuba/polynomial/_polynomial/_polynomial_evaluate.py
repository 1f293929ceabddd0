import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Tensor) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (..., N).
    x : Tensor
        Evaluation points, broadcast against the batch dimensions of ``p``.

    Returns
    -------
    Tensor
        Values p(x), shape broadcast(batch, x.shape).
    """
    coeffs = p.coeffs
    n = coeffs.shape[-1]

    x = torch.as_tensor(x, device=coeffs.device)
    dtype = torch.promote_types(coeffs.dtype, x.dtype)

    result = torch.zeros(
        torch.broadcast_shapes(coeffs.shape[:-1], x.shape),
        dtype=dtype,
        device=coeffs.device,
    )

    for k in range(n - 1, -1, -1):
        result = result * x + coeffs[..., k]

    return result

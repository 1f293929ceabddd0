from torch import Tensor

from .._polynomial_error import PolynomialError


def coefficient_window_sum(left: Tensor, right: Tensor, size: int) -> Tensor:
    """Element-wise sum of two coefficient windows.

    Parameters
    ----------
    left, right : Tensor
        Coefficient windows, shape (..., M) with M >= size. Only the first
        ``size`` entries along the last dimension are read.
    size : int
        Window length.

    Returns
    -------
    Tensor
        Freshly allocated tensor of shape (..., size). Neither input is
        modified or aliased.
    """
    if left.shape[-1] < size or right.shape[-1] < size:
        raise PolynomialError(
            f"coefficient windows of length {left.shape[-1]} and "
            f"{right.shape[-1]} are shorter than {size}"
        )

    return left[..., :size] + right[..., :size]

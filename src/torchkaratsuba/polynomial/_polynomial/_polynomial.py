from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._coefficient_index_error import CoefficientIndexError
from .._degree_error import InvalidDegreeError
from .._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[..., 0] + coeffs[..., 1]*x + ... + coeffs[..., n]*x^n
    where n is the declared degree.

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N) where N = degree + 1.
        coeffs[..., i] is the coefficient of x^i. Leading dimensions are
        independent batch members sharing the same declared degree.

    Notes
    -----
    The degree is a declared bound: the leading coefficient may be zero.
    Operations never modify ``coeffs`` in place; every product is a new
    Polynomial.

    Examples
    --------
    1 + 2x + 3x^2:
        polynomial(torch.tensor([1.0, 2.0, 3.0]))

    Operator overloading:
        p * q    # polynomial_multiply(p, q)
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def degree(self) -> int:
        return self.coeffs.shape[-1] - 1

    def num_coefficients(self) -> int:
        return self.coeffs.shape[-1]

    def coefficient_at(self, index: int) -> Tensor:
        """Coefficient of x^index.

        Raises
        ------
        CoefficientIndexError
            If index is not in [0, degree].
        """
        if not 0 <= index <= self.degree():
            raise CoefficientIndexError(
                f"coefficient index {index} out of range [0, {self.degree()}]"
            )

        return self.coeffs[..., index].clone()

    def coefficients(self) -> Tensor:
        """Copy of the coefficient tensor, detached from this polynomial."""
        return self.coeffs.detach().clone()

    def degree_rounded_up_to_power_of_two(self) -> int:
        from ._polynomial_pad import next_power_of_two

        return next_power_of_two(self.num_coefficients())

    def to_display_string(self) -> str:
        from ._polynomial_to_string import polynomial_to_string

        return polynomial_to_string(self)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply

        return polynomial_multiply(self, other)

    def __call__(self, x: Tensor) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(
    coeffs: Union[Tensor, Sequence[float]],
    degree: Optional[int] = None,
) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients in ascending order, shape (..., N).
        Must have at least one coefficient.
    degree : int, optional
        Declared degree. When given, N must equal degree + 1.

    Returns
    -------
    Polynomial
        Polynomial owning a private copy of ``coeffs``. Integer and boolean
        coefficients are promoted to float64.

    Raises
    ------
    PolynomialError
        If coeffs is empty (size 0 in last dimension).
    InvalidDegreeError
        If degree is given and does not match the number of coefficients.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]), degree=2)
    >>> p.coeffs
    tensor([1., 2., 3.])
    """
    if isinstance(coeffs, Tensor):
        coeffs = coeffs.clone()
    else:
        coeffs = torch.tensor(coeffs, dtype=torch.float64)

    if coeffs.dim() == 0 or coeffs.numel() == 0 or coeffs.shape[-1] == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    if not (coeffs.is_floating_point() or coeffs.is_complex()):
        coeffs = coeffs.to(torch.float64)

    if degree is not None and coeffs.shape[-1] != degree + 1:
        raise InvalidDegreeError(
            f"degree {degree} requires {degree + 1} coefficients, "
            f"got {coeffs.shape[-1]}"
        )

    return Polynomial(coeffs=coeffs)

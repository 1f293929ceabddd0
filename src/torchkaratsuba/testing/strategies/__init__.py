"""Hypothesis strategies for polynomial testing."""

from ._coefficients import coefficients
from ._polynomials import equal_degree_polynomial_pairs, polynomials

__all__ = [
    "coefficients",
    "equal_degree_polynomial_pairs",
    "polynomials",
]

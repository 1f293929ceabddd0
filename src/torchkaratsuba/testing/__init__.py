"""Testing helpers for torchkaratsuba.

Requires the ``test`` extra (hypothesis). Example usage:

    from hypothesis import given

    from torchkaratsuba.testing.strategies import polynomials

    @given(polynomials(max_degree=8))
    def test_degree(p):
        assert p.num_coefficients() == p.degree() + 1
"""

from .strategies import (
    coefficients,
    equal_degree_polynomial_pairs,
    polynomials,
)

__all__ = [
    "coefficients",
    "equal_degree_polynomial_pairs",
    "polynomials",
]

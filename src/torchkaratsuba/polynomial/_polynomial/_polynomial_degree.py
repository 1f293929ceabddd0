from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return the declared degree of a polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1.

    Notes
    -----
    This is the formal degree (len(coeffs) - 1), not the index of the last
    non-zero coefficient. Products from polynomial_multiply_karatsuba carry
    zero coefficients past the true product degree.
    """
    return p.degree()

"""Benchmark polynomial multiplication.

Compares direct (O(n^2)) vs block-recursive Karatsuba (O(n^log2(3)))
multiplication across polynomial degrees, along with the adaptive dispatcher.
"""

import time

import torch

from torchkaratsuba.polynomial import (
    polynomial,
    polynomial_multiply,
    polynomial_multiply_auto,
    polynomial_multiply_karatsuba,
)

_METHODS = {
    "auto": polynomial_multiply_auto,
    "direct": polynomial_multiply,
    "karatsuba": polynomial_multiply_karatsuba,
}


def benchmark_multiply(
    degree: int,
    n_iterations: int = 20,
    device: str = "cpu",
    method: str = "auto",
) -> float:
    """Benchmark multiplication at given degree.

    Parameters
    ----------
    degree : int
        Degree of both polynomials.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'auto', 'direct', or 'karatsuba'.

    Returns
    -------
    float
        Average time per multiplication in milliseconds.
    """
    a = polynomial(torch.randn(degree + 1, device=device, dtype=torch.float64))
    b = polynomial(torch.randn(degree + 1, device=device, dtype=torch.float64))

    try:
        multiply_fn = _METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown method: {method}") from None

    # Warmup
    for _ in range(3):
        _ = multiply_fn(a, b)

    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = multiply_fn(a, b)

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run multiplication benchmarks across degrees."""
    degrees = [7, 15, 31, 63, 127, 255, 511]

    print("Polynomial Multiplication Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Direct (ms)':>14} {'Karatsuba (ms)':>16} {'Auto (ms)':>14}"
    )
    print("-" * 70)

    for degree in degrees:
        timings = {}
        for method in ("direct", "karatsuba", "auto"):
            try:
                timings[method] = benchmark_multiply(degree, method=method)
            except Exception as e:
                timings[method] = float("nan")
                print(f"{method} failed for degree {degree}: {e}")

        print(
            f"{degree:>8} {timings['direct']:>14.4f} "
            f"{timings['karatsuba']:>16.4f} {timings['auto']:>14.4f}"
        )

    print()
    print("Notes:")
    print("- Direct accumulates one shifted row per coefficient")
    print("- Karatsuba pads to a power of two and recurses down to size 1")
    print("- Auto switches from Direct to Karatsuba at 64 coefficients")


if __name__ == "__main__":
    main()

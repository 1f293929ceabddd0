"""Multiply two polynomials read from files or from the terminal.

    python -m torchkaratsuba              # prompt for both polynomials
    python -m torchkaratsuba FIRST SECOND # read them from two files

Each file holds two lines: the degree, then the ascending coefficients.
Both products are printed with their wall-clock duration.
"""

import argparse
import sys
import time
from typing import Callable, List, Optional, Tuple

from torchkaratsuba.io import (
    PolynomialParseError,
    prompt_polynomial,
    read_polynomial,
)
from torchkaratsuba.polynomial import (
    DegreeMismatchError,
    Polynomial,
    polynomial_multiply,
    polynomial_multiply_karatsuba,
)


def _timed(
    multiply_fn: Callable[[Polynomial, Polynomial], Polynomial],
    p: Polynomial,
    q: Polynomial,
) -> Tuple[Polynomial, float]:
    start = time.perf_counter()
    result = multiply_fn(p, q)
    elapsed = time.perf_counter() - start
    return result, elapsed * 1000  # ms


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torchkaratsuba",
        description="Multiply two polynomials by direct convolution and "
        "by block-recursive (Karatsuba) multiplication.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="two files, each holding a degree line and a coefficient line; "
        "prompts for both polynomials when omitted",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    if len(args.files) not in (0, 2):
        parser.error(f"expected 0 or 2 files, got {len(args.files)}")

    def read(index: int) -> Polynomial:
        if args.files:
            return read_polynomial(args.files[index])
        return prompt_polynomial()

    try:
        first = read(0)
        print(f"Polynomial_One: {first.to_display_string()}")
        print(first.degree_rounded_up_to_power_of_two())

        second = read(1)
        print(f"Polynomial_Two: {second.to_display_string()}")
    except (PolynomialParseError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    product, ms = _timed(polynomial_multiply, first, second)
    print(product.to_display_string())
    print(f"Direct multiplication: {ms:.4f} ms")

    try:
        product, ms = _timed(polynomial_multiply_karatsuba, first, second)
    except DegreeMismatchError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(product.to_display_string())
    print(f"Block-recursive multiplication: {ms:.4f} ms")

    return 0


if __name__ == "__main__":
    sys.exit(main())

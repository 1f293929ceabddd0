"""torchkaratsuba: PyTorch polynomial multiplication, direct and block-recursive."""

from . import io, polynomial

__all__ = [
    "io",
    "polynomial",
]

__version__ = "0.1.0"

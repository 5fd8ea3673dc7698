"""torchbezier: constrained degree reduction of Bezier curves in PyTorch."""

from . import (
    combinatorics,
    degree_reduction,
    linear_algebra,
    spline,
)

__all__ = [
    "combinatorics",
    "degree_reduction",
    "linear_algebra",
    "spline",
]

__version__ = "0.1.0"

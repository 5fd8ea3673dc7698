"""Exact linear algebra on rational matrices.

Matrices are nested sequences of ints or :class:`fractions.Fraction`, so
results carry no rounding error however ill-conditioned the system is.

Functions
---------
bordered_solve
    Equality-constrained quadratic minimisation through the bordered
    (Karush-Kuhn-Tucker) system.
"""

from torchbezier.linear_algebra._bordered_solve import bordered_solve
from torchbezier.linear_algebra._result_types import BorderedSolveResult

__all__ = [
    "BorderedSolveResult",
    "bordered_solve",
]

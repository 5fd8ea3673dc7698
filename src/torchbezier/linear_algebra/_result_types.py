from fractions import Fraction
from typing import List, NamedTuple


class BorderedSolveResult(NamedTuple):
    """Result of the bordered (KKT) solve [[A, C^T], [C, 0]] [x; λ] = [b; d]."""

    solution: List[List[Fraction]]
    multipliers: List[List[Fraction]]
    info: int

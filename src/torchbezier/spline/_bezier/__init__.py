from ._bezier import (
    BezierCurve,
    bezier,
)
from ._bezier_derivative import bezier_derivative, bezier_derivative_evaluate
from ._bezier_elevate import bezier_elevate
from ._bezier_evaluate import bezier_evaluate
from ._bezier_reduce import bezier_reduce

__all__ = [
    "BezierCurve",
    "bezier",
    "bezier_derivative",
    "bezier_derivative_evaluate",
    "bezier_elevate",
    "bezier_evaluate",
    "bezier_reduce",
]

"""Differentiable Bezier curves for PyTorch tensors.

Bezier Curves
-------------
bezier
    Create a Bezier curve evaluator from control points.
bezier_evaluate
    Evaluate a Bezier curve at parameter values.
bezier_derivative
    Derivative of a Bezier curve as a Bezier curve.
bezier_derivative_evaluate
    Evaluate a derivative of a Bezier curve.
bezier_elevate
    Exact representation with more control points.
bezier_reduce
    Constrained least-squares approximation with fewer control points.

Data Types
----------
BezierCurve
    Bezier curve on [0, 1].

Exceptions
----------
SplineError
    Base exception for spline operations.
ExtrapolationError
    Query point outside the curve domain.
"""

from ._bezier import (
    BezierCurve,
    bezier,
    bezier_derivative,
    bezier_derivative_evaluate,
    bezier_elevate,
    bezier_evaluate,
    bezier_reduce,
)
from ._extrapolation_error import ExtrapolationError
from ._spline_error import SplineError

__all__ = [
    "BezierCurve",
    "ExtrapolationError",
    "SplineError",
    "bezier",
    "bezier_derivative",
    "bezier_derivative_evaluate",
    "bezier_elevate",
    "bezier_evaluate",
    "bezier_reduce",
]

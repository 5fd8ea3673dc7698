"""Bezier curve derivative computation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch

if TYPE_CHECKING:
    from ._bezier import BezierCurve


def bezier_derivative(curve: BezierCurve) -> BezierCurve:
    """
    Derivative of a Bezier curve.

    The derivative of a degree-n curve is the degree-(n-1) curve with
    control points

        Q_i = n * (P_{i+1} - P_i),  i = 0, ..., n-1

    so its first and last control points are the end tangents of the
    original curve.

    Parameters
    ----------
    curve : BezierCurve
        Curve of degree n >= 1.

    Returns
    -------
    derivative : BezierCurve
        Curve of degree n-1 with the same extrapolation mode.

    Raises
    ------
    ValueError
        If the curve has degree 0.

    Examples
    --------
    >>> import torch
    >>> curve = BezierCurve(
    ...     control_points=torch.tensor([0.0, 1.0, 4.0]),
    ...     extrapolate="error",
    ...     batch_size=[],
    ... )
    >>> bezier_derivative(curve).control_points
    tensor([2., 6.])
    """
    from ._bezier import BezierCurve

    control_points = curve.control_points
    n = control_points.shape[0] - 1

    if n < 1:
        raise ValueError("Cannot compute derivative of degree-0 Bezier curve")

    return BezierCurve(
        control_points=n * (control_points[1:] - control_points[:-1]),
        extrapolate=curve.extrapolate,
        batch_size=[],
    )


def bezier_derivative_evaluate(
    curve: BezierCurve,
    t: torch.Tensor,
    order: int = 1,
) -> torch.Tensor:
    """
    Evaluate a derivative of a Bezier curve at parameter values.

    Parameters
    ----------
    curve : BezierCurve
        Input curve.
    t : Tensor
        Parameter values.
    order : int
        Derivative order, ``1 <= order <= degree``. Default: 1.

    Returns
    -------
    Tensor
        Derivative values, shape (*t.shape, *value_shape).

    Raises
    ------
    ValueError
        If ``order`` is below 1 or exceeds the degree of the curve.
    """
    from ._bezier_evaluate import bezier_evaluate

    if order < 1:
        raise ValueError(f"Derivative order must be at least 1, got {order}")

    if order > curve.degree:
        raise ValueError(
            f"Cannot compute order-{order} derivative of "
            f"degree-{curve.degree} curve"
        )

    derivative = curve
    for _ in range(order):
        derivative = bezier_derivative(derivative)

    return bezier_evaluate(derivative, t)

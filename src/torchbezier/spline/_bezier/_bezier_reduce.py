"""Bezier curve degree reduction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torchbezier.degree_reduction import degree_reduction_matrix

from ._bezier_elevate import _apply

if TYPE_CHECKING:
    from ._bezier import BezierCurve


def bezier_reduce(
    curve: BezierCurve,
    degree: int,
    start_continuity: int = 0,
    end_continuity: int = 0,
) -> BezierCurve:
    """
    Approximate a Bezier curve by one of lower degree.

    The result is the degree-``degree`` curve closest to ``curve`` in the
    L2 norm over [0, 1] among those whose derivatives of orders
    ``0 .. start_continuity - 1`` at t=0 and ``0 .. end_continuity - 1`` at
    t=1 match the original. Each coordinate of a vector-valued curve is
    reduced independently with the same matrix.

    Parameters
    ----------
    curve : BezierCurve
        Curve of degree n.
    degree : int
        Target degree m, ``0 <= m <= n``.
    start_continuity : int, optional
        Number of derivatives preserved at t=0. Default: 0.
    end_continuity : int, optional
        Number of derivatives preserved at t=1. Default: 0.

    Returns
    -------
    BezierCurve
        Curve of degree m with the same extrapolation mode.

    Raises
    ------
    InvalidDegreeError
        If ``degree`` is negative or above the degree of the curve.
    InvalidConstraintError
        If a continuity order is negative or
        ``start_continuity + end_continuity > degree + 1``.

    Examples
    --------
    A cubic reduced to a line keeping both endpoints:

    >>> import torch
    >>> curve = BezierCurve(
    ...     control_points=torch.tensor([[0.0, 0.0], [1.0, 2.0],
    ...                                  [2.0, 2.0], [3.0, 0.0]]),
    ...     extrapolate="error",
    ...     batch_size=[],
    ... )
    >>> bezier_reduce(curve, 1, 1, 1).control_points
    tensor([[0., 0.],
            [3., 0.]])
    """
    from ._bezier import BezierCurve

    control_points = curve.control_points

    reduction = degree_reduction_matrix(
        curve.degree,
        degree,
        start_continuity,
        end_continuity,
        dtype=control_points.dtype,
        device=control_points.device,
    )

    return BezierCurve(
        control_points=_apply(reduction, control_points),
        extrapolate=curve.extrapolate,
        batch_size=[],
    )

"""Bezier curve degree elevation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torchbezier.degree_reduction import degree_elevation_matrix

if TYPE_CHECKING:
    from ._bezier import BezierCurve


def bezier_elevate(curve: BezierCurve, degree: int) -> BezierCurve:
    """
    Represent a Bezier curve with more control points.

    The elevated curve traces exactly the same points as the original.

    Parameters
    ----------
    curve : BezierCurve
        Curve of degree m.
    degree : int
        New degree, at least m.

    Returns
    -------
    BezierCurve
        Curve of the requested degree with the same extrapolation mode.

    Raises
    ------
    InvalidDegreeError
        If ``degree`` is below the degree of the curve.

    Examples
    --------
    >>> import torch
    >>> curve = BezierCurve(
    ...     control_points=torch.tensor([0.0, 1.0]),
    ...     extrapolate="error",
    ...     batch_size=[],
    ... )
    >>> bezier_elevate(curve, 2).control_points
    tensor([0.0000, 0.5000, 1.0000])
    """
    from ._bezier import BezierCurve

    control_points = curve.control_points

    elevation = degree_elevation_matrix(
        curve.degree,
        degree,
        dtype=control_points.dtype,
        device=control_points.device,
    )

    return BezierCurve(
        control_points=_apply(elevation, control_points),
        extrapolate=curve.extrapolate,
        batch_size=[],
    )


def _apply(matrix, control_points):
    # Contract the matrix with the control point axis, keeping value axes.
    flat = control_points.reshape(control_points.shape[0], -1)
    return (matrix @ flat).reshape(
        matrix.shape[0], *control_points.shape[1:]
    )

"""Bezier curve evaluation using De Casteljau's algorithm."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError

if TYPE_CHECKING:
    from ._bezier import BezierCurve


def bezier_evaluate(
    curve: BezierCurve,
    t: Tensor,
) -> Tensor:
    """
    Evaluate a Bezier curve with De Casteljau's algorithm.

    Parameters
    ----------
    curve : BezierCurve
        Curve with control points of shape (n+1, *value_shape).
    t : Tensor
        Parameter values, shape (*query_shape).

    Returns
    -------
    points : Tensor
        Curve values, shape (*query_shape, *value_shape).

    Raises
    ------
    ExtrapolationError
        If any parameter is outside [0, 1] and curve.extrapolate == "error".

    Notes
    -----
    Each of the n rounds replaces adjacent pairs of points by their convex
    combination:

        b_i^(k) = (1 - t) * b_i^(k-1) + t * b_{i+1}^(k-1)

    and B(t) = b_0^(n). Only convex combinations are formed for t in [0, 1],
    which keeps the evaluation stable at high degree.
    """
    control_points = curve.control_points

    t = torch.as_tensor(
        t, dtype=control_points.dtype, device=control_points.device
    )
    query_shape = t.shape
    t_flat = t.reshape(-1)

    if curve.extrapolate == "error":
        if torch.any(t_flat < 0) or torch.any(t_flat > 1):
            raise ExtrapolationError(
                "Parameter values outside [0, 1]. "
                "Use extrapolate='clamp' or 'extrapolate'."
            )
    elif curve.extrapolate == "clamp":
        t_flat = torch.clamp(t_flat, 0.0, 1.0)

    value_shape = control_points.shape[1:]
    n_points = t_flat.shape[0]

    # (n_points, n+1, *value_shape)
    work = control_points.unsqueeze(0).expand(
        n_points, *control_points.shape
    )
    t_exp = t_flat.view(-1, 1, *([1] * len(value_shape)))

    for _ in range(control_points.shape[0] - 1):
        work = (1 - t_exp) * work[:, :-1] + t_exp * work[:, 1:]

    return work[:, 0].reshape(query_shape + value_shape)

"""Bezier curve representation and convenience function."""

from typing import Callable

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._bezier_evaluate import bezier_evaluate

_EXTRAPOLATE_MODES = ("error", "clamp", "extrapolate")


@tensorclass
class BezierCurve:
    """Bezier curve on the parameter interval [0, 1].

    A curve of degree n has n+1 control points; it starts at the first
    control point (t=0) and ends at the last one (t=1).

    Attributes
    ----------
    control_points : Tensor
        Control points, shape (n+1,) for a scalar curve or
        (n+1, *value_shape) for a vector-valued one.
    extrapolate : str
        How to handle parameters outside [0, 1]: "error", "clamp" or
        "extrapolate".
    """

    control_points: Tensor
    extrapolate: str

    @property
    def degree(self) -> int:
        """Polynomial degree, one less than the number of control points."""
        return self.control_points.shape[0] - 1


def bezier(
    control_points: torch.Tensor,
    extrapolate: str = "error",
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a Bezier curve evaluator from control points.

    Parameters
    ----------
    control_points : Tensor
        Control points, shape (n+1, *value_shape) for degree n.
    extrapolate : str, optional
        One of ``"error"`` (default), ``"clamp"`` or ``"extrapolate"``.

    Returns
    -------
    curve : Callable[[Tensor], Tensor]
        Function evaluating the curve at parameter values.

    Raises
    ------
    ValueError
        If there are no control points or ``extrapolate`` is unknown.

    Examples
    --------
    >>> import torch
    >>> curve = bezier(torch.tensor([0.0, 2.0, 1.0]))
    >>> curve(torch.tensor([0.0, 0.5, 1.0]))
    tensor([0.0000, 1.2500, 1.0000])
    """
    if control_points.dim() == 0 or control_points.shape[0] == 0:
        raise ValueError("A Bezier curve needs at least one control point")

    if extrapolate not in _EXTRAPOLATE_MODES:
        raise ValueError(
            f"extrapolate must be one of {_EXTRAPOLATE_MODES}, "
            f"got {extrapolate!r}"
        )

    curve = BezierCurve(
        control_points=control_points,
        extrapolate=extrapolate,
        batch_size=[],
    )
    return lambda t: bezier_evaluate(curve, t)

from ._spline_error import SplineError


class ExtrapolationError(SplineError):
    """Raised when a curve parameter lies outside [0, 1] with extrapolate='error'."""

    pass

class SplineError(Exception):
    """Base exception for spline and Bezier curve operations."""

    pass

from ._degree_reduction_error import DegreeReductionError


class InvalidDegreeError(DegreeReductionError):
    """Raised when a degree is negative or the target exceeds the source."""

    pass

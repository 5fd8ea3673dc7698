class DegreeReductionError(Exception):
    """Base exception for degree reduction operations."""

    pass

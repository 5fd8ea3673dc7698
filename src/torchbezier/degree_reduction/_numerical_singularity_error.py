from ._degree_reduction_error import DegreeReductionError


class NumericalSingularityError(DegreeReductionError):
    """Raised when the bordered reduction system has no unique solution.

    Also raised when an entry of the result overflows the requested dtype.
    """

    pass

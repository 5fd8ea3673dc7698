from ._degree_reduction_error import DegreeReductionError


class InvalidConstraintError(DegreeReductionError):
    """Raised when continuity orders are negative or over-determine the target.

    At most ``m + 1`` endpoint conditions can be imposed on a degree-``m``
    polynomial, so ``r + s`` must not exceed ``m + 1``.
    """

    pass

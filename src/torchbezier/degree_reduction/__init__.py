"""Constrained least-squares degree reduction of Bezier curves.

Reduction
---------
degree_reduction_matrix
    (m+1) x (n+1) matrix mapping degree-n control points to the closest
    degree-m control points under endpoint derivative constraints.
reduction_matrix
    The same matrix written row-major into a flat buffer.

Building Blocks
---------------
bernstein_gram_matrix
    L2([0, 1]) inner products of two Bernstein bases.
endpoint_constraints
    Derivative-matching conditions at t = 0 and t = 1.
degree_elevation_matrix
    Exact degree elevation, the right inverse of every reduction matrix.

Exceptions
----------
DegreeReductionError
    Base exception for degree reduction operations.
InvalidDegreeError
    Negative degree or target degree above the source degree.
InvalidConstraintError
    Negative continuity order or more endpoint conditions than the target
    degree can satisfy.
NumericalSingularityError
    The reduction system could not be solved.
"""

from ._bernstein_gram_matrix import bernstein_gram_matrix
from ._degree_elevation_matrix import degree_elevation_matrix
from ._degree_reduction_error import DegreeReductionError
from ._degree_reduction_matrix import degree_reduction_matrix
from ._endpoint_constraints import EndpointConstraints, endpoint_constraints
from ._invalid_constraint_error import InvalidConstraintError
from ._invalid_degree_error import InvalidDegreeError
from ._numerical_singularity_error import NumericalSingularityError
from ._reduction_matrix import reduction_matrix

__all__ = [
    "DegreeReductionError",
    "EndpointConstraints",
    "InvalidConstraintError",
    "InvalidDegreeError",
    "NumericalSingularityError",
    "bernstein_gram_matrix",
    "degree_elevation_matrix",
    "degree_reduction_matrix",
    "endpoint_constraints",
    "reduction_matrix",
]

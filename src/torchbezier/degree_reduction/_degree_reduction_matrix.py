"""Constrained least-squares degree reduction of Bezier curves."""

import warnings
from typing import Optional

import torch
from torch import Tensor

from torchbezier.linear_algebra import bordered_solve

from ._as_tensor import as_tensor
from ._bernstein_gram_matrix import _bernstein_gram_exact
from ._endpoint_constraints import _endpoint_constraints_exact
from ._numerical_singularity_error import NumericalSingularityError
from ._validate import check_continuity, check_degrees

# Above this target degree the matrix has large entries of alternating sign,
# and rounding them to anything narrower than float64 cancels badly when the
# matrix is applied.
_LARGE_DEGREE_THRESHOLD_REDUCED_PRECISION = 10


def degree_reduction_matrix(
    n: int,
    m: int,
    r: int = 0,
    s: int = 0,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""
    Constrained least-squares degree reduction matrix.

    Returns the matrix :math:`Q` mapping the control points :math:`p` of a
    degree-n Bezier curve to the control points :math:`q = Q p` of the
    degree-m curve that minimises

    .. math::

        \int_0^1 \left( \sum_{i=0}^{m} q_i b_{i,m}(t)
                      - \sum_{j=0}^{n} p_j b_{j,n}(t) \right)^2 dt

    subject to matching the derivatives of orders :math:`0, \ldots, r-1` at
    :math:`t = 0` and :math:`0, \ldots, s-1` at :math:`t = 1`.

    Parameters
    ----------
    n : int
        Source degree (``n + 1`` control points).
    m : int
        Target degree (``m + 1`` control points). Must satisfy
        ``0 <= m <= n``.
    r : int, optional
        Number of derivatives preserved at the start. Default: 0.
    s : int, optional
        Number of derivatives preserved at the end. Default: 0.
        ``r + s`` must not exceed ``m + 1``.
    dtype : torch.dtype, optional
        Output dtype. Default: ``torch.float64``. The system is solved
        exactly and only the result is rounded to this dtype.
    device : torch.device, optional
        Output device. Default: CPU.

    Returns
    -------
    Tensor
        Matrix of shape ``(m + 1, n + 1)``. Entry ``[i, j]`` is the weight of
        source control point ``j`` in target control point ``i``.

    Raises
    ------
    TypeError
        If a degree or continuity order is not an int.
    InvalidDegreeError
        If a degree is negative or ``m > n``.
    InvalidConstraintError
        If ``r`` or ``s`` is negative or ``r + s > m + 1``.
    NumericalSingularityError
        If the bordered system is singular, or an entry of the result
        overflows ``dtype``.

    Warns
    -----
    RuntimeWarning
        If ``m`` is large and ``dtype`` is narrower than float64.

    Notes
    -----
    With Gram matrices :math:`G = \langle b_{\cdot,m}, b_{\cdot,m} \rangle`
    and :math:`B = \langle b_{\cdot,m}, b_{\cdot,n} \rangle` and endpoint
    conditions :math:`C q = D p`, every column of :math:`Q` solves the
    bordered system

    .. math::

        \begin{bmatrix} G & C^T \\ C & 0 \end{bmatrix}
        \begin{bmatrix} Q \\ \Lambda \end{bmatrix}
        =
        \begin{bmatrix} B \\ D \end{bmatrix}

    Without constraints this is the orthogonal projection
    :math:`Q = G^{-1} B`. When ``r + s = m + 1`` the constraints alone
    determine :math:`Q` and the curve is interpolated at its endpoints.

    Since a degree-m curve is reproduced exactly, ``n == m`` yields the
    identity, and :math:`Q E = I` for the degree elevation matrix
    :math:`E` from m to n.

    The Gram matrix of the Bernstein basis grows more ill-conditioned by
    roughly a factor of four per degree, so a floating-point factorisation
    loses every digit by the time m reaches the twenties. The system is
    therefore assembled from exact binomial ratios and eliminated in
    rational arithmetic (see
    :func:`torchbezier.linear_algebra.bordered_solve`). Each entry of
    :math:`Q` is the correctly rounded exact value.

    Examples
    --------
    Reduce a degree-3 curve to degree 2 keeping its endpoints:

    >>> degree_reduction_matrix(3, 2, 1, 1)
    tensor([[ 1.0000,  0.0000,  0.0000,  0.0000],
            [-0.2500,  0.7500,  0.7500, -0.2500],
            [ 0.0000,  0.0000,  0.0000,  1.0000]], dtype=torch.float64)
    """
    n, m = check_degrees(n, m)
    r, s = check_continuity(m, r, s)

    if (
        dtype in (torch.float16, torch.bfloat16, torch.float32)
        and m > _LARGE_DEGREE_THRESHOLD_REDUCED_PRECISION
    ):
        warnings.warn(
            f"Target degree {m} with {dtype} may lose most significant "
            "digits. Consider using float64 for better stability.",
            RuntimeWarning,
            stacklevel=2,
        )

    if n == m:
        return torch.eye(m + 1, dtype=dtype, device=device)

    gram = _bernstein_gram_exact(m, m)
    cross_gram = _bernstein_gram_exact(m, n)
    lhs, rhs = _endpoint_constraints_exact(n, m, r, s)

    result = bordered_solve(gram, lhs, cross_gram, rhs)

    if result.info != 0:
        raise NumericalSingularityError(
            f"Reduction system for n={n}, m={m}, r={r}, s={s} is singular "
            f"(no pivot in column {result.info - 1})"
        )

    matrix = as_tensor(result.solution, n + 1, dtype=dtype, device=device)

    if not torch.all(torch.isfinite(matrix)):
        raise NumericalSingularityError(
            f"Reduction system for n={n}, m={m}, r={r}, s={s} produced "
            f"non-finite entries in {dtype}"
        )

    return matrix

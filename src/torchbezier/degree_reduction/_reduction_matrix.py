from typing import Optional

import torch
from torch import Tensor

from ._degree_reduction_matrix import degree_reduction_matrix
from ._validate import check_continuity, check_degrees


def reduction_matrix(
    n: int,
    m: int,
    r: int,
    s: int,
    out: Optional[Tensor] = None,
) -> Tensor:
    """
    Degree reduction matrix flattened in row-major order.

    Writes ``Q[i, j]`` of :func:`degree_reduction_matrix` to
    ``out[i * (n + 1) + j]`` for ``0 <= i <= m`` and ``0 <= j <= n``.

    Parameters
    ----------
    n : int
        Source degree.
    m : int
        Target degree, ``m <= n``.
    r : int
        Number of derivatives preserved at the start.
    s : int
        Number of derivatives preserved at the end.
    out : Tensor, optional
        One-dimensional destination of length ``(m + 1) * (n + 1)``. The
        matrix is computed in its dtype and on its device. If None, a new
        float64 tensor is allocated.

    Returns
    -------
    Tensor
        ``out``, or the newly allocated flat tensor.

    Raises
    ------
    InvalidDegreeError
        If a degree is negative or ``m > n``.
    InvalidConstraintError
        If ``r`` or ``s`` is negative or ``r + s > m + 1``.
    NumericalSingularityError
        If the reduction system cannot be solved.
    ValueError
        If ``out`` is not one-dimensional, has the wrong length or does not
        have a floating-point dtype.

    Notes
    -----
    ``out`` is written only after the whole matrix has been computed, so it
    is left untouched whenever an exception is raised.

    Examples
    --------
    >>> import torch
    >>> out = torch.empty(6 * 8, dtype=torch.float64)
    >>> reduction_matrix(7, 5, 1, 1, out).view(6, 8)[0]
    tensor([1., 0., 0., 0., 0., 0., 0., 0.], dtype=torch.float64)
    """
    n, m = check_degrees(n, m)
    r, s = check_continuity(m, r, s)

    size = (m + 1) * (n + 1)

    if out is None:
        return degree_reduction_matrix(n, m, r, s).reshape(size)

    if out.dim() != 1:
        raise ValueError(
            f"out must be one-dimensional, got shape {tuple(out.shape)}"
        )

    if out.shape[0] != size:
        raise ValueError(
            f"out must have length (m + 1) * (n + 1) = {size}, "
            f"got {out.shape[0]}"
        )

    if not out.is_floating_point():
        raise ValueError(
            f"out must have a floating-point dtype, got {out.dtype}"
        )

    matrix = degree_reduction_matrix(
        n,
        m,
        r,
        s,
        dtype=out.dtype,
        device=out.device,
    )

    with torch.no_grad():
        out.copy_(matrix.reshape(size))

    return out

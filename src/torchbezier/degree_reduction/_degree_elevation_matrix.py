from typing import Optional

import torch
from torch import Tensor

from torchbezier.combinatorics import binomial_table

from ._validate import check_degrees


def degree_elevation_matrix(
    m: int,
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""
    Degree elevation matrix of Bezier curves.

    Returns :math:`E` such that the degree-m curve with control points
    :math:`q` equals the degree-n curve with control points :math:`E q`:

    .. math::

        E_{j,i} = \frac{\binom{m}{i} \binom{n-m}{j-i}}{\binom{n}{j}}

    for :math:`\max(0, j - n + m) \le i \le \min(m, j)`, zero otherwise.

    Parameters
    ----------
    m : int
        Source degree.
    n : int
        Target degree, ``n >= m``.
    dtype : torch.dtype, optional
        Output dtype. Default: ``torch.float64``.
    device : torch.device, optional
        Output device. Default: CPU.

    Returns
    -------
    Tensor
        Matrix of shape ``(n + 1, m + 1)``. Rows sum to one.

    Raises
    ------
    InvalidDegreeError
        If a degree is negative or ``m > n``.

    Examples
    --------
    Elevating a line to a quadratic inserts the midpoint:

    >>> degree_elevation_matrix(1, 2)
    tensor([[1.0000, 0.0000],
            [0.5000, 0.5000],
            [0.0000, 1.0000]], dtype=torch.float64)
    """
    n, m = check_degrees(n, m)

    table = binomial_table(n, dtype=torch.float64, device=device)

    j = torch.arange(n + 1, device=device).unsqueeze(-1)
    i = torch.arange(m + 1, device=device).unsqueeze(0)
    shift = j - i

    valid = (shift >= 0) & (shift <= n - m)

    numerator = table[m, i] * table[n - m][shift.clamp(0, n - m)]
    elevation = torch.where(
        valid,
        numerator / table[n, j],
        torch.zeros((), dtype=torch.float64, device=device),
    )

    return elevation.to(dtype)

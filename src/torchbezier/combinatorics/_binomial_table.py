from typing import Optional

import torch
from torch import Tensor

from ._binomial_rows import binomial_rows


def binomial_table(
    n: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""
    Table of binomial coefficients up to degree ``n``.

    Builds Pascal's triangle as a lower-triangular matrix:

    .. math::

        T_{k,i} = \binom{k}{i}, \quad 0 \le i \le k \le n

    with zeros above the diagonal.

    The entries come from :func:`binomial_rows`, so each one is the exact
    integer rounded once to ``dtype``. Entries below :math:`2^{53}` are
    exact in float64 and every entry stays finite for ``n`` up to 1000.

    Parameters
    ----------
    n : int
        Largest degree in the table. Must be non-negative.
    dtype : torch.dtype, optional
        Output dtype. Default: ``torch.float64``.
    device : torch.device, optional
        Output device. Default: CPU.

    Returns
    -------
    Tensor
        Table of shape ``(n + 1, n + 1)``.

    Raises
    ------
    ValueError
        If ``n`` is negative.

    Examples
    --------
    >>> binomial_table(4)[4]
    tensor([1., 4., 6., 4., 1.], dtype=torch.float64)
    """
    rows = [
        [float(value) for value in row] + [0.0] * (n - k)
        for k, row in enumerate(binomial_rows(n))
    ]

    return torch.tensor(rows, dtype=torch.float64, device=device).to(dtype)

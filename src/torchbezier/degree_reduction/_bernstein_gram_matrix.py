from fractions import Fraction
from typing import List, Optional

import torch
from torch import Tensor

from torchbezier.combinatorics import binomial_rows

from ._as_tensor import as_tensor
from ._validate import check_degree


def _bernstein_gram_exact(m: int, n: int) -> List[List[Fraction]]:
    table = binomial_rows(m + n)

    return [
        [
            Fraction(
                table[m][i] * table[n][j],
                (m + n + 1) * table[m + n][i + j],
            )
            for j in range(n + 1)
        ]
        for i in range(m + 1)
    ]


def bernstein_gram_matrix(
    m: int,
    n: Optional[int] = None,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    r"""
    Gram matrix of two Bernstein bases on :math:`[0, 1]`.

    .. math::

        G_{i,j} = \int_0^1 b_{i,m}(t) \, b_{j,n}(t) \, dt
                = \frac{\binom{m}{i} \binom{n}{j}}
                       {(m + n + 1) \binom{m + n}{i + j}}

    where :math:`b_{i,m}(t) = \binom{m}{i} t^i (1 - t)^{m - i}`.

    Parameters
    ----------
    m : int
        Degree of the row basis.
    n : int, optional
        Degree of the column basis. Defaults to ``m``, giving the symmetric
        positive definite Gram matrix of a single basis.
    dtype : torch.dtype, optional
        Output dtype. Default: ``torch.float64``.
    device : torch.device, optional
        Output device. Default: CPU.

    Returns
    -------
    Tensor
        Matrix of shape ``(m + 1, n + 1)``.

    Raises
    ------
    InvalidDegreeError
        If a degree is negative.

    Notes
    -----
    The column basis sums to one and every degree-m Bernstein polynomial
    integrates to :math:`1 / (m + 1)`, so every row sums to
    :math:`1 / (m + 1)`.

    Each entry is formed as an exact fraction and rounded once, so the
    matrix is exactly symmetric when ``n == m``.

    Examples
    --------
    >>> bernstein_gram_matrix(1)
    tensor([[0.3333, 0.1667],
            [0.1667, 0.3333]], dtype=torch.float64)
    """
    if n is None:
        n = m

    m = check_degree("m", m)
    n = check_degree("n", n)

    return as_tensor(
        _bernstein_gram_exact(m, n),
        n + 1,
        dtype=dtype,
        device=device,
    )

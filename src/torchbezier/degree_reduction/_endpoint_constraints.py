"""Endpoint derivative constraints for constrained degree reduction."""

from fractions import Fraction
from typing import List, NamedTuple, Optional, Tuple

import torch
from torch import Tensor

from torchbezier.combinatorics import binomial_rows, falling_factorial_ratio

from ._as_tensor import as_tensor
from ._validate import check_continuity, check_degrees


class EndpointConstraints(NamedTuple):
    """Linear conditions ``lhs @ q = rhs @ p`` on target control points."""

    lhs: Tensor
    rhs: Tensor


def _endpoint_constraints_exact(
    n: int,
    m: int,
    r: int,
    s: int,
) -> Tuple[List[List[Fraction]], List[List[Fraction]]]:
    lhs = [[Fraction(0)] * (m + 1) for _ in range(r + s)]
    rhs = [[Fraction(0)] * (n + 1) for _ in range(r + s)]

    order = max(r, s)
    if order == 0:
        return lhs, rhs

    table = binomial_rows(order - 1)

    for k in range(order):
        difference = [
            Fraction((-1) ** (k - i) * table[k][i]) for i in range(k + 1)
        ]
        scaled = [falling_factorial_ratio(n, m, k) * v for v in difference]

        if k < r:
            lhs[k][: k + 1] = difference
            rhs[k][: k + 1] = scaled

        if k < s:
            lhs[r + k][m - k :] = difference
            rhs[r + k][n - k :] = scaled

    return lhs, rhs


def endpoint_constraints(
    n: int,
    m: int,
    r: int,
    s: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> EndpointConstraints:
    r"""
    Derivative-matching conditions at the endpoints of :math:`[0, 1]`.

    The k-th derivative of a degree-m Bezier curve with control points
    :math:`q` is

    .. math::

        q^{(k)}(0) = m^{\underline{k}} \Delta^k q_0, \qquad
        q^{(k)}(1) = m^{\underline{k}} \Delta^k q_{m-k}

    with forward differences
    :math:`\Delta^k q_i = \sum_{l=0}^{k} (-1)^{k-l} \binom{k}{l} q_{i+l}`.
    Equating these with the derivatives of the degree-n source and dividing
    by :math:`m^{\underline{k}}` gives

    .. math::

        \Delta^k q_0 = \rho_k \Delta^k p_0, \qquad
        \Delta^k q_{m-k} = \rho_k \Delta^k p_{n-k}, \qquad
        \rho_k = \frac{n^{\underline{k}}}{m^{\underline{k}}}

    for :math:`k = 0, \ldots, r-1` at the start and
    :math:`k = 0, \ldots, s-1` at the end.

    Parameters
    ----------
    n : int
        Source degree.
    m : int
        Target degree, ``m <= n``.
    r : int
        Number of derivatives (orders ``0..r-1``) preserved at ``t = 0``.
    s : int
        Number of derivatives (orders ``0..s-1``) preserved at ``t = 1``.
    dtype : torch.dtype, optional
        Output dtype. Default: ``torch.float64``.
    device : torch.device, optional
        Output device. Default: CPU.

    Returns
    -------
    EndpointConstraints
        Named tuple with fields:

        - **lhs** -- shape ``(r + s, m + 1)``, acting on target control
          points.
        - **rhs** -- shape ``(r + s, n + 1)``, acting on source control
          points.

        Start conditions come first, ordered by derivative order, then end
        conditions.

    Raises
    ------
    InvalidDegreeError
        If ``m > n`` or a degree is negative.
    InvalidConstraintError
        If ``r`` or ``s`` is negative or ``r + s > m + 1``.

    Examples
    --------
    Endpoint interpolation (``r = s = 1``) pins the first and last control
    points:

    >>> lhs, rhs = endpoint_constraints(3, 2, 1, 1)
    >>> lhs
    tensor([[1., 0., 0.],
            [0., 0., 1.]], dtype=torch.float64)
    >>> rhs
    tensor([[1., 0., 0., 0.],
            [0., 0., 0., 1.]], dtype=torch.float64)
    """
    n, m = check_degrees(n, m)
    r, s = check_continuity(m, r, s)

    lhs, rhs = _endpoint_constraints_exact(n, m, r, s)

    return EndpointConstraints(
        as_tensor(lhs, m + 1, dtype=dtype, device=device),
        as_tensor(rhs, n + 1, dtype=dtype, device=device),
    )

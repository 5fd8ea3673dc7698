from functools import lru_cache
from typing import Tuple


@lru_cache(maxsize=32)
def binomial_rows(n: int) -> Tuple[Tuple[int, ...], ...]:
    r"""
    Rows of Pascal's triangle as exact integers.

    Row ``k`` holds :math:`\binom{k}{0}, \ldots, \binom{k}{k}`, built with
    the multiplicative recurrence

    .. math::

        \binom{k}{i} = \binom{k}{i-1} \frac{k - i + 1}{i}

    in integer arithmetic. Every division is exact, so no entry is ever
    rounded however large it grows.

    Parameters
    ----------
    n : int
        Largest degree. Must be non-negative.

    Returns
    -------
    tuple of tuple of int
        ``n + 1`` rows, row ``k`` of length ``k + 1``.

    Raises
    ------
    ValueError
        If ``n`` is negative.

    Examples
    --------
    >>> binomial_rows(3)
    ((1,), (1, 1), (1, 2, 1), (1, 3, 3, 1))
    """
    if n < 0:
        raise ValueError(f"Degree must be non-negative, got {n}")

    rows = []
    for k in range(n + 1):
        row = [1]
        for i in range(1, k + 1):
            row.append(row[-1] * (k - i + 1) // i)
        rows.append(tuple(row))

    return tuple(rows)

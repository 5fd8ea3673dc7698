"""Equality-constrained least squares via the bordered system."""

import math
from fractions import Fraction
from typing import Sequence

from torchbezier.linear_algebra._result_types import BorderedSolveResult

Matrix = Sequence[Sequence]


def bordered_solve(
    a: Matrix,
    c: Matrix,
    b: Matrix,
    d: Matrix,
) -> BorderedSolveResult:
    r"""
    Solve an equality-constrained quadratic problem by its bordered system.

    For symmetric positive definite :math:`A` the minimiser of

    .. math::

        \frac{1}{2} x^T A x - x^T b \quad \text{subject to} \quad C x = d

    satisfies the bordered (Karush-Kuhn-Tucker) system

    .. math::

        \begin{bmatrix} A & C^T \\ C & 0 \end{bmatrix}
        \begin{bmatrix} x \\ \lambda \end{bmatrix}
        =
        \begin{bmatrix} b \\ d \end{bmatrix}

    Every column of ``b`` (paired with the same column of ``d``) is an
    independent right-hand side, so one elimination serves them all.

    Parameters
    ----------
    a : sequence of sequences
        Symmetric positive definite matrix of shape ``(p, p)``.
    c : sequence of sequences
        Constraint matrix of shape ``(k, p)``. ``k`` may be zero.
    b : sequence of sequences
        Right-hand sides of shape ``(p, q)``.
    d : sequence of sequences
        Constraint values of shape ``(k, q)``.

    Entries may be ints, :class:`~fractions.Fraction` or floats; floats are
    converted exactly.

    Returns
    -------
    BorderedSolveResult
        Named tuple with fields:

        - **solution** -- :math:`x` as a list of ``p`` rows of ``q``
          fractions.
        - **multipliers** -- :math:`\lambda` as a list of ``k`` rows of
          ``q`` fractions.
        - **info** -- zero on success. When column ``i`` of the bordered
          matrix has no non-zero pivot the matrix is singular, ``info`` is
          ``i + 1`` and both blocks are filled with NaN.

    Raises
    ------
    ValueError
        If the operand shapes are inconsistent.

    Notes
    -----
    The system is reduced by Gaussian elimination in rational arithmetic
    followed by back substitution, so the solution is exact. Each column is
    pivoted on its first non-zero entry at or below the diagonal. For
    positive definite :math:`A` and full-rank :math:`C` every leading pivot
    of :math:`A` is positive and the Schur complement
    :math:`-C A^{-1} C^T` is negative definite, so no row is ever exchanged.

    Examples
    --------
    Project onto the line :math:`x_0 = x_1`:

    >>> result = bordered_solve([[1, 0], [0, 1]], [[1, -1]], [[1], [3]], [[0]])
    >>> result.solution
    [[Fraction(2, 1)], [Fraction(2, 1)]]
    >>> result.multipliers
    [[Fraction(-1, 1)]]
    """
    p = len(a)

    if any(len(row) != p for row in a):
        raise ValueError(f"a must be a square matrix with {p} rows")

    if any(len(row) != p for row in c):
        raise ValueError(f"every row of c must have length {p}")

    if len(b) != p:
        raise ValueError(f"b must have {p} rows, got {len(b)}")

    k = len(c)
    q = len(b[0]) if p else 0

    if any(len(row) != q for row in b):
        raise ValueError(f"every row of b must have length {q}")

    if len(d) != k or any(len(row) != q for row in d):
        raise ValueError(f"d must have shape ({k}, {q})")

    size = p + k
    width = size + q
    zero = Fraction(0)

    rows = [
        [Fraction(value) for value in a[i]]
        + [Fraction(c[j][i]) for j in range(k)]
        + [Fraction(value) for value in b[i]]
        for i in range(p)
    ]
    rows += [
        [Fraction(value) for value in c[j]]
        + [zero] * k
        + [Fraction(value) for value in d[j]]
        for j in range(k)
    ]

    for column in range(size):
        pivot = next(
            (i for i in range(column, size) if rows[i][column] != 0),
            None,
        )
        if pivot is None:
            nan = [[math.nan] * q for _ in range(size)]
            return BorderedSolveResult(
                solution=nan[:p],
                multipliers=nan[p:],
                info=column + 1,
            )

        rows[column], rows[pivot] = rows[pivot], rows[column]
        pivot_row = rows[column]

        for i in range(column + 1, size):
            row = rows[i]
            if row[column] == 0:
                continue

            factor = row[column] / pivot_row[column]
            for j in range(column + 1, width):
                if pivot_row[j] != 0:
                    row[j] -= factor * pivot_row[j]
            row[column] = zero

    x = [None] * size
    for i in reversed(range(size)):
        row = rows[i]
        totals = row[size:]
        for j in range(i + 1, size):
            if row[j] != 0:
                totals = [
                    total - row[j] * known
                    for total, known in zip(totals, x[j])
                ]
        x[i] = [total / row[i] for total in totals]

    return BorderedSolveResult(solution=x[:p], multipliers=x[p:], info=0)

from fractions import Fraction


def falling_factorial_ratio(n: int, m: int, k: int) -> Fraction:
    r"""
    Ratio of falling factorials.

    .. math::

        \rho_k = \frac{n^{\underline{k}}}{m^{\underline{k}}}
               = \prod_{i=0}^{k-1} \frac{n - i}{m - i}

    This is the factor relating the k-th derivative of a degree-n
    Bernstein polynomial to that of a degree-m one at an endpoint of
    :math:`[0, 1]`. Both falling factorials are accumulated as integers, so
    the ratio is exact.

    Parameters
    ----------
    n : int
        Numerator degree.
    m : int
        Denominator degree.
    k : int
        Number of factors. Must satisfy ``0 <= k <= m``.

    Returns
    -------
    Fraction
        :math:`\rho_k`. Equal to 1 for ``k = 0``.

    Raises
    ------
    ValueError
        If ``k`` is negative or exceeds ``m``.

    Examples
    --------
    >>> falling_factorial_ratio(7, 5, 2)
    Fraction(21, 10)
    """
    if k < 0 or k > m:
        raise ValueError(
            f"Number of factors must satisfy 0 <= k <= m, got k={k}, m={m}"
        )

    numerator = 1
    denominator = 1
    for i in range(k):
        numerator *= n - i
        denominator *= m - i

    return Fraction(numerator, denominator)

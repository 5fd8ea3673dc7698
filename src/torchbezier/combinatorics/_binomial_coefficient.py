def binomial_coefficient(n: int, k: int) -> float:
    r"""
    Binomial coefficient.

    Computes :math:`\binom{n}{k}` for non-negative integer ``n`` with the
    multiplicative recurrence, iterating over the shorter side of the
    symmetry :math:`\binom{n}{k} = \binom{n}{n-k}`.

    Special Values
    --------------
    - C(n, 0) = C(n, n) = 1
    - C(n, k) = 0 for k < 0 or k > n

    Parameters
    ----------
    n : int
        Number of items to choose from.
    k : int
        Number of items to choose.

    Returns
    -------
    float
        The binomial coefficient as a double.

    Examples
    --------
    >>> binomial_coefficient(7, 3)
    35.0
    >>> binomial_coefficient(3, 5)
    0.0
    """
    if k < 0 or k > n:
        return 0.0

    k = min(k, n - k)

    result = 1.0
    for i in range(1, k + 1):
        result = result * (n - k + i) / i

    return result

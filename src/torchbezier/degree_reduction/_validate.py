import operator

from ._invalid_constraint_error import InvalidConstraintError
from ._invalid_degree_error import InvalidDegreeError


def _check_integer(name: str, value) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got bool")

    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an int, got {type(value).__name__}"
        ) from None


def check_degree(name: str, value: int) -> int:
    """Validate a single polynomial degree: a non-negative integer."""
    value = _check_integer(name, value)

    if value < 0:
        raise InvalidDegreeError(
            f"Degree {name} must be non-negative, got {value}"
        )

    return value


def check_degrees(n: int, m: int) -> tuple:
    """Validate a (source, target) degree pair: ``0 <= m <= n``."""
    n = check_degree("n", n)
    m = check_degree("m", m)

    if m > n:
        raise InvalidDegreeError(
            f"Target degree m={m} must not exceed source degree n={n}"
        )

    return n, m


def check_continuity(m: int, r: int, s: int) -> tuple:
    """Validate continuity orders: ``r, s >= 0`` and ``r + s <= m + 1``."""
    r = _check_integer("r", r)
    s = _check_integer("s", s)

    if r < 0 or s < 0:
        raise InvalidConstraintError(
            f"Continuity orders must be non-negative, got r={r}, s={s}"
        )

    if r + s > m + 1:
        raise InvalidConstraintError(
            f"Cannot impose r + s = {r + s} endpoint conditions on a "
            f"degree-{m} polynomial (at most {m + 1})"
        )

    return r, s

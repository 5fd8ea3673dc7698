from ._binomial_coefficient import binomial_coefficient
from ._binomial_rows import binomial_rows
from ._binomial_table import binomial_table
from ._falling_factorial_ratio import falling_factorial_ratio

__all__ = [
    "binomial_coefficient",
    "binomial_rows",
    "binomial_table",
    "falling_factorial_ratio",
]

import math
from fractions import Fraction

import pytest
import torch
import torch.testing

import torchbezier.combinatorics


class TestBinomialTable:
    """Tests for the Pascal table."""

    def test_pascals_triangle_row_5(self):
        """Row 5 matches Pascal's triangle."""
        table = torchbezier.combinatorics.binomial_table(5)
        expected = torch.tensor(
            [1.0, 5.0, 10.0, 10.0, 5.0, 1.0], dtype=torch.float64
        )
        torch.testing.assert_close(table[5], expected, rtol=0, atol=0)

    def test_shape_and_dtype(self):
        table = torchbezier.combinatorics.binomial_table(7)
        assert table.shape == (8, 8)
        assert table.dtype == torch.float64

    def test_dtype_argument(self):
        table = torchbezier.combinatorics.binomial_table(
            3, dtype=torch.float32
        )
        assert table.dtype == torch.float32

    def test_zero_above_diagonal(self):
        table = torchbezier.combinatorics.binomial_table(6)
        assert torch.all(torch.triu(table, diagonal=1) == 0)

    def test_degree_zero(self):
        table = torchbezier.combinatorics.binomial_table(0)
        torch.testing.assert_close(
            table, torch.ones(1, 1, dtype=torch.float64)
        )

    def test_exact_against_math_comb(self):
        """Entries equal math.comb exactly while below 2**53."""
        n = 50
        table = torchbezier.combinatorics.binomial_table(n)
        for k in range(n + 1):
            for i in range(k + 1):
                assert table[k, i].item() == float(math.comb(k, i))

    def test_row_sums_are_powers_of_two(self):
        table = torchbezier.combinatorics.binomial_table(30)
        expected = 2.0 ** torch.arange(31, dtype=torch.float64)
        torch.testing.assert_close(table.sum(dim=1), expected)

    def test_symmetry(self):
        n = 20
        table = torchbezier.combinatorics.binomial_table(n)
        for k in range(n + 1):
            torch.testing.assert_close(
                table[k, : k + 1], table[k, : k + 1].flip(0)
            )

    def test_large_degree_is_finite(self):
        """No overflow for degrees in the hundreds."""
        table = torchbezier.combinatorics.binomial_table(600)
        assert torch.all(torch.isfinite(table))
        torch.testing.assert_close(
            table[600, 300],
            torch.tensor(float(math.comb(600, 300)), dtype=torch.float64),
            rtol=1e-12,
            atol=0,
        )

    def test_negative_degree_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            torchbezier.combinatorics.binomial_table(-1)


class TestBinomialCoefficient:
    """Tests for the scalar binomial coefficient."""

    def test_known_values(self):
        assert torchbezier.combinatorics.binomial_coefficient(7, 3) == 35.0
        assert torchbezier.combinatorics.binomial_coefficient(10, 0) == 1.0
        assert torchbezier.combinatorics.binomial_coefficient(10, 10) == 1.0

    def test_out_of_range_is_zero(self):
        assert torchbezier.combinatorics.binomial_coefficient(3, 5) == 0.0
        assert torchbezier.combinatorics.binomial_coefficient(3, -1) == 0.0

    def test_matches_table(self):
        table = torchbezier.combinatorics.binomial_table(40)
        for i in range(41):
            assert (
                torchbezier.combinatorics.binomial_coefficient(40, i)
                == table[40, i].item()
            )


class TestFallingFactorialRatio:
    """Tests for the ratio of falling factorials."""

    def test_zero_factors_is_one(self):
        ratio = torchbezier.combinatorics.falling_factorial_ratio(7, 5, 0)
        assert ratio == 1.0

    def test_against_factorials(self):
        n, m = 9, 6
        for k in range(m + 1):
            expected = (
                math.factorial(n)
                / math.factorial(n - k)
                / (math.factorial(m) / math.factorial(m - k))
            )
            assert torchbezier.combinatorics.falling_factorial_ratio(
                n, m, k
            ) == pytest.approx(expected, rel=1e-14)

    def test_equal_degrees(self):
        for k in range(6):
            assert torchbezier.combinatorics.falling_factorial_ratio(
                5, 5, k
            ) == pytest.approx(1.0)

    def test_too_many_factors_raises(self):
        with pytest.raises(ValueError):
            torchbezier.combinatorics.falling_factorial_ratio(7, 5, 6)

    def test_exact_fraction(self):
        ratio = torchbezier.combinatorics.falling_factorial_ratio(60, 30, 15)
        expected = Fraction(
            math.perm(60, 15),
            math.perm(30, 15),
        )
        assert ratio == expected


class TestBinomialRows:
    """Tests for exact integer rows of Pascal's triangle."""

    def test_small(self):
        assert torchbezier.combinatorics.binomial_rows(3) == (
            (1,),
            (1, 1),
            (1, 2, 1),
            (1, 3, 3, 1),
        )

    def test_exact_beyond_double_precision(self):
        rows = torchbezier.combinatorics.binomial_rows(120)
        for k in (60, 97, 120):
            assert rows[k] == tuple(math.comb(k, i) for i in range(k + 1))

    def test_entries_are_ints(self):
        rows = torchbezier.combinatorics.binomial_rows(10)
        assert all(type(value) is int for row in rows for value in row)

    def test_table_rounds_exact_rows(self):
        n = 80
        table = torchbezier.combinatorics.binomial_table(n)
        rows = torchbezier.combinatorics.binomial_rows(n)
        for i in range(n + 1):
            assert table[n, i].item() == float(rows[n][i])

    def test_negative_degree_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            torchbezier.combinatorics.binomial_rows(-1)

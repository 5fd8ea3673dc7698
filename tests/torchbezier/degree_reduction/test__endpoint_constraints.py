import pytest
import torch
import torch.testing

from torchbezier.degree_reduction import (
    EndpointConstraints,
    InvalidConstraintError,
    InvalidDegreeError,
    endpoint_constraints,
)


class TestEndpointConstraints:
    """Tests for endpoint derivative constraints."""

    def test_returns_named_tuple(self):
        constraints = endpoint_constraints(7, 5, 1, 1)
        assert isinstance(constraints, EndpointConstraints)

    @pytest.mark.parametrize(
        "n,m,r,s", [(7, 5, 0, 0), (7, 5, 1, 1), (7, 5, 3, 2), (4, 2, 0, 3)]
    )
    def test_shapes(self, n, m, r, s):
        lhs, rhs = endpoint_constraints(n, m, r, s)
        assert lhs.shape == (r + s, m + 1)
        assert rhs.shape == (r + s, n + 1)

    def test_endpoint_interpolation_rows(self):
        lhs, rhs = endpoint_constraints(7, 5, 1, 1)

        expected_lhs = torch.zeros(2, 6, dtype=torch.float64)
        expected_lhs[0, 0] = 1.0
        expected_lhs[1, 5] = 1.0
        expected_rhs = torch.zeros(2, 8, dtype=torch.float64)
        expected_rhs[0, 0] = 1.0
        expected_rhs[1, 7] = 1.0

        torch.testing.assert_close(lhs, expected_lhs, rtol=0, atol=0)
        torch.testing.assert_close(rhs, expected_rhs, rtol=0, atol=0)

    def test_tangent_rows(self):
        """First derivative rows scale differences by n / m."""
        n, m = 7, 5
        lhs, rhs = endpoint_constraints(n, m, 2, 2)

        torch.testing.assert_close(
            lhs[1, :2], torch.tensor([-1.0, 1.0], dtype=torch.float64)
        )
        torch.testing.assert_close(
            rhs[1, :2],
            torch.tensor([-n / m, n / m], dtype=torch.float64),
        )
        torch.testing.assert_close(
            lhs[3, -2:], torch.tensor([-1.0, 1.0], dtype=torch.float64)
        )
        torch.testing.assert_close(
            rhs[3, -2:],
            torch.tensor([-n / m, n / m], dtype=torch.float64),
        )

    def test_second_derivative_row(self):
        n, m = 6, 4
        lhs, rhs = endpoint_constraints(n, m, 3, 0)
        rho = (n * (n - 1)) / (m * (m - 1))

        torch.testing.assert_close(
            lhs[2, :3], torch.tensor([1.0, -2.0, 1.0], dtype=torch.float64)
        )
        torch.testing.assert_close(
            rhs[2, :3],
            rho * torch.tensor([1.0, -2.0, 1.0], dtype=torch.float64),
        )
        assert torch.all(lhs[2, 3:] == 0)
        assert torch.all(rhs[2, 3:] == 0)

    def test_matches_derivatives_of_elevated_curve(self):
        """An elevated curve satisfies its own constraints exactly."""
        from torchbezier.degree_reduction import degree_elevation_matrix

        n, m, r, s = 8, 5, 3, 3
        lhs, rhs = endpoint_constraints(n, m, r, s)
        q = torch.randn(m + 1, dtype=torch.float64)
        p = degree_elevation_matrix(m, n) @ q

        torch.testing.assert_close(lhs @ q, rhs @ p)

    def test_no_constraints(self):
        lhs, rhs = endpoint_constraints(7, 5, 0, 0)
        assert lhs.shape == (0, 6)
        assert rhs.shape == (0, 8)

    def test_fully_determined_is_square_and_invertible(self):
        lhs, _ = endpoint_constraints(9, 4, 3, 2)
        assert lhs.shape == (5, 5)
        assert torch.linalg.matrix_rank(lhs).item() == 5

    def test_dtype(self):
        lhs, rhs = endpoint_constraints(5, 3, 1, 1, dtype=torch.float32)
        assert lhs.dtype == torch.float32
        assert rhs.dtype == torch.float32

    def test_invalid_degrees_raise(self):
        with pytest.raises(InvalidDegreeError):
            endpoint_constraints(3, 5, 0, 0)

        with pytest.raises(InvalidDegreeError):
            endpoint_constraints(-1, 0, 0, 0)

    def test_too_many_constraints_raise(self):
        with pytest.raises(InvalidConstraintError):
            endpoint_constraints(7, 2, 2, 2)

    def test_negative_continuity_raises(self):
        with pytest.raises(InvalidConstraintError):
            endpoint_constraints(7, 5, -1, 0)

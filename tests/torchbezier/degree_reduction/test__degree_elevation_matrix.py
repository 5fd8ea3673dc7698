import pytest
import torch
import torch.testing

from torchbezier.degree_reduction import (
    InvalidDegreeError,
    degree_elevation_matrix,
)
from torchbezier.spline import BezierCurve, bezier_evaluate


class TestDegreeElevationMatrix:
    """Tests for degree elevation."""

    def test_line_to_quadratic(self):
        expected = torch.tensor(
            [[1.0, 0.0], [0.5, 0.5], [0.0, 1.0]], dtype=torch.float64
        )
        torch.testing.assert_close(degree_elevation_matrix(1, 2), expected)

    def test_single_step_formula(self):
        """Elevating by one: q_j = j/(m+1) p_{j-1} + (1 - j/(m+1)) p_j."""
        m = 4
        elevation = degree_elevation_matrix(m, m + 1)
        for j in range(m + 2):
            for i in range(m + 1):
                if i == j - 1:
                    expected = j / (m + 1)
                elif i == j:
                    expected = 1 - j / (m + 1)
                else:
                    expected = 0.0
                assert elevation[j, i].item() == pytest.approx(expected)

    def test_shape(self):
        assert degree_elevation_matrix(3, 7).shape == (8, 4)

    def test_same_degree_is_identity(self):
        torch.testing.assert_close(
            degree_elevation_matrix(5, 5), torch.eye(6, dtype=torch.float64)
        )

    def test_rows_sum_to_one(self):
        elevation = degree_elevation_matrix(3, 9)
        torch.testing.assert_close(
            elevation.sum(dim=1), torch.ones(10, dtype=torch.float64)
        )

    def test_curve_is_unchanged(self):
        m, n = 3, 8
        q = torch.randn(m + 1, 2, dtype=torch.float64)
        p = degree_elevation_matrix(m, n) @ q
        t = torch.linspace(0, 1, 11, dtype=torch.float64)

        original = BezierCurve(
            control_points=q, extrapolate="error", batch_size=[]
        )
        elevated = BezierCurve(
            control_points=p, extrapolate="error", batch_size=[]
        )

        torch.testing.assert_close(
            bezier_evaluate(elevated, t), bezier_evaluate(original, t)
        )

    def test_composes(self):
        torch.testing.assert_close(
            degree_elevation_matrix(5, 8) @ degree_elevation_matrix(2, 5),
            degree_elevation_matrix(2, 8),
        )

    def test_invalid_degrees_raise(self):
        with pytest.raises(InvalidDegreeError):
            degree_elevation_matrix(5, 3)

        with pytest.raises(InvalidDegreeError):
            degree_elevation_matrix(-1, 3)

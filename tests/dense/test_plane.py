"""
Tests for Plane.
"""

from fractions import Fraction

import pytest

from pylinsys.core.exceptions import DimensionError, ValidationError
from pylinsys.dense import Plane, Vector


class TestFromCoefficients:
    """Point lies on the first axis with a non-zero coefficient."""

    def test_point_on_x_axis(self):
        plane = Plane.from_coefficients(1, 2, 3, 7)
        assert plane.point.tolist() == [7, 0, 0]
        assert plane.normal.tolist() == [1, 2, 3]
        assert plane.coefficients == (1, 2, 3, 7)

    def test_point_on_y_axis(self):
        plane = Plane.from_coefficients(0, 2, 3, 8)
        assert plane.point.tolist() == [0, 4, 0]

    def test_point_on_z_axis(self):
        plane = Plane.from_coefficients(0, 0, 4, 2)
        assert plane.point.tolist() == [0, 0, 0.5]

    def test_fraction_coefficients_exact(self):
        plane = Plane.from_coefficients(Fraction(3), Fraction(1), 0, Fraction(1))
        assert plane.point[0] == Fraction(1, 3)
        assert plane.point.scalar_type is Fraction

    def test_point_is_on_plane(self):
        plane = Plane.from_coefficients(2, -1, 5, 10)
        assert plane.contains(plane.point)

    def test_degenerate(self):
        with pytest.raises(ValidationError):
            Plane.from_coefficients(0, 0, 0, 5)

    def test_non_scalar(self):
        with pytest.raises(ValidationError):
            Plane.from_coefficients(1, 2, "3", 4)


class TestFromNormalAndPoint:

    def test_constant(self):
        plane = Plane.from_normal_and_point([1, 2, 3], [1, 1, 1])
        assert plane.coefficients == (1, 2, 3, 6)
        assert plane.contains([1, 1, 1])
        assert plane.contains(Vector.from_values([6, 0, 0]))
        assert not plane.contains([0, 0, 0])

    def test_normal_is_copied(self):
        normal = Vector.from_values([0, 0, 1])
        plane = Plane.from_normal_and_point(normal, [0, 0, 2])
        normal[2] = 5
        assert plane.normal.tolist() == [0, 0, 1]

    def test_wrong_dimension(self):
        with pytest.raises(DimensionError):
            Plane.from_normal_and_point([1, 2], [0, 0, 0])
        with pytest.raises(DimensionError):
            Plane.from_normal_and_point([1, 2, 3], [0, 0, 0, 0])

    def test_zero_normal(self):
        with pytest.raises(ValidationError):
            Plane.from_normal_and_point([0, 0, 0], [1, 2, 3])

    def test_contains_wrong_dimension(self):
        plane = Plane.from_coefficients(1, 1, 1, 1)
        with pytest.raises(DimensionError):
            plane.contains([1, 0])

    def test_repr(self):
        assert "=" in repr(Plane.from_coefficients(1, 2, 3, 7))

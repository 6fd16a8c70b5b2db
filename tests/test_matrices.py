"""Unit tests for 4x4 matrices and transformations.

Tests cover:
- Construction, indexing and approximate equality
- Matrix-matrix and matrix-tuple products
- Transpose, determinant and inversion (including singular matrices)
- Translation, scaling, rotation, shearing and the view transform
"""

import math

import pytest

from whitted.core.matrices import IDENTITY, Matrix, identity_matrix
from whitted.core.transformations import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from whitted.core.tuples import Tuple, point, vector

HALF_SQRT2 = math.sqrt(2) / 2


class TestMatrixBasics:
    """Tests for constructing and comparing matrices."""

    def test_construct_and_index(self):
        """Test reading elements by (row, column)."""
        m = Matrix(
            [
                [1, 2, 3, 4],
                [5.5, 6.5, 7.5, 8.5],
                [9, 10, 11, 12],
                [13.5, 14.5, 15.5, 16.5],
            ]
        )
        assert m[0, 0] == 1.0
        assert m[0, 3] == 4.0
        assert m[1, 0] == 5.5
        assert m[1, 2] == 7.5
        assert m[3, 2] == 15.5

    def test_rejects_non_4x4(self):
        """Test that only 4x4 matrices are accepted."""
        with pytest.raises(ValueError):
            Matrix([[1, 2], [3, 4]])

    def test_approximate_equality(self):
        """Test equality within EPSILON and inequality beyond it."""
        rows = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]]
        a = Matrix(rows)
        assert a == Matrix(rows)
        assert a == Matrix([[1.00001, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
        assert a != Matrix([[2, 3, 4, 5], [6, 7, 8, 9], [8, 7, 6, 5], [4, 3, 2, 1]])

    def test_matrix_is_read_only(self):
        """Test that the underlying array cannot be modified."""
        with pytest.raises(ValueError):
            IDENTITY.data[0, 0] = 5.0


class TestMatrixProducts:
    """Tests for matrix multiplication."""

    def test_multiply_matrices(self):
        """Test the product of two matrices."""
        a = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
        b = Matrix([[-2, 1, 2, 3], [3, 2, 1, -1], [4, 3, 6, 5], [1, 2, 7, 8]])
        expected = Matrix(
            [[20, 22, 50, 48], [44, 54, 114, 108], [40, 58, 110, 102], [16, 26, 46, 42]]
        )
        assert a * b == expected

    def test_multiply_by_tuple(self):
        """Test transforming a tuple by a matrix."""
        a = Matrix([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])
        assert a * Tuple(1, 2, 3, 1) == Tuple(18, 24, 33, 1)

    def test_identity(self):
        """Test that the identity leaves matrices and tuples unchanged."""
        a = Matrix([[0, 1, 2, 4], [1, 2, 4, 8], [2, 4, 8, 16], [4, 8, 16, 32]])
        assert a * identity_matrix() == a
        assert identity_matrix() * Tuple(1, 2, 3, 4) == Tuple(1, 2, 3, 4)


class TestMatrixInverse:
    """Tests for transpose, determinant and inversion."""

    def test_transpose(self):
        """Test transposing a matrix and the identity."""
        a = Matrix([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
        expected = Matrix([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])
        assert a.transpose() == expected
        assert IDENTITY.transpose() == IDENTITY

    def test_determinant(self):
        """Test the determinant of a 4x4 matrix."""
        a = Matrix([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert abs(a.determinant() - (-4071.0)) < 1e-6
        assert a.is_invertible()

    def test_singular_matrix_cannot_be_inverted(self):
        """Test that inverting a singular matrix raises ValueError."""
        a = Matrix([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
        assert not a.is_invertible()
        with pytest.raises(ValueError):
            a.inverse()

    def test_inverse(self):
        """Test the inverse of an invertible matrix."""
        a = Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]])
        expected = Matrix(
            [
                [0.21805, 0.45113, 0.24060, -0.04511],
                [-0.80827, -1.45677, -0.44361, 0.52068],
                [-0.07895, -0.22368, -0.05263, 0.19737],
                [-0.52256, -0.81391, -0.30075, 0.30639],
            ]
        )
        assert a.inverse() == expected

    def test_product_times_inverse(self):
        """Test that multiplying a product by an inverse recovers the factor."""
        a = Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
        b = Matrix([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])
        c = a * b
        assert c * b.inverse() == a


class TestTransformations:
    """Tests for the transformation constructors."""

    def test_translation(self):
        """Test that translation moves points but not vectors."""
        transform = translation(5, -3, 2)
        assert transform * point(-3, 4, 5) == point(2, 1, 7)
        assert transform.inverse() * point(-3, 4, 5) == point(-8, 7, 3)
        assert transform * vector(-3, 4, 5) == vector(-3, 4, 5)

    def test_scaling(self):
        """Test scaling points, vectors and reflection by negative scale."""
        transform = scaling(2, 3, 4)
        assert transform * point(-4, 6, 8) == point(-8, 18, 32)
        assert transform * vector(-4, 6, 8) == vector(-8, 18, 32)
        assert transform.inverse() * vector(-4, 6, 8) == vector(-2, 2, 2)
        assert scaling(-1, 1, 1) * point(2, 3, 4) == point(-2, 3, 4)

    def test_rotation_x(self):
        """Test rotating a point around the x axis."""
        p = point(0, 1, 0)
        assert rotation_x(math.pi / 4) * p == point(0, HALF_SQRT2, HALF_SQRT2)
        assert rotation_x(math.pi / 2) * p == point(0, 0, 1)
        assert rotation_x(math.pi / 4).inverse() * p == point(0, HALF_SQRT2, -HALF_SQRT2)

    def test_rotation_y(self):
        """Test rotating a point around the y axis."""
        p = point(0, 0, 1)
        assert rotation_y(math.pi / 4) * p == point(HALF_SQRT2, 0, HALF_SQRT2)
        assert rotation_y(math.pi / 2) * p == point(1, 0, 0)

    def test_rotation_z(self):
        """Test rotating a point around the z axis."""
        p = point(0, 1, 0)
        assert rotation_z(math.pi / 4) * p == point(-HALF_SQRT2, HALF_SQRT2, 0)
        assert rotation_z(math.pi / 2) * p == point(-1, 0, 0)

    def test_shearing(self):
        """Test each shearing component."""
        p = point(2, 3, 4)
        assert shearing(1, 0, 0, 0, 0, 0) * p == point(5, 3, 4)
        assert shearing(0, 1, 0, 0, 0, 0) * p == point(6, 3, 4)
        assert shearing(0, 0, 1, 0, 0, 0) * p == point(2, 5, 4)
        assert shearing(0, 0, 0, 1, 0, 0) * p == point(2, 7, 4)
        assert shearing(0, 0, 0, 0, 1, 0) * p == point(2, 3, 6)
        assert shearing(0, 0, 0, 0, 0, 1) * p == point(2, 3, 7)

    def test_chained_transformations_apply_in_reverse_order(self):
        """Test that C * B * A applies A first."""
        a = rotation_x(math.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)
        assert c * b * a * point(1, 0, 1) == point(15, 0, 7)


class TestViewTransform:
    """Tests for the camera orientation transform."""

    def test_default_orientation(self):
        """Test that looking down -z from the origin is the identity."""
        t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
        assert t == IDENTITY

    def test_looking_in_positive_z(self):
        """Test that looking down +z mirrors x and z."""
        t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
        assert t == scaling(-1, 1, -1)

    def test_moves_the_world(self):
        """Test that the view transform moves the world, not the eye."""
        t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
        assert t == translation(0, 0, -8)

    def test_arbitrary_view(self):
        """Test an arbitrary eye, target and up vector."""
        t = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
        expected = Matrix(
            [
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.00000],
                [0.00000, 0.00000, 0.00000, 1.00000],
            ]
        )
        assert t == expected

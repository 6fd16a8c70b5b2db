"""Unit tests for the Shape base class and Intersection record."""

import math

import pytest

from whitted.core.matrices import IDENTITY
from whitted.core.ray import Ray
from whitted.core.transformations import rotation_z, scaling, translation
from whitted.core.tuples import point, vector
from whitted.geometry.shape import NO_HIT, Intersection, Shape, by_t
from whitted.geometry.sphere import Sphere
from whitted.materials.material import Material


class TestShapeTransform:
    """Tests for the transform property and its cached inverse."""

    def test_default_transform(self, recording_shape):
        """Test that shapes start with the identity transform."""
        assert recording_shape.transform == IDENTITY
        assert recording_shape.inverse_transform == IDENTITY

    def test_assign_transform_updates_inverse(self, recording_shape):
        """Test that assigning a transform refreshes the cached inverse."""
        recording_shape.transform = translation(2, 3, 4)
        assert recording_shape.transform == translation(2, 3, 4)
        assert recording_shape.inverse_transform == translation(-2, -3, -4)

    def test_singular_transform_rejected(self):
        """Test that a non-invertible transform fails at assignment."""
        with pytest.raises(ValueError):
            Sphere(transform=scaling(0, 1, 1))

    def test_shape_is_abstract(self):
        """Test that the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            Shape()


class TestShapeMaterial:
    """Tests for shape materials."""

    def test_default_material(self, recording_shape):
        """Test that shapes start with a default material."""
        assert recording_shape.material == Material()

    def test_assign_material(self, recording_shape):
        """Test assigning a material."""
        m = Material(ambient=1.0)
        recording_shape.material = m
        assert recording_shape.material is m


class TestShapeWorldWrappers:
    """Tests for intersect() and normal_at() on transformed shapes."""

    def test_scaled_shape_receives_object_space_ray(self, recording_shape):
        """Test that intersect() applies the inverse transform to the ray."""
        recording_shape.transform = scaling(2, 2, 2)
        recording_shape.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert recording_shape.saved_ray.origin == point(0, 0, -2.5)
        assert recording_shape.saved_ray.direction == vector(0, 0, 0.5)

    def test_translated_shape_receives_object_space_ray(self, recording_shape):
        """Test that translation moves only the ray origin."""
        recording_shape.transform = translation(5, 0, 0)
        recording_shape.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert recording_shape.saved_ray.origin == point(-5, 0, -5)
        assert recording_shape.saved_ray.direction == vector(0, 0, 1)

    def test_normal_on_translated_shape(self, recording_shape):
        """Test the world normal of a translated shape."""
        recording_shape.transform = translation(0, 1, 0)
        n = recording_shape.normal_at(point(0, 1.70711, -0.70711))
        assert n == vector(0, 0.70711, -0.70711)

    def test_normal_on_transformed_shape(self, recording_shape):
        """Test the world normal of a scaled and rotated shape."""
        recording_shape.transform = scaling(1, 0.5, 1) * rotation_z(math.pi / 5)
        k = math.sqrt(2) / 2
        n = recording_shape.normal_at(point(0, k, -k))
        assert n == vector(0, 0.97014, -0.24254)

    def test_parent_space_bounds(self, recording_shape):
        """Test that bounds are transformed into the parent's space."""
        recording_shape.transform = translation(1, -3, 5) * scaling(0.5, 2, 4)
        box = recording_shape.parent_space_bounds()
        assert box.lower == point(0.5, -5, 1)
        assert box.upper == point(1.5, -1, 9)


class TestIntersectionRecord:
    """Tests for the Intersection value type."""

    def test_fields(self):
        """Test that an intersection stores t and the shape."""
        s = Sphere()
        i = Intersection(3.5, s)
        assert i.t == 3.5
        assert i.shape is s
        assert i.is_hit

    def test_no_hit_sentinel(self):
        """Test the no-hit sentinel."""
        assert not NO_HIT.is_hit
        assert math.isnan(NO_HIT.t)
        assert NO_HIT.shape is None

    def test_sort_key(self):
        """Test ordering intersections with by_t."""
        s = Sphere()
        xs = [Intersection(5, s), Intersection(-1, s), Intersection(2, s)]
        assert [x.t for x in sorted(xs, key=by_t)] == [-1, 2, 5]

"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: the reference
world, a shape that records the ray it receives, and the coordinate
pattern used to check pattern-space conversions.
"""

import pytest

from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, point, vector
from whitted.geometry.bounds import Bounds
from whitted.geometry.shape import Intersection, Shape
from whitted.materials.patterns import CoordinatePattern
from whitted.scene.presets import default_world as make_default_world


class RecordingShape(Shape):
    """Shape stand-in that records the object-space ray it is given."""

    def __init__(self, transform=None, material=None):
        super().__init__(transform, material)
        self.saved_ray: Ray | None = None

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        self.saved_ray = ray
        return []

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return vector(local_point.x, local_point.y, local_point.z)

    def local_bounds(self) -> Bounds:
        return Bounds(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))


@pytest.fixture
def default_world():
    """A fresh reference world: two concentric spheres lit from (-10, 10, -10)."""
    return make_default_world()


@pytest.fixture
def recording_shape():
    """A shape with identity transform that records its last local ray."""
    return RecordingShape()


@pytest.fixture
def coordinate_pattern():
    """A pattern whose color is the pattern-space point."""
    return CoordinatePattern()

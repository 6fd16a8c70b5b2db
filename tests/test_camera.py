"""Unit tests for the pinhole camera and render loop.

Tests cover:
- Canvas geometry (pixel size for landscape and portrait canvases)
- Primary rays through the center and corner of the canvas
- Rays from a transformed camera
- Rendering the reference world and progress reporting
"""

import logging
import math

import pytest

from whitted.camera.camera import Camera
from whitted.core.matrices import IDENTITY
from whitted.core.transformations import rotation_y, translation, view_transform
from whitted.core.tuples import Color, point, vector


def _reference_camera(size=11):
    camera = Camera(size, size, math.pi / 2)
    camera.transform = view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))
    return camera


class TestCameraConstruction:
    """Test camera construction and canvas geometry."""

    def test_defaults(self):
        """Test that a new camera has the identity transform."""
        c = Camera(160, 120, math.pi / 2)
        assert c.hsize == 160
        assert c.vsize == 120
        assert c.field_of_view == math.pi / 2
        assert c.transform == IDENTITY

    def test_pixel_size_horizontal_canvas(self):
        """Test pixel size for a landscape canvas."""
        c = Camera(200, 125, math.pi / 2)
        assert abs(c.pixel_size - 0.01) < 1e-9

    def test_pixel_size_vertical_canvas(self):
        """Test pixel size for a portrait canvas."""
        c = Camera(125, 200, math.pi / 2)
        assert abs(c.pixel_size - 0.01) < 1e-9

    def test_invalid_size(self):
        """Test that empty canvases are rejected."""
        with pytest.raises(ValueError):
            Camera(0, 10, math.pi / 2)
        with pytest.raises(ValueError):
            Camera(10, -1, math.pi / 2)

    def test_invalid_field_of_view(self):
        """Test that the field of view must lie strictly between 0 and pi."""
        for fov in (0.0, math.pi, -1.0, 4.0):
            with pytest.raises(ValueError):
                Camera(10, 10, fov)


class TestRayForPixel:
    """Test primary ray generation."""

    def test_ray_through_center(self):
        """Test the ray through the center of the canvas."""
        c = Camera(201, 101, math.pi / 2)
        r = c.ray_for_pixel(100, 50)
        assert r.origin == point(0, 0, 0)
        assert r.direction == vector(0, 0, -1)

    def test_ray_through_corner(self):
        """Test the ray through the top-left corner pixel."""
        c = Camera(201, 101, math.pi / 2)
        r = c.ray_for_pixel(0, 0)
        assert r.origin == point(0, 0, 0)
        assert r.direction == vector(0.66519, 0.33259, -0.66851)

    def test_ray_when_camera_is_transformed(self):
        """Test that the camera transform moves and turns primary rays."""
        c = Camera(201, 101, math.pi / 2)
        c.transform = rotation_y(math.pi / 4) * translation(0, -2, 5)
        r = c.ray_for_pixel(100, 50)
        assert r.origin == point(0, 2, -5)
        assert r.direction == vector(math.sqrt(2) / 2, 0, -math.sqrt(2) / 2)

    def test_directions_are_normalized(self):
        """Test that every primary ray has a unit direction."""
        c = Camera(8, 6, math.pi / 3)
        for x, y in [(0, 0), (7, 0), (0, 5), (7, 5), (3, 2)]:
            d = c.ray_for_pixel(x, y).direction
            assert abs(math.sqrt(d.x**2 + d.y**2 + d.z**2) - 1.0) < 1e-9


class TestRender:
    """Test the render loop."""

    def test_render_reference_world(self, default_world):
        """Test that the center pixel of the reference render matches."""
        image = _reference_camera().render(default_world)
        assert image.width == 11
        assert image.height == 11
        assert image.pixel_at(5, 5) == Color(0.38066, 0.47583, 0.2855)

    def test_render_reports_progress(self, default_world):
        """Test that the callback fires once per row."""
        calls = []
        camera = Camera(3, 2, math.pi / 2)
        camera.render(default_world, callback=lambda done, total: calls.append((done, total)))
        assert calls == [(1, 2), (2, 2)]

    def test_render_with_zero_depth(self, default_world):
        """Test that a zero recursion budget still shades primary hits."""
        image = _reference_camera().render(default_world, max_depth=0)
        assert image.pixel_at(5, 5) == Color(0.38066, 0.47583, 0.2855)

    def test_negative_depth_rejected(self, default_world):
        """Test that a negative recursion budget is an error."""
        with pytest.raises(ValueError):
            _reference_camera(3).render(default_world, max_depth=-1)

    def test_render_logs_summary(self, default_world, caplog):
        """Test that rendering logs its size at INFO level."""
        with caplog.at_level(logging.INFO, logger="whitted.camera.camera"):
            _reference_camera(3).render(default_world)
        assert "Rendering 3x3" in caplog.text
        assert "Render finished" in caplog.text

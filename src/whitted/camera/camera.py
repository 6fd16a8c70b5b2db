"""Pinhole camera and the render loop.

The camera sits at the origin of camera space looking down -z, with the
canvas one unit in front of it at z = -1. Its transform (usually built
with ``view_transform``) orients camera space in the world. The canvas
spans +/- tan(fov / 2) across its wider dimension, and +x in camera space
maps to the left edge of the image.

Example:
    >>> import math
    >>> from whitted.camera.camera import Camera
    >>> from whitted.core.transformations import view_transform
    >>> from whitted.core.tuples import point, vector
    >>> camera = Camera(160, 120, math.pi / 3)
    >>> camera.transform = view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0))
    >>> ray = camera.ray_for_pixel(80, 60)
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from whitted.core.matrices import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import normalize, point
from whitted.preview.canvas import Canvas
from whitted.scene.world import DEFAULT_RECURSION_DEPTH

if TYPE_CHECKING:
    from whitted.scene.world import World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


class Camera:
    """A pinhole camera mapping canvas pixels to world-space rays.

    Attributes:
        hsize: Canvas width in pixels.
        vsize: Canvas height in pixels.
        field_of_view: Angle (radians) spanned by the wider canvas dimension.
        half_width: Half the canvas width at z = -1, in world units.
        half_height: Half the canvas height at z = -1, in world units.
        pixel_size: Edge length of one pixel at z = -1, in world units.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view = {field_of_view} must be in (0, pi) radians")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else IDENTITY

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = self.half_width * 2.0 / hsize

    @property
    def transform(self) -> Matrix:
        """The view transform (world to camera space)."""
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._transform = matrix
        self._inverse = matrix.inverse()

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """Build the world-space ray through the center of pixel (px, py)."""
        # Offset from the canvas edge to the pixel's center
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse * point(world_x, world_y, -1.0)
        origin = self._inverse * point(0.0, 0.0, 0.0)
        return Ray(origin, normalize(pixel - origin))

    def render(
        self,
        world: World,
        *,
        max_depth: int = DEFAULT_RECURSION_DEPTH,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the world into a new canvas.

        Pixels are independent; each one traces a single primary ray.

        Args:
            world: The scene to render.
            max_depth: Recursion budget for reflection and refraction.
            callback: Optional function called after each row with
                (rows_done, total_rows).

        Returns:
            A canvas of size hsize x vsize holding linear colors.
        """
        if max_depth < 0:
            raise ValueError(f"max_depth = {max_depth} must be non-negative")

        logger.info(
            "Rendering %dx%d with %d objects (max depth %d)",
            self.hsize,
            self.vsize,
            len(world.objects),
            max_depth,
        )
        start = time.perf_counter()

        canvas = Canvas(self.hsize, self.vsize)
        for y in range(self.vsize):
            for x in range(self.hsize):
                ray = self.ray_for_pixel(x, y)
                canvas.write_pixel(x, y, world.color_at(ray, max_depth))

            if callback is not None:
                callback(y + 1, self.vsize)
            logger.debug("Row %d/%d done", y + 1, self.vsize)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return canvas

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self.hsize}, vsize={self.vsize}, "
            f"field_of_view={self.field_of_view})"
        )

"""Canvas: the pixel grid a render writes into.

Pixels are stored as linear float32 RGB in a NumPy array of shape
(height, width, 3), indexed by (row, column) internally and by (x, y) in
the public API. Values are not clamped; clamping and gamma belong to the
export and display steps.

Example:
    >>> from whitted.core.tuples import Color
    >>> from whitted.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, Color(1, 0, 0))
    >>> canvas.pixel_at(2, 3)
    Color(red=1.0, green=0.0, blue=0.0)
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import Color


class Canvas:
    """A width x height grid of linear RGB colors, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float32)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside canvas of size {self.width}x{self.height}"
            )

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self._pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        self._check(x, y)
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return a copy of the pixel buffer, shape (height, width, 3)."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

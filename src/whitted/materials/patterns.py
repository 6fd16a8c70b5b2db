"""Procedural color patterns.

A pattern maps a point in pattern space to a color. Pattern space is
reached from world space by first converting into the object space of the
shape being shaded (through any enclosing groups) and then applying the
inverse of the pattern's own transform, so patterns scale and rotate with
the shapes that carry them.

Components:
    StripePattern: Alternates a/b with the integer part of x
    GradientPattern: Linear blend from a to b across each unit of x
    RingPattern: Concentric rings in the xz plane
    CheckersPattern: 3D checkerboard
    CoordinatePattern: Returns the pattern-space point as a color, for
        checking pattern/object transforms
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from whitted.core.matrices import IDENTITY, Matrix
from whitted.core.tuples import Color, Tuple

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


class Pattern(ABC):
    """Base class for patterns with an own transform and two colors."""

    def __init__(
        self,
        a: Color | None = None,
        b: Color | None = None,
        transform: Matrix | None = None,
    ) -> None:
        self.a = a if a is not None else Color(1.0, 1.0, 1.0)
        self.b = b if b is not None else Color(0.0, 0.0, 0.0)
        self.transform = transform if transform is not None else IDENTITY

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._transform = matrix
        self._inverse = matrix.inverse()

    @abstractmethod
    def pattern_at(self, pattern_point: Tuple) -> Color:
        """Return the color at a point in pattern space."""

    def pattern_at_shape(self, shape: Shape, world_point: Tuple) -> Color:
        """Return the color at a world-space point on ``shape``."""
        object_point = shape.world_to_object(world_point)
        pattern_point = self._inverse * object_point
        return self.pattern_at(pattern_point)


class StripePattern(Pattern):
    def pattern_at(self, pattern_point: Tuple) -> Color:
        if math.floor(pattern_point.x) % 2 == 0:
            return self.a
        return self.b


class GradientPattern(Pattern):
    def pattern_at(self, pattern_point: Tuple) -> Color:
        fraction = pattern_point.x - math.floor(pattern_point.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(Pattern):
    def pattern_at(self, pattern_point: Tuple) -> Color:
        distance = math.sqrt(pattern_point.x**2 + pattern_point.z**2)
        if math.floor(distance) % 2 == 0:
            return self.a
        return self.b


class CheckersPattern(Pattern):
    def pattern_at(self, pattern_point: Tuple) -> Color:
        total = (
            math.floor(pattern_point.x)
            + math.floor(pattern_point.y)
            + math.floor(pattern_point.z)
        )
        if total % 2 == 0:
            return self.a
        return self.b


class CoordinatePattern(Pattern):
    """Debug pattern whose color is the pattern-space point itself."""

    def pattern_at(self, pattern_point: Tuple) -> Color:
        return Color(pattern_point.x, pattern_point.y, pattern_point.z)

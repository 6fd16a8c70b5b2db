"""Ray data structure.

A ray is an origin point plus a direction vector. Rays are moved between
coordinate spaces by multiplying both parts by a transform; the direction
is deliberately left un-normalized so that ``t`` values found in object
space remain valid in the space the ray came from.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> ray = Ray(point(0, 0, 0), vector(0, 0, -1))
    >>> ray.position(5.0)  # Point 5 units along the ray
    Tuple(x=0.0, y=0.0, z=-5.0, w=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.matrices import Matrix
from whitted.core.tuples import Tuple


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be
            normalized.
    """

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray expressed in the space described by ``matrix``."""
        return Ray(matrix * self.origin, matrix * self.direction)

"""Infinite plane primitive.

In object space the plane is y = 0, extending infinitely in x and z, with
its normal pointing up (+y).
"""

import math

from whitted.core.ray import Ray
from whitted.core.tolerance import near_zero
from whitted.core.tuples import Tuple, point, vector
from whitted.geometry.bounds import Bounds
from whitted.geometry.shape import Intersection, Shape


class Plane(Shape):
    """The object-space xz plane."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        # Parallel and coplanar rays both miss
        if near_zero(ray.direction.y):
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return vector(0.0, 1.0, 0.0)

    def local_bounds(self) -> Bounds:
        return Bounds(point(-math.inf, 0.0, -math.inf), point(math.inf, 0.0, math.inf))

"""Axis-aligned cube primitive.

The object-space cube spans [-1, 1] on every axis. Intersection is the
classic slab test: each axis contributes an entry/exit interval, and the
ray hits when the latest entry comes no later than the earliest exit.
"""

from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, point, vector
from whitted.geometry.bounds import Bounds, check_axis
from whitted.geometry.shape import Intersection, Shape


class Cube(Shape):
    """A cube centered at the object-space origin with half-size 1."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax:
            return []
        return [Intersection(tmin, self), Intersection(tmax, self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Pick the face whose axis has the largest absolute component."""
        ax, ay, az = abs(local_point.x), abs(local_point.y), abs(local_point.z)
        maxc = max(ax, ay, az)

        if maxc == ax:
            return vector(local_point.x, 0.0, 0.0)
        if maxc == ay:
            return vector(0.0, local_point.y, 0.0)
        return vector(0.0, 0.0, local_point.z)

    def local_bounds(self) -> Bounds:
        return Bounds(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))

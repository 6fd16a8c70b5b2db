"""Sphere primitive with robust ray-sphere intersection.

The sphere is the unit sphere centered at the object-space origin; size and
position come from its transform. Roots are found with the robust
quadratic formula from Ray Tracing Gems to avoid catastrophic cancellation
when b^2 is nearly equal to 4ac. The same solver serves the cylinder and
cone side surfaces.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> [x.t for x in s.local_intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))]
    [4.0, 6.0]
"""

from __future__ import annotations

import math

from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, dot, point, vector
from whitted.geometry.bounds import Bounds
from whitted.geometry.shape import Intersection, Shape
from whitted.materials.material import Material


def solve_quadratic(
    a: float, h: float, c: float, tolerance: float = 0.0
) -> tuple[float, float] | None:
    """Solve a*t^2 + 2*h*t + c = 0 using a numerically stable method.

    Uses:
        q = -(h + sign(h) * sqrt(h^2 - a*c))
        t0 = q / a
        t1 = c / q

    Args:
        a: Quadratic coefficient (must be non-zero).
        h: Half of the linear coefficient.
        c: Constant term.
        tolerance: Discriminants in (-tolerance, 0) are treated as 0, so a
            ray grazing the surface still reports its double root.

    Returns:
        Tuple of (t0, t1) with t0 <= t1, or None if there is no real root.
    """
    discriminant = h * h - a * c
    if discriminant < 0.0:
        if discriminant <= -tolerance:
            return None
        discriminant = 0.0

    sqrt_d = math.sqrt(discriminant)
    sign_h = -1.0 if h < 0.0 else 1.0
    q = -(h + sign_h * sqrt_d)

    if abs(q) < 1e-10:
        # Fall back to standard formula for edge cases
        t0 = (-h - sqrt_d) / a
        t1 = (-h + sqrt_d) / a
    else:
        t0 = q / a
        t1 = c / q

    if t0 > t1:
        t0, t1 = t1, t0
    return t0, t1


class Sphere(Shape):
    """A unit sphere centered at the object-space origin."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Find where a ray crosses the unit sphere.

        Solves |origin + t * direction|^2 = 1. A tangent ray yields two
        equal roots; a miss yields no intersections.
        """
        # Vector from sphere center to ray origin
        sphere_to_ray = ray.origin - point(0.0, 0.0, 0.0)

        a = dot(ray.direction, ray.direction)
        h = dot(ray.direction, sphere_to_ray)
        c = dot(sphere_to_ray, sphere_to_ray) - 1.0

        roots = solve_quadratic(a, h, c)
        if roots is None:
            return []
        t0, t1 = roots
        return [Intersection(t0, self), Intersection(t1, self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return vector(local_point.x, local_point.y, local_point.z)

    def local_bounds(self) -> Bounds:
        return Bounds(point(-1.0, -1.0, -1.0), point(1.0, 1.0, 1.0))


def glass_sphere() -> Sphere:
    """Create a unit sphere with a fully transparent, glass-like material."""
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))

"""Cylinder and double-napped cone primitives.

Both are aligned with the object-space y axis and infinite by default.
``minimum`` and ``maximum`` truncate them; the truncation bounds are
exclusive for the side surface, and ``closed`` adds end caps.

Cylinder side: x^2 + z^2 = 1 (unit radius).
Cone side:     x^2 + z^2 = y^2 (radius equals |y|).

The caps of both shapes are tested by the same check_cap() helper,
parameterised by the cap radius at that height (1 for the cylinder, |y|
for the cone).

Example:
    >>> from whitted.geometry.cylinder import Cylinder
    >>> cyl = Cylinder(minimum=1.0, maximum=2.0, closed=True)
"""

from __future__ import annotations

import math

from whitted.core.matrices import Matrix
from whitted.core.ray import Ray
from whitted.core.tolerance import EPSILON, near_zero
from whitted.core.tuples import Tuple, point, vector
from whitted.geometry.bounds import Bounds
from whitted.geometry.shape import Intersection, Shape, by_t
from whitted.geometry.sphere import solve_quadratic
from whitted.materials.material import Material


def check_cap(ray: Ray, t: float, radius: float) -> bool:
    """Check whether the ray at ``t`` lies within a cap of the given radius."""
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= radius * radius + EPSILON


class Cylinder(Shape):
    """A unit-radius cylinder around the y axis.

    Attributes:
        minimum: Lower truncation bound on y (default -infinity).
        maximum: Upper truncation bound on y (default +infinity).
        closed: Whether the truncated ends are capped.
    """

    def __init__(
        self,
        transform: Matrix | None = None,
        material: Material | None = None,
        *,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
    ) -> None:
        super().__init__(transform, material)
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def _within_bounds(self, y: float) -> bool:
        return self.minimum < y < self.maximum

    def _cap_radius(self, y: float) -> float:
        return 1.0

    def _side_coefficients(self, ray: Ray) -> tuple[float, float, float]:
        o, d = ray.origin, ray.direction
        a = d.x * d.x + d.z * d.z
        h = o.x * d.x + o.z * d.z
        c = o.x * o.x + o.z * o.z - 1.0
        return a, h, c

    def _intersect_side(self, ray: Ray, xs: list[Intersection]) -> None:
        a, h, c = self._side_coefficients(ray)

        # Ray parallel to the y axis never crosses the side
        if near_zero(a):
            return

        roots = solve_quadratic(a, h, c)
        if roots is None:
            return
        for t in roots:
            y = ray.origin.y + t * ray.direction.y
            if self._within_bounds(y):
                xs.append(Intersection(t, self))

    def _intersect_caps(self, ray: Ray, xs: list[Intersection]) -> None:
        if not self.closed or near_zero(ray.direction.y):
            return

        for cap_y in (self.minimum, self.maximum):
            if math.isinf(cap_y):
                continue
            t = (cap_y - ray.origin.y) / ray.direction.y
            if check_cap(ray, t, self._cap_radius(cap_y)):
                xs.append(Intersection(t, self))

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        xs: list[Intersection] = []
        self._intersect_side(ray, xs)
        self._intersect_caps(ray, xs)
        xs.sort(key=by_t)
        return xs

    def _on_cap(self, local_point: Tuple, cap_y: float) -> bool:
        dist = local_point.x * local_point.x + local_point.z * local_point.z
        radius = self._cap_radius(cap_y)
        return dist < radius * radius and abs(local_point.y - cap_y) < EPSILON

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        if self._on_cap(local_point, self.maximum):
            return vector(0.0, 1.0, 0.0)
        if self._on_cap(local_point, self.minimum):
            return vector(0.0, -1.0, 0.0)
        return self._side_normal(local_point)

    def _side_normal(self, local_point: Tuple) -> Tuple:
        return vector(local_point.x, 0.0, local_point.z)

    def local_bounds(self) -> Bounds:
        return Bounds(point(-1.0, self.minimum, -1.0), point(1.0, self.maximum, 1.0))


class Cone(Cylinder):
    """A double-napped cone around the y axis with its apex at the origin."""

    def _cap_radius(self, y: float) -> float:
        return abs(y)

    def _side_coefficients(self, ray: Ray) -> tuple[float, float, float]:
        o, d = ray.origin, ray.direction
        a = d.x * d.x - d.y * d.y + d.z * d.z
        h = o.x * d.x - o.y * d.y + o.z * d.z
        c = o.x * o.x - o.y * o.y + o.z * o.z
        return a, h, c

    def _intersect_side(self, ray: Ray, xs: list[Intersection]) -> None:
        a, h, c = self._side_coefficients(ray)

        if near_zero(a):
            # Ray parallel to one nappe: at most one root, t = -c / 2b
            if near_zero(h):
                return
            t = -c / (2.0 * (2.0 * h))
            y = ray.origin.y + t * ray.direction.y
            if self._within_bounds(y):
                xs.append(Intersection(t, self))
            return

        # Rays grazing the surface give a slightly negative discriminant
        roots = solve_quadratic(a, h, c, tolerance=EPSILON)
        if roots is None:
            return
        for t in roots:
            y = ray.origin.y + t * ray.direction.y
            if self._within_bounds(y):
                xs.append(Intersection(t, self))

    def _side_normal(self, local_point: Tuple) -> Tuple:
        y = math.sqrt(local_point.x * local_point.x + local_point.z * local_point.z)
        if local_point.y > 0.0:
            y = -y
        return vector(local_point.x, y, local_point.z)

    def local_bounds(self) -> Bounds:
        limit = max(abs(self.minimum), abs(self.maximum))
        return Bounds(point(-limit, self.minimum, -limit), point(limit, self.maximum, limit))

"""Axis-aligned bounding boxes.

Every shape can report a Bounds in its own object space. Boxes can be grown
by points or other boxes, tested for containment, intersected with rays,
transformed into another space and split in half along their longest axis.
They are scaffolding for a bounding-volume hierarchy; shape intersection
does not consult them.

Example:
    >>> from whitted.core.tuples import point
    >>> from whitted.geometry.bounds import Bounds
    >>> box = Bounds(point(-1, -1, -1), point(1, 1, 1))
    >>> box.contains_point(point(0.5, 0, 0))
    True
"""

from __future__ import annotations

import math

from whitted.core.matrices import Matrix
from whitted.core.ray import Ray
from whitted.core.tolerance import EPSILON
from whitted.core.tuples import Tuple, point


def check_axis(
    origin: float, direction: float, lower: float = -1.0, upper: float = 1.0
) -> tuple[float, float]:
    """Compute the entry and exit parameters of a ray against one slab.

    Args:
        origin: The ray origin component along this axis.
        direction: The ray direction component along this axis.
        lower: The lower slab boundary.
        upper: The upper slab boundary.

    Returns:
        Tuple of (tmin, tmax) with tmin <= tmax. A direction component
        smaller than EPSILON yields signed infinities instead of NaN.
    """
    tmin_numerator = lower - origin
    tmax_numerator = upper - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Bounds:
    """An axis-aligned box described by its lower and upper corners.

    A default-constructed box is empty: its lower corner is at +infinity
    and its upper corner at -infinity, so adding any point makes it valid.

    Attributes:
        lower: The minimum corner point.
        upper: The maximum corner point.
    """

    __slots__ = ("lower", "upper")

    def __init__(self, lower: Tuple | None = None, upper: Tuple | None = None) -> None:
        self.lower = lower if lower is not None else point(math.inf, math.inf, math.inf)
        self.upper = upper if upper is not None else point(-math.inf, -math.inf, -math.inf)

    @property
    def is_empty(self) -> bool:
        return (
            self.lower.x > self.upper.x
            or self.lower.y > self.upper.y
            or self.lower.z > self.upper.z
        )

    def add_point(self, p: Tuple) -> None:
        """Grow the box to include a point."""
        self.lower = point(min(self.lower.x, p.x), min(self.lower.y, p.y), min(self.lower.z, p.z))
        self.upper = point(max(self.upper.x, p.x), max(self.upper.y, p.y), max(self.upper.z, p.z))

    def add_box(self, other: Bounds) -> None:
        """Grow the box to include another box."""
        if other.is_empty:
            return
        self.add_point(other.lower)
        self.add_point(other.upper)

    def contains_point(self, p: Tuple) -> bool:
        return (
            self.lower.x <= p.x <= self.upper.x
            and self.lower.y <= p.y <= self.upper.y
            and self.lower.z <= p.z <= self.upper.z
        )

    def contains_box(self, other: Bounds) -> bool:
        return self.contains_point(other.lower) and self.contains_point(other.upper)

    def corners(self) -> list[Tuple]:
        lo, hi = self.lower, self.upper
        return [
            point(lo.x, lo.y, lo.z),
            point(lo.x, lo.y, hi.z),
            point(lo.x, hi.y, lo.z),
            point(lo.x, hi.y, hi.z),
            point(hi.x, lo.y, lo.z),
            point(hi.x, lo.y, hi.z),
            point(hi.x, hi.y, lo.z),
            point(hi.x, hi.y, hi.z),
        ]

    def transform(self, matrix: Matrix) -> Bounds:
        """Return the box enclosing all eight corners after transformation.

        Infinite extents stay infinite; an empty box stays empty.
        """
        if self.is_empty:
            return Bounds()
        lower = [math.inf, math.inf, math.inf]
        upper = [-math.inf, -math.inf, -math.inf]
        for corner in self.corners():
            for axis, value in enumerate(_transform_corner(matrix, corner)):
                if math.isnan(value):
                    # opposing infinities: the extent is unbounded on this axis
                    lower[axis] = -math.inf
                    upper[axis] = math.inf
                    continue
                lower[axis] = min(lower[axis], value)
                upper[axis] = max(upper[axis], value)
        return Bounds(point(*lower), point(*upper))

    def intersects(self, ray: Ray) -> bool:
        """Slab test of a ray against this box."""
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x, self.lower.x, self.upper.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y, self.lower.y, self.upper.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z, self.lower.z, self.upper.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        return tmin <= tmax

    def split(self) -> tuple[Bounds, Bounds]:
        """Split the box in half along its longest axis.

        Ties prefer x, then y.

        Returns:
            Tuple of (left, right) boxes sharing the split plane.
        """
        dx = self.upper.x - self.lower.x
        dy = self.upper.y - self.lower.y
        dz = self.upper.z - self.lower.z
        greatest = max(dx, dy, dz)

        x0, y0, z0 = self.lower.x, self.lower.y, self.lower.z
        x1, y1, z1 = self.upper.x, self.upper.y, self.upper.z

        if greatest == dx:
            x0 = x1 = x0 + dx / 2.0
        elif greatest == dy:
            y0 = y1 = y0 + dy / 2.0
        else:
            z0 = z1 = z0 + dz / 2.0

        left = Bounds(self.lower, point(x1, y1, z1))
        right = Bounds(point(x0, y0, z0), self.upper)
        return left, right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return self.lower == other.lower and self.upper == other.upper

    __hash__ = None

    def __repr__(self) -> str:
        return f"Bounds(lower={self.lower!r}, upper={self.upper!r})"


def _transform_corner(matrix: Matrix, corner: Tuple) -> list[float]:
    # inf * 0 terms in the product would give NaN; skip them
    rows = matrix.data
    coords = (corner.x, corner.y, corner.z, 1.0)
    values = []
    for row in range(3):
        total = 0.0
        for col in range(4):
            m = float(rows[row, col])
            if m != 0.0:
                total += m * coords[col]
        values.append(total)
    return values

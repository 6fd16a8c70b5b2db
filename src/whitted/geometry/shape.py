"""Shape base class and the intersection/normal protocol.

Every primitive is defined in its own object space, where the math is
simple (a unit sphere at the origin, the y = 0 plane, ...). The base class
owns the transform that places the primitive in its parent's space and
implements the world-space wrappers:

    intersect(ray):
        move the ray into object space with the inverse transform, then
        delegate to local_intersect()
    normal_at(point):
        walk the point down the parent chain into object space
        (world_to_object), compute local_normal_at(), then walk the normal
        back up with each inverse-transpose (normal_to_world)

Subclasses implement local_intersect(), local_normal_at() and
local_bounds(). A Group is the only shape with children; children hold a
weak reference to their parent so ownership flows strictly downward.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.core.transformations import scaling
    >>> from whitted.geometry.sphere import Sphere
    >>> s = Sphere(transform=scaling(2, 2, 2))
    >>> [x.t for x in s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))]
    [3.0, 7.0]
"""

from __future__ import annotations

import math
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitted.core.matrices import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, magnitude, normalize, vector
from whitted.geometry.bounds import Bounds
from whitted.materials.material import Material

if TYPE_CHECKING:
    from whitted.geometry.group import Group


@dataclass(frozen=True)
class Intersection:
    """Record of a ray crossing a shape's surface.

    Attributes:
        t: The ray parameter of the crossing. NaN marks "no hit".
        shape: The shape that was crossed (None for the no-hit sentinel).
    """

    t: float
    shape: Shape | None

    @property
    def is_hit(self) -> bool:
        """Whether this is a real intersection rather than the sentinel."""
        return not math.isnan(self.t)


NO_HIT = Intersection(math.nan, None)


def by_t(intersection: Intersection) -> float:
    """Sort key ordering intersections along the ray."""
    return intersection.t


class Shape(ABC):
    """Base class for all renderable shapes.

    Attributes:
        material: The surface material. Several shapes may share one
            instance; it is read-only while rendering.
    """

    def __init__(self, transform: Matrix | None = None, material: Material | None = None) -> None:
        self._parent: weakref.ReferenceType[Group] | None = None
        self.transform = transform if transform is not None else IDENTITY
        self.material = material if material is not None else Material()

    # ------------------------------------------------------------------
    # Transform and parent
    # ------------------------------------------------------------------

    @property
    def transform(self) -> Matrix:
        """The object-to-parent transform."""
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        # Inverse and inverse-transpose are reused by every ray and normal
        self._transform = matrix
        self._inverse = matrix.inverse()
        self._inverse_transpose = self._inverse.transpose()

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse

    @property
    def parent(self) -> Group | None:
        """The group containing this shape, if any."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, group: Group | None) -> None:
        self._parent = weakref.ref(group) if group is not None else None

    # ------------------------------------------------------------------
    # World-space wrappers
    # ------------------------------------------------------------------

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray given in parent space with this shape.

        Args:
            ray: The ray in the space of this shape's parent (world space
                for top-level shapes).

        Returns:
            Intersections ordered by ascending t. May be empty.
        """
        return self.local_intersect(ray.transform(self._inverse))

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Compute the unit surface normal at a world-space point."""
        local_point = self.world_to_object(world_point)
        local_normal = self.local_normal_at(local_point)
        return self.normal_to_world(local_normal)

    def world_to_object(self, world_point: Tuple) -> Tuple:
        """Convert a world-space point into this shape's object space.

        Ancestors are applied outermost first.
        """
        parent = self.parent
        if parent is not None:
            world_point = parent.world_to_object(world_point)
        return self._inverse * world_point

    def normal_to_world(self, local_normal: Tuple) -> Tuple:
        """Convert an object-space normal into a unit world-space normal.

        Each ancestor's inverse-transpose is applied innermost first; the
        w component is discarded and the result normalized once at the end.
        A zero-length normal, as at a cone apex, is returned unchanged.
        """
        normal = local_normal
        shape: Shape | None = self
        while shape is not None:
            normal = shape._inverse_transpose * normal
            shape = shape.parent
        normal = vector(normal.x, normal.y, normal.z)
        # No defined normal at degenerate points such as a cone apex
        if magnitude(normal) == 0.0:
            return normal
        return normalize(normal)

    def parent_space_bounds(self) -> Bounds:
        """Bounds of this shape expressed in its parent's space."""
        return self.local_bounds().transform(self._transform)

    # ------------------------------------------------------------------
    # Object-space protocol
    # ------------------------------------------------------------------

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray already expressed in object space."""

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Compute the (possibly un-normalized) object-space normal."""

    @abstractmethod
    def local_bounds(self) -> Bounds:
        """Bounding box in object space."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r})"

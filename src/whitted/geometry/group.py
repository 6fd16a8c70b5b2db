"""Groups of shapes sharing a common transform.

A Group owns an ordered list of children. Its transform applies to every
child, so nesting groups composes transforms. Intersecting a group moves
the ray into group space once and hands it to each child, which applies
its own transform in turn.

Example:
    >>> from whitted.core.transformations import scaling, translation
    >>> from whitted.geometry.group import Group
    >>> from whitted.geometry.sphere import Sphere
    >>> g = Group(transform=scaling(2, 2, 2))
    >>> g.add_child(Sphere(transform=translation(5, 0, 0)))
"""

from __future__ import annotations

from collections.abc import Iterator

from whitted.core.matrices import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.geometry.bounds import Bounds
from whitted.geometry.shape import Intersection, Shape, by_t
from whitted.materials.material import Material


class Group(Shape):
    """A shape that aggregates child shapes."""

    def __init__(self, transform: Matrix | None = None, material: Material | None = None) -> None:
        super().__init__(transform, material)
        self._children: list[Shape] = []

    @property
    def children(self) -> tuple[Shape, ...]:
        return tuple(self._children)

    def add_child(self, shape: Shape) -> None:
        """Append a shape and point its parent reference at this group.

        A shape belongs to at most one group; adding it to a second group
        is not supported.
        """
        self._children.append(shape)
        shape.parent = self

    def includes(self, shape: Shape) -> bool:
        return any(child is shape for child in self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._children)

    @property
    def is_empty(self) -> bool:
        return not self._children

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        xs: list[Intersection] = []
        for child in self._children:
            xs.extend(child.intersect(ray))
        xs.sort(key=by_t)
        return xs

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        raise RuntimeError(
            "Groups have no surface of their own; normals are computed on the child that was hit"
        )

    def local_bounds(self) -> Bounds:
        box = Bounds()
        for child in self._children:
            box.add_box(child.parent_space_bounds())
        return box

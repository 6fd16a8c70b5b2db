"""Geometry module for shape primitives and bounding volumes.

This module provides the shapes the tracer can render:

Components:
    shape: Shape base class, Intersection record and the world/object
        space conversions
    sphere: Unit sphere and the robust quadratic solver
    plane: Infinite xz plane
    cube: Axis-aligned cube (slab test)
    cylinder: Truncatable, optionally capped cylinders and cones
    group: Nested collections of shapes with a shared transform
    bounds: Axis-aligned bounding boxes

Every shape implements the object-space protocol:
    xs = shape.local_intersect(local_ray)
    n = shape.local_normal_at(local_point)
    box = shape.local_bounds()
and inherits the world-space wrappers intersect() and normal_at().
"""

from .bounds import Bounds, check_axis
from .cube import Cube
from .cylinder import Cone, Cylinder, check_cap
from .group import Group
from .plane import Plane
from .shape import NO_HIT, Intersection, Shape, by_t
from .sphere import Sphere, glass_sphere, solve_quadratic

__all__ = [
    "Shape",
    "Intersection",
    "NO_HIT",
    "by_t",
    "Sphere",
    "glass_sphere",
    "solve_quadratic",
    "Plane",
    "Cube",
    "Cylinder",
    "Cone",
    "check_cap",
    "Group",
    "Bounds",
    "check_axis",
]

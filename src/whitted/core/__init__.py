"""Core algebra module.

This module contains the numeric building blocks shared by every other
subpackage:

Components:
    tolerance: The shared epsilon and approximate comparisons
    tuples: Points, vectors and colors
    matrices: 4x4 matrices (NumPy backed) with inversion and transpose
    transformations: Translation, scaling, rotation, shearing, view transform
    ray: Ray data structure with position and transform operations
"""

from .matrices import IDENTITY, Matrix, identity_matrix
from .ray import Ray
from .tolerance import EPSILON, equal, near_zero
from .transformations import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import (
    BLACK,
    WHITE,
    Color,
    Tuple,
    cross,
    dot,
    magnitude,
    normalize,
    point,
    reflect,
    vector,
)

__all__ = [
    "EPSILON",
    "equal",
    "near_zero",
    "Tuple",
    "point",
    "vector",
    "magnitude",
    "normalize",
    "dot",
    "cross",
    "reflect",
    "Color",
    "BLACK",
    "WHITE",
    "Matrix",
    "IDENTITY",
    "identity_matrix",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
]

"""Affine transformation builders.

All angles are in radians. Transforms compose right to left, so
``translation(...) * scaling(...)`` scales first and then translates.
"""

import math

from whitted.core.matrices import Matrix
from whitted.core.tuples import Tuple, cross, normalize


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(
    x_y: float, x_z: float, y_x: float, y_z: float, z_x: float, z_y: float
) -> Matrix:
    """Build a shear matrix; ``x_y`` moves x in proportion to y, and so on."""
    return Matrix(
        [
            [1.0, x_y, x_z, 0.0],
            [y_x, 1.0, y_z, 0.0],
            [z_x, z_y, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Build the world transform that orients a camera.

    The camera sits at ``from_point`` looking toward ``to_point``, with
    ``up`` roughly indicating the vertical direction. The result moves the
    world so that the eye is at the origin looking down -z.

    Args:
        from_point: Eye position.
        to_point: Point the eye looks at.
        up: Approximate up vector (need not be normalized or orthogonal).

    Returns:
        The view transformation matrix.
    """
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)

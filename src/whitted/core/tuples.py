"""Points, vectors and colors.

A Tuple carries four components; the fourth (``w``) tags the value as a
point (1.0) or a vector (0.0). Tuples and colors are immutable values.
Arithmetic follows homogeneous-coordinate rules, so subtracting two points
yields a vector and adding a vector to a point yields a point. Equality is
approximate (see ``core.tolerance``).

Example:
    >>> from whitted.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> p + v
    Tuple(x=1.0, y=2.0, z=4.0, w=1.0)
"""

from __future__ import annotations

import math

from whitted.core.tolerance import equal


class Tuple:
    """A four-component point or vector.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: 1.0 for points, 0.0 for vectors.
    """

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))
        object.__setattr__(self, "w", float(w))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Tuple is immutable; cannot set {name!r}")

    @property
    def is_point(self) -> bool:
        return self.w == 1.0

    @property
    def is_vector(self) -> bool:
        return self.w == 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            equal(self.x, other.x)
            and equal(self.y, other.y)
            and equal(self.z, other.z)
            and equal(self.w, other.w)
        )

    __hash__ = None

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __repr__(self) -> str:
        return f"Tuple(x={self.x}, y={self.y}, z={self.z}, w={self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0)."""
    return Tuple(x, y, z, 0.0)


def magnitude(v: Tuple) -> float:
    """Compute the Euclidean length of a tuple, including w."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z + v.w * v.w)


def normalize(v: Tuple) -> Tuple:
    """Scale a tuple to unit length.

    Raises:
        ZeroDivisionError: If the tuple has zero length.
    """
    return v / magnitude(v)


def dot(a: Tuple, b: Tuple) -> float:
    """Compute the four-component dot product."""
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def cross(a: Tuple, b: Tuple) -> Tuple:
    """Compute the cross product of two vectors (the w components are ignored)."""
    return vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def reflect(incident: Tuple, normal: Tuple) -> Tuple:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction (pointing toward the surface).
        normal: The unit surface normal.

    Returns:
        The mirrored direction ``incident - 2 * dot(incident, normal) * normal``.
    """
    return incident - normal * (2.0 * dot(incident, normal))


class Color:
    """A linear RGB color.

    Components are unbounded floats in [0, inf); clamping happens only when
    the image is encoded.
    """

    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float) -> None:
        object.__setattr__(self, "red", float(red))
        object.__setattr__(self, "green", float(green))
        object.__setattr__(self, "blue", float(blue))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Color is immutable; cannot set {name!r}")

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            equal(self.red, other.red)
            and equal(self.green, other.green)
            and equal(self.blue, other.blue)
        )

    __hash__ = None

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            # Hadamard product, used to filter one color through another
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Color(red={self.red}, green={self.green}, blue={self.blue})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)

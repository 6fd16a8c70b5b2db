"""Light sources."""

from dataclasses import dataclass

from whitted.core.tuples import Color, Tuple


@dataclass(frozen=True)
class PointLight:
    """A light with no size, radiating equally in every direction.

    Attributes:
        position: World-space position of the light.
        intensity: Color and brightness of the light.
    """

    position: Tuple
    intensity: Color

"""Scene module for lights, intersection bookkeeping and world shading.

Components:
    lights: Point light source
    intersection: Hit selection, precomputed shading state, Schlick
    world: World container and recursive Whitted shading
    presets: Reference world and example scenes (import
        ``whitted.scene.presets`` directly; it depends on the camera)
"""

from .intersection import (
    Computations,
    hit,
    intersections,
    prepare_computations,
    refractive_indices,
    schlick,
)
from .lights import PointLight
from .world import DEFAULT_RECURSION_DEPTH, World

__all__ = [
    "PointLight",
    "Computations",
    "intersections",
    "hit",
    "prepare_computations",
    "refractive_indices",
    "schlick",
    "World",
    "DEFAULT_RECURSION_DEPTH",
]

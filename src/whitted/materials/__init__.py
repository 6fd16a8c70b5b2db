"""Materials module for surface appearance.

This module implements the local shading side of the tracer:

Components:
    material: Material parameters (Phong weights, reflectivity,
        transparency, refractive index) and the lighting() function
    patterns: Procedural patterns evaluated in pattern space

Materials also carry the reflective/transparent coefficients that the world
uses to decide whether to spawn secondary rays.
"""

from .material import AIR, DIAMOND, GLASS, VACUUM, WATER, Material, lighting
from .patterns import (
    CheckersPattern,
    CoordinatePattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)

__all__ = [
    "Material",
    "lighting",
    "VACUUM",
    "AIR",
    "WATER",
    "GLASS",
    "DIAMOND",
    "Pattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckersPattern",
    "CoordinatePattern",
]

"""Phong surface materials and the local lighting model.

A Material describes how a surface responds to light: its base color (or a
pattern), the ambient/diffuse/specular weights of the Phong model, and the
reflective/transparent coefficients that drive recursive shading.

Materials are plain mutable dataclasses. Assigning one instance to several
shapes shares it, which is how example scenes give many walls a common
look; treat shared materials as read-only once rendering starts.

Key formulas:
    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * dot(light_dir, normal)
    specular = light_intensity * specular * dot(reflect_dir, eye)^shininess

Example:
    >>> from whitted.core.tuples import Color
    >>> from whitted.materials.material import Material
    >>> glass = Material(color=Color(0, 0, 0.2), transparency=0.9, refractive_index=1.5)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.tuples import BLACK, Color, Tuple, dot, normalize, reflect

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape
    from whitted.materials.patterns import Pattern
    from whitted.scene.lights import PointLight

# Refractive indices of common media
VACUUM = 1.0
AIR = 1.00029
WATER = 1.333
GLASS = 1.52
DIAMOND = 2.417


@dataclass
class Material:
    """Surface appearance parameters.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Fraction of light reflected from ambient sources.
        diffuse: Weight of the matte (Lambertian) term.
        specular: Weight of the specular highlight.
        shininess: Highlight exponent; larger values give tighter highlights.
        reflective: Mirror reflectance in [0, 1]. 0 disables reflection rays.
        transparency: Fraction of light transmitted in [0, 1]. 0 disables
            refraction rays.
        refractive_index: Index of refraction (> 0). 1.0 is vacuum.
        pattern: Optional pattern that replaces ``color``.
    """

    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM
    pattern: Pattern | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check coefficient ranges.

        Raises:
            ValueError: If reflective or transparency fall outside [0, 1] or
                the refractive index is not positive.
        """
        if not 0.0 <= self.reflective <= 1.0:
            raise ValueError(f"Reflective = {self.reflective} must be in [0, 1].")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"Transparency = {self.transparency} must be in [0, 1].")
        if self.refractive_index <= 0.0:
            raise ValueError(f"Refractive index = {self.refractive_index} must be positive.")


def lighting(
    material: Material,
    shape: Shape | None,
    light: PointLight,
    point: Tuple,
    eyev: Tuple,
    normalv: Tuple,
    in_shadow: bool = False,
) -> Color:
    """Shade a point with the Phong reflection model.

    Args:
        material: The surface material.
        shape: The shape being shaded, needed to place a pattern in object
            space. May be None when the material has no pattern.
        light: The point light illuminating the surface.
        point: The world-space point being shaded.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal at the point.
        in_shadow: Whether the light is blocked; only ambient remains.

    Returns:
        The local illumination color (unclamped).
    """
    if material.pattern is not None and shape is not None:
        surface_color = material.pattern.pattern_at_shape(shape, point)
    else:
        surface_color = material.color

    # Combine the surface color with the light's color/intensity
    effective_color = surface_color * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    lightv = normalize(light.position - point)

    # A negative cosine means the light is on the other side of the surface
    light_dot_normal = dot(lightv, normalv)
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    # A negative cosine means the light reflects away from the eye
    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = dot(reflectv, eyev)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular

"""World container and recursive Whitted shading.

The world holds the top-level shapes and a single point light. Shading a
ray follows the classic Whitted recursion:

    color_at(ray):
        intersect every shape, take the hit, prepare computations
    shade_hit(comps):
        Phong lighting at over_point (ambient only when in shadow)
        + reflected_color: recurse along reflectv from over_point
        + refracted_color: recurse along the Snell direction from under_point

Each recursive call decrements ``remaining``; at zero the secondary
contribution is black, so mutually reflecting surfaces terminate. When a
material is both reflective and transparent, the Schlick reflectance
weights the reflected and refracted terms.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.scene.presets import default_world
    >>> world = default_world()
    >>> color = world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
"""

from __future__ import annotations

import logging
import math

from whitted.core.ray import Ray
from whitted.core.tuples import BLACK, Color, Tuple, dot, magnitude, normalize
from whitted.geometry.shape import Intersection, Shape, by_t
from whitted.materials.material import lighting
from whitted.scene.intersection import Computations, hit, prepare_computations, schlick
from whitted.scene.lights import PointLight

logger = logging.getLogger(__name__)

# =============================================================================
# Rendering Constants
# =============================================================================

# Reflection/refraction recursion budget for primary rays
DEFAULT_RECURSION_DEPTH = 5


class World:
    """A collection of shapes lit by at most one point light.

    Attributes:
        objects: Top-level shapes, in insertion order.
        light: The light source, or None for an unlit world.
    """

    def __init__(
        self, objects: list[Shape] | None = None, light: PointLight | None = None
    ) -> None:
        self.objects: list[Shape] = list(objects) if objects is not None else []
        self.light = light

    def add(self, *shapes: Shape) -> None:
        """Append shapes to the world."""
        self.objects.extend(shapes)
        logger.debug("World now holds %d objects", len(self.objects))

    def __contains__(self, shape: object) -> bool:
        return any(obj is shape for obj in self.objects)

    def _require_light(self) -> PointLight:
        if self.light is None:
            raise RuntimeError("World has no light; set world.light before shading")
        return self.light

    # =========================================================================
    # Ray queries
    # =========================================================================

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray with every shape in the world.

        Returns:
            All intersections, sorted by ascending t.
        """
        xs: list[Intersection] = []
        for obj in self.objects:
            xs.extend(obj.intersect(ray))
        xs.sort(key=by_t)
        return xs

    def is_shadowed(self, point: Tuple) -> bool:
        """Check whether anything lies between ``point`` and the light.

        Only hits strictly closer than the light count; a shape behind the
        light casts no shadow.
        """
        light = self._require_light()
        to_light = light.position - point
        distance = magnitude(to_light)

        h = hit(self.intersect(Ray(point, normalize(to_light))))
        return h.is_hit and h.t < distance

    # =========================================================================
    # Shading
    # =========================================================================

    def shade_hit(self, comps: Computations, remaining: int = DEFAULT_RECURSION_DEPTH) -> Color:
        """Compute the color at a prepared hit, including secondary rays."""
        light = self._require_light()
        material = comps.shape.material

        shadowed = self.is_shadowed(comps.over_point)
        surface = lighting(
            material,
            comps.shape,
            light,
            comps.over_point,
            comps.eyev,
            comps.normalv,
            shadowed,
        )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_color(
        self, comps: Computations, remaining: int = DEFAULT_RECURSION_DEPTH
    ) -> Color:
        """Color seen along the mirror direction, scaled by reflectivity."""
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(
        self, comps: Computations, remaining: int = DEFAULT_RECURSION_DEPTH
    ) -> Color:
        """Color seen through a transparent surface, scaled by transparency.

        Returns black under total internal reflection.
        """
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return BLACK

        # Snell's law: sin_t = n_ratio * sin_i
        n_ratio = comps.n1 / comps.n2
        cos_i = dot(comps.eyev, comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio

        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def color_at(self, ray: Ray, remaining: int = DEFAULT_RECURSION_DEPTH) -> Color:
        """Trace a ray into the world and return the color it sees.

        Args:
            ray: The ray to trace, in world space.
            remaining: Recursion budget for reflection and refraction.

        Returns:
            The shaded color, or black if the ray hits nothing.
        """
        xs = self.intersect(ray)
        h = hit(xs)
        if not h.is_hit:
            return BLACK

        comps = prepare_computations(h, ray, xs)
        return self.shade_hit(comps, remaining)

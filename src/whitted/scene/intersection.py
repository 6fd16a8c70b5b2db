"""Intersection bookkeeping and precomputed shading state.

This module turns the raw (t, shape) records produced by shapes into the
data the shading pipeline needs:

- intersections(): collect records into a list sorted by t
- hit(): pick the visible intersection (smallest positive t)
- prepare_computations(): derive the hit point, eye/normal/reflection
  vectors, the over/under points and the refractive indices on either side
  of the surface
- schlick(): Fresnel reflectance for transparent surfaces

Refractive indices are found by walking the full sorted intersection list
and tracking which shapes the ray is currently inside, so nested and
overlapping transparent shapes hand off correctly from one medium to the
next.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.sphere import Sphere
    >>> from whitted.scene.intersection import hit, prepare_computations
    >>> r = Ray(point(0, 0, -5), vector(0, 0, 1))
    >>> xs = Sphere().intersect(r)
    >>> comps = prepare_computations(hit(xs), r, xs)
    >>> comps.t
    4.0
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tolerance import EPSILON
from whitted.core.tuples import Tuple, dot, reflect
from whitted.geometry.shape import NO_HIT, Intersection, Shape, by_t
from whitted.materials.material import VACUUM


def intersections(*xs: Intersection) -> list[Intersection]:
    """Aggregate intersections into a list sorted by ascending t."""
    return sorted(xs, key=by_t)


def hit(xs: Iterable[Intersection]) -> Intersection:
    """Return the intersection with the smallest positive t.

    Intersections at or behind the ray origin (t <= 0) are never eligible.

    Returns:
        The visible intersection, or NO_HIT if there is none.
    """
    return min((x for x in xs if x.t > 0.0), key=by_t, default=NO_HIT)


@dataclass(frozen=True)
class Computations:
    """Shading state derived from one intersection.

    Attributes:
        t: Ray parameter of the hit.
        shape: The shape that was hit.
        point: World-space hit point.
        eyev: Unit vector from the hit point back toward the ray origin.
        normalv: Unit surface normal, flipped to face the eye.
        inside: Whether the ray origin is inside the shape (normal flipped).
        reflectv: Ray direction mirrored about the normal.
        over_point: Hit point nudged along the normal, used to start shadow
            and reflection rays without re-hitting the surface.
        under_point: Hit point nudged against the normal, used to start
            refraction rays just inside the surface.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    shape: Shape
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool
    reflectv: Tuple
    over_point: Tuple
    under_point: Tuple
    n1: float
    n2: float


def refractive_indices(target: Intersection, xs: Sequence[Intersection]) -> tuple[float, float]:
    """Find the refractive indices on either side of ``target``.

    Walks the sorted intersections keeping a list of shapes the ray is
    inside. Each intersection toggles its shape in that list: removed if
    present (the ray exits), appended otherwise (the ray enters).

    Returns:
        Tuple of (n1, n2): the innermost container's index just before and
        just after ``target`` is processed, 1.0 when the list is empty.
    """
    containers: list[Shape] = []
    n1 = n2 = VACUUM

    for x in xs:
        if x == target:
            n1 = containers[-1].material.refractive_index if containers else VACUUM

        if x.shape in containers:
            containers.remove(x.shape)
        else:
            containers.append(x.shape)

        if x == target:
            n2 = containers[-1].material.refractive_index if containers else VACUUM
            break

    return n1, n2


def prepare_computations(
    hit_: Intersection, ray: Ray, xs: Sequence[Intersection] | None = None
) -> Computations:
    """Precompute shading state for an intersection.

    Args:
        hit_: The intersection being shaded.
        ray: The ray that produced it.
        xs: The full sorted intersection list for that ray, used for
            refractive-index bookkeeping. Defaults to just ``hit_``.

    Returns:
        A Computations snapshot.
    """
    if xs is None:
        xs = [hit_]
    n1, n2 = refractive_indices(hit_, xs)

    shape = hit_.shape
    position = ray.position(hit_.t)
    eyev = -ray.direction
    normalv = shape.normal_at(position)

    inside = dot(normalv, eyev) < 0.0
    if inside:
        normalv = -normalv

    offset = normalv * EPSILON
    return Computations(
        t=hit_.t,
        shape=shape,
        point=position,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=reflect(ray.direction, normalv),
        over_point=position + offset,
        under_point=position - offset,
        n1=n1,
        n2=n2,
    )


def schlick(comps: Computations) -> float:
    """Approximate the Fresnel reflectance at a transparent surface.

    Returns 1.0 under total internal reflection. Otherwise uses
    r0 + (1 - r0) * (1 - cos)^5 with r0 = ((n1 - n2) / (n1 + n2))^2,
    where cos is the transmitted-angle cosine when leaving a denser medium.

    Args:
        comps: Precomputed state for the hit.

    Returns:
        The fraction of light reflected, in [0, 1].
    """
    cos = dot(comps.eyev, comps.normalv)

    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5

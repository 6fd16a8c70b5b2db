"""Ready-made worlds and example scenes.

Factories:
    default_world: Two concentric spheres and a white light; the reference
        world for shading tests
    reflect_refract_scene: Checkered reflective floor, a hollow glass
        sphere, a mirror cube, a capped cylinder and a cone
    nested_group_scene: A hexagon of spheres and cylinders built from
        nested groups

The example scenes return a (World, Camera) pair sized for the requested
canvas.

Example:
    >>> from whitted.scene.presets import reflect_refract_scene
    >>> world, camera = reflect_refract_scene(width=320, height=180)
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from whitted.camera.camera import Camera
from whitted.core.transformations import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    translation,
    view_transform,
)
from whitted.core.tuples import Color, point, vector
from whitted.geometry.cube import Cube
from whitted.geometry.cylinder import Cone, Cylinder
from whitted.geometry.group import Group
from whitted.geometry.plane import Plane
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere
from whitted.materials.material import AIR, GLASS, Material
from whitted.materials.patterns import CheckersPattern, RingPattern
from whitted.scene.lights import PointLight
from whitted.scene.world import World

logger = logging.getLogger(__name__)

# =============================================================================
# Scene Parameters
# =============================================================================


@dataclass
class SceneParams:
    """Light and camera placement shared by the example scenes.

    Attributes:
        light_position: World-space position of the point light.
        light_color: RGB intensity of the light.
        camera_from: Eye position.
        camera_to: Point the camera looks at.
        camera_up: Approximate up direction for the view.
    """

    light_position: tuple[float, float, float] = (-4.9, 4.9, -1.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    camera_from: tuple[float, float, float] = (0.0, 1.5, -5.0)
    camera_to: tuple[float, float, float] = (0.0, 1.0, 0.0)
    camera_up: tuple[float, float, float] = (0.0, 1.0, 0.0)


def _light(params: SceneParams) -> PointLight:
    return PointLight(point(*params.light_position), Color(*params.light_color))


def _camera(params: SceneParams, width: int, height: int, field_of_view: float) -> Camera:
    camera = Camera(width, height, field_of_view)
    camera.transform = view_transform(
        point(*params.camera_from),
        point(*params.camera_to),
        vector(*params.camera_up),
    )
    return camera


# =============================================================================
# Reference World
# =============================================================================


def default_world() -> World:
    """Create the reference world.

    - Light: white point light at (-10, 10, -10)
    - Outer sphere: unit sphere, color (0.8, 1.0, 0.6), diffuse 0.7,
      specular 0.2
    - Inner sphere: unit sphere scaled by 0.5, default material
    """
    light = PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))

    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))

    return World([outer, inner], light)


# =============================================================================
# Example Scenes
# =============================================================================


def reflect_refract_scene(
    width: int = 400,
    height: int = 225,
    field_of_view: float = math.pi / 3,
    params: SceneParams | None = None,
) -> tuple[World, Camera]:
    """Create a showcase of reflection, refraction and every primitive.

    Layout:
    - Checkered floor (slightly reflective) and a ringed back wall
    - Hollow glass sphere: a glass shell around a smaller air bubble
    - Mirror cube on the right
    - Closed red cylinder and a blue cone on the left

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        field_of_view: Camera field of view in radians.
        params: Optional light/camera placement.

    Returns:
        Tuple of (World, Camera).
    """
    if params is None:
        params = SceneParams()

    floor = Plane(
        material=Material(
            pattern=CheckersPattern(Color(0.35, 0.35, 0.35), Color(0.65, 0.65, 0.65)),
            specular=0.0,
            reflective=0.3,
        )
    )
    back_wall = Plane(
        transform=translation(0.0, 0.0, 8.0) * rotation_x(math.pi / 2),
        material=Material(
            pattern=RingPattern(
                Color(0.55, 0.6, 0.75),
                Color(0.45, 0.5, 0.65),
                transform=scaling(0.5, 0.5, 0.5),
            ),
            specular=0.0,
        ),
    )

    glass_shell = Sphere(
        transform=translation(0.0, 1.0, 0.5),
        material=Material(
            color=Color(0.05, 0.05, 0.05),
            diffuse=0.1,
            shininess=300.0,
            reflective=0.9,
            transparency=0.9,
            refractive_index=GLASS,
        ),
    )
    air_bubble = Sphere(
        transform=translation(0.0, 1.0, 0.5) * scaling(0.5, 0.5, 0.5),
        material=Material(
            color=Color(0.0, 0.0, 0.0),
            diffuse=0.0,
            shininess=300.0,
            reflective=0.9,
            transparency=0.9,
            refractive_index=AIR,
        ),
    )

    mirror_cube = Cube(
        transform=translation(2.2, 0.6, 1.5) * rotation_y(math.pi / 5) * scaling(0.6, 0.6, 0.6),
        material=Material(
            color=Color(0.1, 0.1, 0.1),
            diffuse=0.2,
            specular=1.0,
            reflective=0.8,
        ),
    )

    cylinder = Cylinder(
        transform=translation(-2.0, 0.0, 1.0) * scaling(0.5, 1.0, 0.5),
        material=Material(color=Color(0.8, 0.2, 0.1), diffuse=0.8, specular=0.3),
        minimum=0.0,
        maximum=1.5,
        closed=True,
    )
    cone = Cone(
        transform=translation(-1.0, 0.8, -0.8) * scaling(0.4, 0.8, 0.4),
        material=Material(color=Color(0.1, 0.3, 0.9), diffuse=0.8, specular=0.5),
        minimum=-1.0,
        maximum=0.0,
        closed=True,
    )

    world = World(light=_light(params))
    world.add(floor, back_wall, glass_shell, air_bubble, mirror_cube, cylinder, cone)
    logger.debug("Built reflect/refract scene with %d objects", len(world.objects))

    return world, _camera(params, width, height, field_of_view)


def _hexagon_corner(material: Material) -> Shape:
    return Sphere(
        transform=translation(0.0, 0.0, -1.0) * scaling(0.25, 0.25, 0.25),
        material=material,
    )


def _hexagon_edge(material: Material) -> Shape:
    return Cylinder(
        transform=(
            translation(0.0, 0.0, -1.0)
            * rotation_y(-math.pi / 6)
            * rotation_z(-math.pi / 2)
            * scaling(0.25, 1.0, 0.25)
        ),
        material=material,
        minimum=0.0,
        maximum=1.0,
    )


def _hexagon_side(index: int, material: Material) -> Group:
    side = Group(transform=rotation_y(index * math.pi / 3))
    side.add_child(_hexagon_corner(material))
    side.add_child(_hexagon_edge(material))
    return side


def nested_group_scene(
    width: int = 300,
    height: int = 200,
    field_of_view: float = math.pi / 3,
    params: SceneParams | None = None,
) -> tuple[World, Camera]:
    """Create a hexagon assembled from nested groups.

    The hexagon is a group of six side groups, each holding a corner sphere
    and an edge cylinder; the outer group tilts the whole assembly.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        field_of_view: Camera field of view in radians.
        params: Optional light/camera placement.

    Returns:
        Tuple of (World, Camera).
    """
    if params is None:
        params = SceneParams(camera_from=(0.0, 2.5, -4.0), camera_to=(0.0, 0.5, 0.0))

    metal = Material(
        color=Color(0.9, 0.75, 0.3),
        ambient=0.15,
        diffuse=0.6,
        specular=0.9,
        shininess=150.0,
        reflective=0.2,
    )

    hexagon = Group(transform=translation(0.0, 1.0, 0.0) * rotation_x(-math.pi / 6))
    for index in range(6):
        hexagon.add_child(_hexagon_side(index, metal))

    floor = Plane(
        material=Material(
            pattern=CheckersPattern(Color(0.2, 0.2, 0.25), Color(0.8, 0.8, 0.85)),
            specular=0.0,
            reflective=0.15,
        )
    )

    world = World(light=_light(params))
    world.add(floor, hexagon)
    logger.debug("Built nested group scene with %d hexagon sides", len(hexagon))

    return world, _camera(params, width, height, field_of_view)

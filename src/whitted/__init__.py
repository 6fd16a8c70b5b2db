"""Whitted-style recursive ray tracer.

This package renders scenes built from transformed primitives with Phong
lighting, hard shadows, reflection and refraction:
- Exact ray/primitive intersection for spheres, planes, cubes, cylinders
  and cones, plus nested groups with composed transforms
- Refractive-index bookkeeping for overlapping transparent shapes
- Schlick-weighted blending of reflected and refracted contributions
- A pinhole camera driving a per-pixel render loop

Subpackages:
    core: Tuples, colors, matrices, transformations and rays
    geometry: Shape primitives, groups and bounding boxes
    materials: Surface materials, patterns and the lighting model
    scene: Intersections, lights and the world shading pipeline
    camera: Camera model and the render loop
    preview: Canvas, image export and Matplotlib preview
"""

__version__ = "0.1.0"

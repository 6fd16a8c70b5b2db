#!/usr/bin/env python3
"""Render one of the example scenes.

This script builds an example scene, renders it with the Whitted ray
tracer and writes the result as PNG or PPM (chosen by the output suffix).

Usage:
    python -m examples.render_scene [options]

Options:
    --scene NAME        reflect_refract or nested_groups (default: reflect_refract)
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 225)
    --fov DEGREES       Field of view in degrees (default: 60)
    --max-depth N       Reflection/refraction recursion budget (default: 5)
    --output OUTPUT     Output file path (default: render.png)
    --gamma GAMMA       Output gamma (default: 2.2)
    --tone-map METHOD   none or reinhard (default: none)
    --preview           Show the result in a Matplotlib window
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_scene --scene nested_groups --width 200 --height 150
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from whitted.config import (
    DEFAULT_FIELD_OF_VIEW,
    DEFAULT_GAMMA,
    DEFAULT_HEIGHT,
    DEFAULT_OUTPUT,
    DEFAULT_WIDTH,
    RenderConfig,
)
from whitted.preview.export import save_png, save_ppm
from whitted.scene.presets import nested_group_scene, reflect_refract_scene
from whitted.scene.world import DEFAULT_RECURSION_DEPTH

SCENES = {
    "reflect_refract": reflect_refract_scene,
    "nested_groups": nested_group_scene,
}


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render an example scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="reflect_refract",
        help="Scene to render (default: reflect_refract)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Image width in pixels (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_HEIGHT,
        help=f"Image height in pixels (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "--fov",
        dest="field_of_view",
        type=float,
        default=DEFAULT_FIELD_OF_VIEW,
        help=f"Field of view in degrees (default: {DEFAULT_FIELD_OF_VIEW:g})",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_RECURSION_DEPTH,
        help=f"Reflection/refraction recursion budget (default: {DEFAULT_RECURSION_DEPTH})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=DEFAULT_OUTPUT,
        help=f"Output file path, .png or .ppm (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--gamma",
        type=float,
        default=DEFAULT_GAMMA,
        help=f"Output gamma (default: {DEFAULT_GAMMA})",
    )
    parser.add_argument(
        "--tone-map",
        choices=["none", "reinhard"],
        default="none",
        help="Tone mapping method (default: none)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def render_scene(scene: str, config: RenderConfig, quiet: bool = False, preview: bool = False) -> Path:
    """Render a named scene and save it.

    Args:
        scene: Key into SCENES.
        config: Validated render settings.
        quiet: If True, suppress progress output.
        preview: If True, open a Matplotlib window after saving.

    Returns:
        Path to the saved image file.
    """
    if not quiet:
        print(f"Creating {scene} scene ({config.width}x{config.height})...")

    world, camera = SCENES[scene](
        width=config.width,
        height=config.height,
        field_of_view=config.field_of_view_radians,
    )

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (rows_done / total_rows) * 100 if total_rows > 0 else 0
            print(
                f"\r  Progress: {rows_done}/{total_rows} rows "
                f"({progress_pct:.1f}%) - {elapsed:.1f}s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, max_depth=config.max_depth, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = config.output_path
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file, tone_map=config.tone_map, gamma=config.gamma)
    else:
        save_png(canvas, output_file, tone_map=config.tone_map, gamma=config.gamma)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    if preview:
        from whitted.preview.display import show_preview

        show_preview(canvas, tone_map=config.tone_map, gamma=config.gamma)

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    try:
        config = RenderConfig.from_args(args)
        render_scene(args.scene, config, quiet=args.quiet, preview=args.preview)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

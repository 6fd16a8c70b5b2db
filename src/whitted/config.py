"""Render configuration.

RenderConfig gathers the knobs an example script or caller sets for a
render: canvas size, field of view, recursion budget and output options.
It can be built directly or from an argparse namespace.

Example:
    >>> from whitted.config import RenderConfig
    >>> config = RenderConfig(width=320, height=180, field_of_view=60.0)
    >>> config.validate()
    >>> config.field_of_view_radians
    1.0471975511965976
"""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from pathlib import Path

from whitted.preview.display import TONE_MAP_METHODS
from whitted.scene.world import DEFAULT_RECURSION_DEPTH

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 225
DEFAULT_FIELD_OF_VIEW = 60.0  # degrees
DEFAULT_OUTPUT = "render.png"
DEFAULT_GAMMA = 2.2


@dataclass
class RenderConfig:
    """Settings for one render.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        field_of_view: Field of view in degrees, across the wider canvas
            dimension.
        max_depth: Recursion budget for reflection and refraction.
        output: Output image path; the suffix (.png or .ppm) picks the format.
        gamma: Gamma applied when encoding the image.
        tone_map: "none" or "reinhard".
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    field_of_view: float = DEFAULT_FIELD_OF_VIEW
    max_depth: int = DEFAULT_RECURSION_DEPTH
    output: str = DEFAULT_OUTPUT
    gamma: float = DEFAULT_GAMMA
    tone_map: str = "none"

    @property
    def field_of_view_radians(self) -> float:
        return math.radians(self.field_of_view)

    @property
    def output_path(self) -> Path:
        return Path(self.output)

    def validate(self) -> None:
        """Check that the settings describe a renderable image.

        Raises:
            ValueError: If a size, the field of view or gamma is out of
                range, the depth is negative or the tone map is unknown.
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.field_of_view < 180.0:
            raise ValueError(f"Field of view = {self.field_of_view} must be in (0, 180) degrees")
        if self.max_depth < 0:
            raise ValueError(f"max_depth = {self.max_depth} must be non-negative")
        if self.gamma <= 0.0:
            raise ValueError(f"Gamma = {self.gamma} must be positive")
        if self.tone_map not in TONE_MAP_METHODS:
            raise ValueError(
                f"Unknown tone mapping method: {self.tone_map} "
                f"(expected one of {', '.join(TONE_MAP_METHODS)})"
            )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> RenderConfig:
        """Build and validate a config from parsed command-line arguments.

        Attributes missing from ``args`` keep their defaults.
        """
        values = {
            name: getattr(args, name)
            for name in cls.__dataclass_fields__
            if getattr(args, name, None) is not None
        }
        config = cls(**values)
        config.validate()
        return config

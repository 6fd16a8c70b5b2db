"""Tests for render configuration.

Tests cover:
- Default values
- Validation of sizes, angles, depth, gamma and tone mapping
- Building a config from an argparse namespace
"""

import argparse
import math
from pathlib import Path

import pytest

from whitted.config import (
    DEFAULT_FIELD_OF_VIEW,
    DEFAULT_GAMMA,
    DEFAULT_HEIGHT,
    DEFAULT_OUTPUT,
    DEFAULT_WIDTH,
    RenderConfig,
)
from whitted.scene.world import DEFAULT_RECURSION_DEPTH


class TestRenderConfigDefaults:
    """Test default settings."""

    def test_defaults(self):
        """Test that a bare config uses the module defaults."""
        config = RenderConfig()
        assert config.width == DEFAULT_WIDTH
        assert config.height == DEFAULT_HEIGHT
        assert config.field_of_view == DEFAULT_FIELD_OF_VIEW
        assert config.max_depth == DEFAULT_RECURSION_DEPTH
        assert config.output == DEFAULT_OUTPUT
        assert config.gamma == DEFAULT_GAMMA
        assert config.tone_map == "none"
        config.validate()

    def test_field_of_view_radians(self):
        """Test degree to radian conversion."""
        config = RenderConfig(field_of_view=90.0)
        assert abs(config.field_of_view_radians - math.pi / 2) < 1e-12

    def test_output_path(self):
        """Test that the output is exposed as a Path."""
        assert RenderConfig(output="shots/a.ppm").output_path == Path("shots/a.ppm")


class TestRenderConfigValidation:
    """Test that invalid settings are rejected."""

    def test_invalid_values(self):
        """Test each out-of-range setting."""
        cases = [
            {"width": 0},
            {"height": -5},
            {"field_of_view": 0.0},
            {"field_of_view": 180.0},
            {"max_depth": -1},
            {"gamma": 0.0},
            {"tone_map": "filmic"},
        ]
        for overrides in cases:
            with pytest.raises(ValueError):
                RenderConfig(**overrides).validate()

    def test_zero_depth_is_valid(self):
        """Test that a zero recursion budget is allowed."""
        RenderConfig(max_depth=0).validate()


class TestFromArgs:
    """Test building configs from parsed arguments."""

    def test_full_namespace(self):
        """Test that every field is read from the namespace."""
        args = argparse.Namespace(
            width=64,
            height=48,
            field_of_view=45.0,
            max_depth=2,
            output="out.ppm",
            gamma=1.0,
            tone_map="reinhard",
            scene="nested_groups",
            preview=False,
        )
        config = RenderConfig.from_args(args)
        assert config == RenderConfig(64, 48, 45.0, 2, "out.ppm", 1.0, "reinhard")

    def test_partial_namespace_keeps_defaults(self):
        """Test that missing or None attributes fall back to defaults."""
        args = argparse.Namespace(width=32, height=None)
        config = RenderConfig.from_args(args)
        assert config.width == 32
        assert config.height == DEFAULT_HEIGHT
        assert config.gamma == DEFAULT_GAMMA

    def test_invalid_namespace(self):
        """Test that from_args validates the result."""
        with pytest.raises(ValueError):
            RenderConfig.from_args(argparse.Namespace(max_depth=-3))

"""Preview and export module.

Components:
    canvas: The float32 pixel grid a render writes into
    display: Tone mapping, gamma and the Matplotlib preview window
    export: PNG (Pillow) and plain PPM writers
"""

from .canvas import Canvas
from .display import (
    ToneMapMethod,
    apply_gamma,
    process_image_for_display,
    show_preview,
    tone_map_reinhard,
)
from .export import canvas_to_ppm, canvas_to_uint8, save_png, save_ppm

__all__ = [
    "Canvas",
    "ToneMapMethod",
    "apply_gamma",
    "tone_map_reinhard",
    "process_image_for_display",
    "show_preview",
    "canvas_to_uint8",
    "canvas_to_ppm",
    "save_png",
    "save_ppm",
]

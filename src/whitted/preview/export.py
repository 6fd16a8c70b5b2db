"""Image export for rendered canvases.

Supported formats:
    - PNG (8-bit via Pillow)
    - PPM (plain-text P3, handy for diffing small test renders)

Both formats go through the same display pipeline (see ``display``) and
round to 8 bits, so a channel value of 0.5 becomes 128.

Example:
    >>> from whitted.preview.export import save_png
    >>> from whitted.scene.presets import default_world
    >>> from whitted.camera.camera import Camera
    >>> save_png(Camera(100, 50, 1.0).render(default_world()), "out.png", gamma=2.2)
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.preview.canvas import Canvas
from whitted.preview.display import ToneMapMethod, process_image_for_display

logger = logging.getLogger(__name__)

# Plain PPM readers are only required to accept lines up to this length
PPM_LINE_LIMIT = 70


def canvas_to_uint8(
    canvas: Canvas,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit RGB array of shape (H, W, 3)."""
    processed = process_image_for_display(canvas.to_numpy(), tone_map=tone_map, gamma=gamma)
    return np.rint(processed * 255.0).astype(np.uint8)


def save_png(
    canvas: Canvas,
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
) -> None:
    """Save a canvas as an 8-bit PNG.

    Args:
        canvas: The rendered canvas.
        filepath: Output file path (should end in .png).
        tone_map: "none" or "reinhard".
        gamma: Gamma value; 1.0 writes linear values, 2.2 approximates sRGB.
    """
    image_uint8 = canvas_to_uint8(canvas, tone_map=tone_map, gamma=gamma)
    PILImage.fromarray(image_uint8).save(filepath)
    logger.info("Saved %dx%d PNG to %s", canvas.width, canvas.height, filepath)


def _wrap_tokens(tokens: list[str], limit: int = PPM_LINE_LIMIT) -> list[str]:
    lines: list[str] = []
    current = ""
    for token in tokens:
        if not current:
            current = token
        elif len(current) + 1 + len(token) <= limit:
            current += " " + token
        else:
            lines.append(current)
            current = token
    if current:
        lines.append(current)
    return lines


def canvas_to_ppm(
    canvas: Canvas,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
) -> str:
    """Encode a canvas as plain PPM (P3) text.

    Each pixel row starts on a new line, and no line exceeds 70 characters.
    The text ends with a newline.
    """
    image_uint8 = canvas_to_uint8(canvas, tone_map=tone_map, gamma=gamma)

    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]
    for row in image_uint8:
        lines.extend(_wrap_tokens([str(int(v)) for v in row.reshape(-1)]))
    return "\n".join(lines) + "\n"


def save_ppm(
    canvas: Canvas,
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
) -> None:
    """Save a canvas as a plain PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas, tone_map=tone_map, gamma=gamma))
    logger.info("Saved %dx%d PPM to %s", canvas.width, canvas.height, filepath)

"""Matplotlib-based preview of rendered canvases.

The renderer produces linear, unclamped colors. Before they are shown (or
written to an 8-bit file) they pass through a small display pipeline:

1. Optional tone mapping (Reinhard) for scenes brighter than 1.0
2. Gamma encoding
3. Clamping to [0, 1]

Example:
    >>> from whitted.preview.display import show_preview
    >>> from whitted.scene.presets import reflect_refract_scene
    >>> world, camera = reflect_refract_scene(width=160, height=90)
    >>> show_preview(camera.render(world), tone_map="reinhard")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from whitted.preview.canvas import Canvas


# Type alias for tone mapping options
ToneMapMethod = Literal["none", "reinhard"]

TONE_MAP_METHODS: tuple[str, ...] = ("none", "reinhard")


def tone_map_reinhard(image: npt.NDArray[np.float32]) -> npt.NDArray[np.float32]:
    """Compress HDR values into [0, 1) with c / (1 + c)."""
    image = np.maximum(image, 0.0)
    return (image / (1.0 + image)).astype(np.float32)


def apply_gamma(
    image: npt.NDArray[np.float32],
    gamma: float = 2.2,
) -> npt.NDArray[np.float32]:
    """Gamma-encode a linear image.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value. 1.0 leaves the image untouched.

    Returns:
        The encoded image, clamped to [0, 1] first so negative values
        cannot produce NaN.

    Raises:
        ValueError: If gamma is not positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"Gamma must be positive, got {gamma}")
    if gamma == 1.0:
        return image

    image = np.clip(image, 0.0, 1.0)
    return np.power(image, 1.0 / gamma).astype(np.float32)


def process_image_for_display(
    image: npt.NDArray[np.float32],
    tone_map: ToneMapMethod = "none",
    gamma: float = 2.2,
) -> npt.NDArray[np.float32]:
    """Run the full display pipeline on a linear image.

    Args:
        image: Linear image array of shape (H, W, 3).
        tone_map: "none" or "reinhard".
        gamma: Gamma value (2.2 approximates sRGB).

    Returns:
        Image ready for display, in [0, 1].

    Raises:
        ValueError: For an unknown tone mapping method.
    """
    result = image.copy()

    if tone_map == "reinhard":
        result = tone_map_reinhard(result)
    elif tone_map != "none":
        raise ValueError(f"Unknown tone mapping method: {tone_map}")

    result = apply_gamma(result, gamma)
    return np.clip(result, 0.0, 1.0).astype(np.float32)


def show_preview(
    canvas: Canvas,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 2.2,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a canvas in a Matplotlib window.

    Args:
        canvas: The rendered canvas.
        tone_map: "none" or "reinhard".
        gamma: Gamma value applied for display.
        title: Window title (default shows the resolution).
        figsize: Figure size in inches (width, height).
        block: Whether to block until the window is closed.
    """
    import matplotlib.pyplot as plt

    display_image = process_image_for_display(canvas.to_numpy(), tone_map=tone_map, gamma=gamma)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")

    if title is None:
        title = f"Render Preview - {canvas.width}x{canvas.height}"
        if tone_map != "none":
            title += f" ({tone_map})"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)

"""Camera module.

Components:
    camera: Pinhole camera, per-pixel ray generation and the render loop
"""

from .camera import Camera, ProgressCallback

__all__ = ["Camera", "ProgressCallback"]

"""Pixel grid that the rasterizer paints into, and its PNG output."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from scanline.color import TRANSPARENT, Color

_logger = logging.getLogger(__name__)


class CanvasBoundsError(IndexError):
    """A pixel coordinate fell outside the canvas."""


class Canvas:
    def __init__(self, width, height, name=""):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.name = name
        self.framebuffer = np.zeros((height, width, 4), dtype=np.uint8)

    def __repr__(self):
        return f"Canvas({self.width}, {self.height}, {self.name!r})"

    def _check(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise CanvasBoundsError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas {self.name!r}"
            )

    def get_pixel(self, x: int, y: int) -> Color:
        self._check(x, y)
        return Color(*(int(c) for c in self.framebuffer[y, x]))

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self.framebuffer[y, x] = color

    def fill(self, color: Color = TRANSPARENT) -> None:
        self.framebuffer[:, :] = color

    def painted_mask(self) -> np.ndarray:
        """Boolean (height, width) mask of pixels that differ from transparent."""
        return np.any(self.framebuffer != 0, axis=2)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.framebuffer)

    def save(self, directory) -> Path:
        path = Path(directory) / self.name
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_image().save(path)
        _logger.info("wrote %s (%dx%d)", path, self.width, self.height)
        return path

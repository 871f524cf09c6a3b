"""Pillow-backed drawing surface.

A fixed-size RGB raster with a small immediate-mode API (fill/stroke state
plus ellipse, rect and line primitives) and an injected uniform random
source.  Pattern routines only ever talk to this interface, so tests can
swap in a recording surface or a scripted random source.
"""

from __future__ import annotations

import random

import numpy as np
from PIL import Image, ImageDraw

from artgen.art.palettes import BLACK, WHITE
from artgen.config import CANVAS_SIZE


def _rgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    return (
        max(0, min(255, int(r))),
        max(0, min(255, int(g))),
        max(0, min(255, int(b))),
    )


class PillowSurface:
    def __init__(self, width: int = CANVAS_SIZE, height: int = CANVAS_SIZE,
                 rng: random.Random | None = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()

        self._image = Image.new("RGB", (width, height), WHITE)
        self._draw = ImageDraw.Draw(self._image)
        self.fill: tuple[int, int, int] = WHITE
        self.stroke: tuple[int, int, int] | None = BLACK

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def clear_background(self, color: tuple[int, int, int]) -> None:
        self._draw.rectangle([0, 0, self.width, self.height], fill=_rgb(*color))

    def set_fill_color(self, r: float, g: float, b: float) -> None:
        self.fill = _rgb(r, g, b)

    def set_stroke_color(self, r: float, g: float, b: float) -> None:
        self.stroke = _rgb(r, g, b)

    def set_no_stroke(self) -> None:
        self.stroke = None

    def uniform_random(self, lo: float, hi: float) -> float:
        """Uniform draw in [lo, hi)."""
        return lo + self.rng.random() * (hi - lo)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def draw_ellipse(self, cx: float, cy: float, diameter: float) -> None:
        r = diameter / 2.0
        x0, y0 = round(cx - r), round(cy - r)
        x1 = max(x0, round(cx + r))
        y1 = max(y0, round(cy + r))
        self._draw.ellipse([x0, y0, x1, y1], fill=self.fill, outline=self.stroke)

    def draw_rect(self, x: float, y: float, w: float, h: float) -> None:
        # Pillow boxes are inclusive, so a w x h rect ends at x + w - 1.
        x0, y0 = round(x), round(y)
        x1 = max(x0, round(x + w) - 1)
        y1 = max(y0, round(y + h) - 1)
        self._draw.rectangle([x0, y0, x1, y1], fill=self.fill, outline=self.stroke)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if self.stroke is None:
            return
        self._draw.line([(x1, y1), (x2, y2)], fill=self.stroke, width=1)

    # ------------------------------------------------------------------
    # Read-out (export only, never used while drawing)
    # ------------------------------------------------------------------

    @property
    def image(self) -> Image.Image:
        return self._image.copy()

    def to_array(self) -> np.ndarray:
        """Return the raster as an (H, W, 3) uint8 array."""
        return np.array(self._image, dtype=np.uint8)

"""Render patterns to PIL Images.

Wraps a fresh ``PillowSurface`` around one ``generate`` pass, and lays out
contact sheets with one thumbnail per pattern family.
"""

from __future__ import annotations

import random

from PIL import Image, ImageDraw

from artgen.art.palettes import BLACK
from artgen.canvas.surface import PillowSurface
from artgen.config import CANVAS_SIZE
from artgen.patterns.generator import PATTERN_LABELS, PATTERN_TYPES, generate


def new_canvas(rng: random.Random | None = None) -> PillowSurface:
    return PillowSurface(CANVAS_SIZE, CANVAS_SIZE, rng=rng)


def render_pattern(pattern_type: str, accent_color: tuple[int, int, int] = BLACK,
                   size: int = CANVAS_SIZE,
                   rng: random.Random | None = None) -> Image.Image:
    """Run one generation pass and return the raster.

    The pattern is always drawn at canvas resolution; ``size`` only scales
    the finished image.
    """
    surface = new_canvas(rng)
    generate(surface, pattern_type, accent_color)
    img = surface.image
    if size != CANVAS_SIZE:
        img = img.resize((size, size), Image.LANCZOS)
    return img


def render_pattern_grid(accent_color: tuple[int, int, int] = BLACK,
                        thumb_size: int = 128, cols: int = 5,
                        rng: random.Random | None = None) -> Image.Image:
    """One labelled thumbnail per pattern family."""
    n = len(PATTERN_TYPES)
    rows = (n + cols - 1) // cols
    padding = 4
    label_h = 18
    cell = thumb_size + padding * 2 + label_h
    grid_w = cols * cell + padding
    grid_h = rows * cell + padding

    grid = Image.new("RGB", (grid_w, grid_h), (30, 30, 30))
    draw = ImageDraw.Draw(grid)

    for i, pattern_type in enumerate(PATTERN_TYPES):
        row, col_idx = divmod(i, cols)
        img = render_pattern(pattern_type, accent_color, thumb_size, rng=rng)
        x = col_idx * cell + padding
        y = row * cell + padding + label_h
        grid.paste(img, (x, y))
        draw.text((x + 2, y - label_h + 2), PATTERN_LABELS[pattern_type], fill=(180, 180, 180))

    return grid

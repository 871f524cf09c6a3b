"""Procedural pattern generator.

One call to ``generate`` clears the surface to white and emits a single
pattern's worth of drawing primitives.  All randomness is pulled from the
surface's ``uniform_random`` so a scripted source yields a fully
deterministic call sequence.

Pattern families:
  - abstract -> scattered ellipses in one random color
  - pixel    -> 10px grid, fresh random color per cell, no outlines
  - lines    -> random segments in one random color
  - fractals -> recursive square cluster in the accent color
  - mosaic   -> 20px grid, fresh random fill per cell
"""

from __future__ import annotations

from artgen.art.palettes import WHITE
from artgen.config import CANVAS_SIZE

PATTERN_TYPES = ("abstract", "pixel", "lines", "fractals", "mosaic")

PATTERN_LABELS = {
    "abstract": "Abstract",
    "pixel": "Pixelated",
    "lines": "Lines",
    "fractals": "Fractals",
    "mosaic": "Mosaic/Geometric",
}

ABSTRACT_ELLIPSES = 10
ABSTRACT_MAX_DIAMETER = 100

PIXEL_SIZE = 10

LINE_COUNT = 20

FRACTAL_POS_RANGE = (100, 300)
FRACTAL_SIDE_RANGE = (50, 150)
FRACTAL_DEPTH_RANGE = (3, 6)

MOSAIC_CELL = 20


def get_pattern_type(name: str) -> str:
    """Validate a pattern selector value."""
    key = name.strip().lower()
    if key not in PATTERN_TYPES:
        raise ValueError(f"Unknown pattern type: {name!r}. Available: {list(PATTERN_TYPES)}")
    return key


def random_color(surface) -> tuple[float, float, float]:
    return (
        surface.uniform_random(0, 255),
        surface.uniform_random(0, 255),
        surface.uniform_random(0, 255),
    )


# ------------------------------------------------------------------
# Pattern routines
# ------------------------------------------------------------------

def _draw_abstract(surface) -> None:
    for _ in range(ABSTRACT_ELLIPSES):
        surface.draw_ellipse(
            surface.uniform_random(0, CANVAS_SIZE),
            surface.uniform_random(0, CANVAS_SIZE),
            surface.uniform_random(0, ABSTRACT_MAX_DIAMETER),
        )


def _draw_pixel(surface) -> None:
    for x in range(0, CANVAS_SIZE, PIXEL_SIZE):
        for y in range(0, CANVAS_SIZE, PIXEL_SIZE):
            surface.set_fill_color(*random_color(surface))
            surface.set_no_stroke()
            surface.draw_rect(x, y, PIXEL_SIZE, PIXEL_SIZE)


def _draw_lines(surface) -> None:
    for _ in range(LINE_COUNT):
        surface.draw_line(
            surface.uniform_random(0, CANVAS_SIZE),
            surface.uniform_random(0, CANVAS_SIZE),
            surface.uniform_random(0, CANVAS_SIZE),
            surface.uniform_random(0, CANVAS_SIZE),
        )


def draw_fractal(surface, x: float, y: float, side: float, depth: int) -> None:
    """Draw a square and recurse into four diagonal children a third its size."""
    if depth <= 0:
        return
    surface.draw_rect(x, y, side, side)
    child = side / 3
    draw_fractal(surface, x - child, y - child, child, depth - 1)
    draw_fractal(surface, x + side + child, y - child, child, depth - 1)
    draw_fractal(surface, x - child, y + side + child, child, depth - 1)
    draw_fractal(surface, x + side + child, y + side + child, child, depth - 1)


def _draw_fractals(surface) -> None:
    x = surface.uniform_random(*FRACTAL_POS_RANGE)
    y = surface.uniform_random(*FRACTAL_POS_RANGE)
    side = surface.uniform_random(*FRACTAL_SIDE_RANGE)
    depth = int(surface.uniform_random(*FRACTAL_DEPTH_RANGE))
    draw_fractal(surface, x, y, side, depth)


def _draw_mosaic(surface) -> None:
    # Stroke is left as set by generate(), so cells keep an outline.
    for x in range(0, CANVAS_SIZE, MOSAIC_CELL):
        for y in range(0, CANVAS_SIZE, MOSAIC_CELL):
            surface.set_fill_color(*random_color(surface))
            surface.draw_rect(x, y, MOSAIC_CELL, MOSAIC_CELL)


_PATTERN_DRAWERS = {
    "abstract": _draw_abstract,
    "pixel": _draw_pixel,
    "lines": _draw_lines,
    "fractals": _draw_fractals,
    "mosaic": _draw_mosaic,
}


def fractal_square_count(depth: int) -> int:
    """Number of squares a fractal of the given depth draws."""
    return (4 ** depth - 1) // 3


def generate(surface, pattern_type: str, accent_color: tuple[int, int, int]) -> None:
    """Repaint ``surface`` with one pattern.

    Unknown pattern types leave a blank (white) canvas.
    """
    surface.clear_background(WHITE)

    if pattern_type == "fractals":
        color = accent_color
    else:
        color = random_color(surface)
    surface.set_fill_color(*color)
    surface.set_stroke_color(*color)

    drawer = _PATTERN_DRAWERS.get(pattern_type)
    if drawer is None:
        return
    drawer(surface)

"""Color helpers.

Colors are (R, G, B) tuples of ints in [0, 255], matching what the
drawing surface accepts.
"""

from __future__ import annotations

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def hex_to_rgb(h: str) -> tuple[int, int, int]:
    """Convert '#RRGGBB' (or 'RRGGBB') to an (r, g, b) int tuple."""
    s = h.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(c * 2 for c in s)
    if len(s) != 6 or not set(s) <= _HEX_DIGITS:
        raise ValueError(f"Invalid color: {h!r}. Expected '#RRGGBB'")
    return tuple(int(s[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = (max(0, min(255, int(c))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(h: str) -> str:
    """Canonical lowercase '#rrggbb' form of a hex color."""
    return rgb_to_hex(hex_to_rgb(h))

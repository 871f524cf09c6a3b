"""PNG export of the current canvas.

Export is safe to call at any time: before the first generation pass there
is no canvas yet, and every function here returns ``None`` instead of
raising.
"""

from __future__ import annotations

import base64
import io
from pathlib import Path

from PIL import Image

from artgen.canvas.surface import PillowSurface


def export_filename(pattern_type: str) -> str:
    return f"random-art-{pattern_type}.png"


def encode_png(source: PillowSurface | Image.Image) -> bytes:
    img = source.image if isinstance(source, PillowSurface) else source
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def encode_base64(source: PillowSurface | Image.Image) -> str:
    return base64.b64encode(encode_png(source)).decode("ascii")


def export_canvas(surface: PillowSurface | None,
                  pattern_type: str) -> tuple[str, bytes] | None:
    """Return ``(filename, png_bytes)``, or None if nothing was drawn yet."""
    if surface is None:
        return None
    return export_filename(pattern_type), encode_png(surface)


def save_canvas(surface: PillowSurface | None, pattern_type: str,
                directory: str | Path) -> Path | None:
    exported = export_canvas(surface, pattern_type)
    if exported is None:
        return None
    name, data = exported
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(data)
    return path

"""Application-wide settings for the random art generator.

Plain module-level constants; the server and CLI read them at import time.
"""

from pathlib import Path

CANVAS_SIZE = 400

OUTPUT_DIR = Path("output")
SETTINGS_PATH = OUTPUT_DIR / "settings.json"

DEFAULT_PATTERN = "abstract"
DEFAULT_COLOR = "#000000"

THEMES = ("light", "dark")
DEFAULT_THEME = "light"

THUMB_SIZE = 160
GRID_COLS = 5

HOST = "0.0.0.0"
PORT = 8000

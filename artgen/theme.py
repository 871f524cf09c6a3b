"""Persisted theme preference ("light" / "dark")."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from artgen.config import DEFAULT_THEME, SETTINGS_PATH, THEMES

logger = logging.getLogger(__name__)


class ThemeStore:
    """Single ``theme`` key in a small JSON settings file."""

    def __init__(self, path: str | Path = SETTINGS_PATH):
        self.path = Path(path)

    def get(self) -> str:
        try:
            data = json.loads(self.path.read_text())
        except FileNotFoundError:
            return DEFAULT_THEME
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return DEFAULT_THEME
        theme = data.get("theme") if isinstance(data, dict) else None
        return theme if theme in THEMES else DEFAULT_THEME

    def set(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme!r}. Available: {list(THEMES)}")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"theme": theme}, indent=2))
        logger.info("Theme set to %s", theme)
        return theme

    def toggle(self) -> str:
        return self.set("light" if self.get() == "dark" else "dark")

"""
Local durable preferences for Taskpad.

A small JSON key-value file. The only key in use is ``"theme"``, holding
``"dark"`` or ``"light"``; anything else reads back as light.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from taskpad.logging_config import get_logger

logger = get_logger(__name__)

THEME_KEY = "theme"
THEME_LIGHT = "light"
THEME_DARK = "dark"
VALID_THEMES = (THEME_LIGHT, THEME_DARK)


class PreferenceStore:
    """JSON-file backed key-value preference storage."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read preferences from {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed preferences file {self.path}")
            return {}
        return data

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._read().get(key, default)
        return value if isinstance(value, str) else default

    def set(self, key: str, value: str) -> None:
        """
        Persist a single key, keeping any other keys already on disk.

        Raises:
            OSError: If the file cannot be written
        """
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.debug(f"Saved preference {key}={value} to {self.path}")

    def load_theme(self) -> str:
        """Read the saved theme; absence or an unknown value means light."""
        theme = self.get(THEME_KEY)
        if theme not in VALID_THEMES:
            return THEME_LIGHT
        return theme

    def save_theme(self, theme: str) -> None:
        if theme not in VALID_THEMES:
            raise ValueError(f"Unknown theme: {theme!r}")
        self.set(THEME_KEY, theme)

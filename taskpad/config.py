"""
Configuration management for Taskpad.

Loads settings from config.ini with environment variable overrides.
"""

import configparser
import os
from pathlib import Path
from typing import Optional, Dict, Any

from sqlalchemy.engine import make_url

from taskpad.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".taskpad"
DEFAULT_DATABASE_URL = f"sqlite+aiosqlite:///{DEFAULT_CONFIG_DIR / 'taskpad.db'}"
DEFAULT_PREFERENCES_PATH = DEFAULT_CONFIG_DIR / "preferences.json"
DEFAULT_TIMEZONE = "UTC"


class Config:
    """Application configuration manager."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config file, defaults to ~/.taskpad/config.ini
        """
        self.config_path = config_path or self._default_config_path()
        self._config = configparser.ConfigParser()
        self._load()

    def _default_config_path(self) -> Path:
        """Get default config path."""
        return DEFAULT_CONFIG_DIR / "config.ini"

    def _load(self):
        """Load configuration from file."""
        if self.config_path.exists():
            try:
                self._config.read(self.config_path)
                logger.info(f"Loaded configuration from {self.config_path}")
            except configparser.Error as e:
                logger.warning(f"Failed to read config file: {e}. Using defaults.")
        else:
            logger.debug(f"Config file not found at {self.config_path}. Using defaults.")

    def get_database_config(self) -> Dict[str, Any]:
        """
        Get database configuration with environment overrides.

        Environment variables take precedence over config file:
        - TASKPAD_DATABASE_URL
        - TASKPAD_DATABASE_ECHO

        A leading ~ in a file database path is expanded to the home directory.

        Returns:
            Dictionary with database configuration
        """
        echo_env = os.getenv('TASKPAD_DATABASE_ECHO', '').lower()
        echo = (
            echo_env == 'true'
            if echo_env
            else self._config.getboolean('database', 'echo', fallback=False)
        )

        url = os.getenv('TASKPAD_DATABASE_URL') or \
            self._config.get('database', 'url', fallback=DEFAULT_DATABASE_URL)

        config = {
            'url': self._expand_database_path(url),
            'echo': echo,
        }

        logger.debug(f"Database config: url={config['url']}, echo={config['echo']}")

        return config

    def get_display_config(self) -> Dict[str, Any]:
        """
        Get display configuration with environment overrides.

        Environment variables take precedence over config file:
        - TASKPAD_DISPLAY_TIMEZONE

        Returns:
            Dictionary with display configuration
        """
        config = {
            'timezone': os.getenv('TASKPAD_DISPLAY_TIMEZONE') or
                       self._config.get('display', 'timezone', fallback=DEFAULT_TIMEZONE),
        }

        logger.debug(f"Display config: timezone={config['timezone']}")

        return config

    def get_preferences_path(self) -> Path:
        """
        Get the location of the local preference file.

        Environment variable TASKPAD_PREFERENCES_FILE takes precedence.

        Returns:
            Path to the preferences JSON file
        """
        raw = os.getenv('TASKPAD_PREFERENCES_FILE') or \
            self._config.get('preferences', 'path', fallback=None)
        if raw:
            return Path(raw).expanduser()
        return DEFAULT_PREFERENCES_PATH

    @staticmethod
    def _expand_database_path(url: str) -> str:
        parsed = make_url(url)
        if not parsed.database or not parsed.database.startswith('~'):
            return url
        expanded = parsed.set(database=os.path.expanduser(parsed.database))
        return expanded.render_as_string(hide_password=False)

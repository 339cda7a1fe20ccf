"""
Configuration management for favbrowse.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2026-10-19
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple

from favbrowse.core.exceptions import ConfigurationError
from favbrowse.core.formatter import MIN_CELL_WIDTH
from favbrowse.core.models import Alignment, ColumnSpec
from favbrowse.core.projector import RFC1123_FORMAT

COLUMN_KEYS = ("name", "modified", "size", "kind")
COLUMN_TITLES = {"name": "Name", "modified": "Date Modified", "size": "Size", "kind": "Kind"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _mapping(value: Any, name: str, config_path: Path) -> Dict[str, Any]:
    """Return a config section, treating an empty section as no overrides."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"'{name}' in {config_path} must be a mapping, got {value!r}")
    return value


def _default_column_widths() -> Dict[str, int]:
    return {"name": 30, "modified": 25, "size": 15, "kind": 10}


@dataclass
class DisplaySettings:
    """Details table settings."""

    column_widths: Dict[str, int] = field(default_factory=_default_column_widths)
    date_format: str = RFC1123_FORMAT


@dataclass
class FavoritesSettings:
    """Favorites settings (read only; never written back)."""

    entries: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "WARNING"
    file: str = "~/.cache/favbrowse/favbrowse.log"


@dataclass
class Settings:
    """Main settings container."""

    display: DisplaySettings = field(default_factory=DisplaySettings)
    favorites: FavoritesSettings = field(default_factory=FavoritesSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/favbrowse/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is not valid YAML or holds invalid values
        """
        settings = cls()

        # Load from config file
        if config_path is None:
            config_path = Path.home() / ".config" / "favbrowse" / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"Config file {config_path} must hold a mapping")

            # Display settings
            if "display" in config_data:
                display = _mapping(config_data["display"], "display", config_path)
                widths = _default_column_widths()
                widths.update(_mapping(display.get("column_widths"), "display.column_widths", config_path))
                settings.display = DisplaySettings(
                    column_widths=widths,
                    date_format=display.get("date_format", RFC1123_FORMAT),
                )

            # Favorites
            if "favorites" in config_data:
                favorites = config_data["favorites"] or []
                if not isinstance(favorites, list):
                    raise ConfigurationError(f"'favorites' in {config_path} must be a list, got {favorites!r}")
                settings.favorites = FavoritesSettings(entries=list(favorites))

            # Logging settings
            if "logging" in config_data:
                log = _mapping(config_data["logging"], "logging", config_path)
                settings.logging = LoggingSettings(
                    level=log.get("level", "WARNING"),
                    file=log.get("file", "~/.cache/favbrowse/favbrowse.log"),
                )

        # Override with environment variables
        log_level_env = os.getenv("FAVBROWSE_LOG_LEVEL")
        if log_level_env:
            settings.logging.level = log_level_env

        log_file_env = os.getenv("FAVBROWSE_LOG_FILE")
        if log_file_env:
            settings.logging.file = log_file_env

        date_format_env = os.getenv("FAVBROWSE_DATE_FORMAT")
        if date_format_env:
            settings.display.date_format = date_format_env

        settings.validate()
        return settings

    def validate(self) -> None:
        """
        Check values that would otherwise fail deep inside the UI.

        Raises:
            ConfigurationError: On bad column widths, a non-string date format or log setting
        """
        for key, width in self.display.column_widths.items():
            if key not in COLUMN_KEYS:
                raise ConfigurationError(f"Unknown column: {key}")
            if not isinstance(width, int) or width < MIN_CELL_WIDTH:
                raise ConfigurationError(
                    f"Column '{key}' width must be an integer >= {MIN_CELL_WIDTH}, got {width!r}"
                )

        if not isinstance(self.display.date_format, str):
            raise ConfigurationError(f"date_format must be a string, got {self.display.date_format!r}")

        if str(self.logging.level).upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.logging.level}")

        if not isinstance(self.logging.file, str):
            raise ConfigurationError(f"Log file must be a path string, got {self.logging.file!r}")

    def columns(self) -> Tuple[ColumnSpec, ...]:
        """Column specs for the details table, in display order."""
        return tuple(
            ColumnSpec(
                title=COLUMN_TITLES[key],
                width=self.display.column_widths[key],
                align=Alignment.RIGHT if key == "size" else Alignment.LEFT,
            )
            for key in COLUMN_KEYS
        )

    def log_file(self) -> Path:
        return Path(self.logging.file).expanduser()

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "display": {
                "column_widths": dict(self.display.column_widths),
                "date_format": self.display.date_format,
            },
            "favorites": list(self.favorites.entries),
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def get_config_dir() -> Path:
    """Get configuration directory, creating if needed."""
    config_dir = Path.home() / ".config" / "favbrowse"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_log_dir() -> Path:
    """Get log directory, creating if needed."""
    log_dir = Path.home() / ".cache" / "favbrowse"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir

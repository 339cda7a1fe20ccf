"""
Configuration management for favbrowse.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/favbrowse/config.yaml)
- Environment variables

Modified: 2026-10-19
"""

from favbrowse.config.settings import (
    Settings,
    DisplaySettings,
    FavoritesSettings,
    LoggingSettings,
    get_config_dir,
    get_log_dir,
)

__all__ = [
    "Settings",
    "DisplaySettings",
    "FavoritesSettings",
    "LoggingSettings",
    "get_config_dir",
    "get_log_dir",
]

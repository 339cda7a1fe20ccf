"""
Favorites registry for favbrowse.

A fixed, ordered mapping from favorite label to directory path. Built once at
startup and never modified.

Modified: 2026-10-19
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from favbrowse.core.exceptions import ConfigurationError
from favbrowse.core.models import FavoriteEntry

logger = logging.getLogger(__name__)

DEFAULT_FAVORITE_DIRS = ["Desktop", "Documents", "Pictures"]


class FavoritesRegistry:
    """
    Ordered, read-only set of favorites.

    Iteration order is insertion order, so the favorites pane always lists
    entries the same way they were configured.
    """

    def __init__(self, entries: Iterable[FavoriteEntry]):
        """
        Build the registry.

        Args:
            entries: Favorites in display order

        Raises:
            ConfigurationError: If two entries share a label
        """
        self._paths: Dict[str, str] = {}
        for entry in entries:
            if entry.label in self._paths:
                raise ConfigurationError(f"Duplicate favorite label: {entry.label}")
            self._paths[entry.label] = entry.path

    @classmethod
    def default(cls, home: Optional[Path] = None) -> "FavoritesRegistry":
        """Built-in favorites: common folders under the home directory, then home itself."""
        home = home or Path.home()
        entries = [FavoriteEntry(name, str(home / name)) for name in DEFAULT_FAVORITE_DIRS]
        entries.append(FavoriteEntry("Home", str(home)))
        return cls(entries)

    @classmethod
    def from_config(cls, items: List[Dict[str, Any]]) -> "FavoritesRegistry":
        """
        Build from configured ``{label, path}`` mappings.

        Raises:
            ConfigurationError: If an item lacks a label or path
        """
        entries = []
        for item in items:
            label = item.get("label") if isinstance(item, dict) else None
            path = item.get("path") if isinstance(item, dict) else None
            if not label or not path:
                raise ConfigurationError(f"Favorite needs both a label and a path: {item!r}")
            entries.append(FavoriteEntry(str(label), os.path.expanduser(str(path))))
        return cls(entries)

    @classmethod
    def from_settings(cls, settings: Any) -> "FavoritesRegistry":
        """Configured favorites if any are listed, built-in defaults otherwise."""
        items = settings.favorites.entries
        if items:
            logger.info(f"Using {len(items)} configured favorites")
            return cls.from_config(items)
        return cls.default()

    def resolve(self, label: str) -> Optional[str]:
        """Get the path for a label, or None if it is not a favorite."""
        return self._paths.get(label)

    def labels(self) -> List[str]:
        return list(self._paths)

    def entries(self) -> List[FavoriteEntry]:
        return [FavoriteEntry(label, path) for label, path in self._paths.items()]

    def __contains__(self, label: object) -> bool:
        return label in self._paths

    def __iter__(self) -> Iterator[FavoriteEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._paths)

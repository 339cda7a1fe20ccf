"""
Core browsing logic for favbrowse.

Everything here is toolkit-agnostic: the TUI only feeds events into the
navigation state machine and renders the table models it gets back.

Modified: 2026-10-19
"""

from favbrowse.core.exceptions import (
    FavbrowseError,
    DirectoryReadError,
    ReadFailure,
    FatalStartupError,
    ConfigurationError,
)
from favbrowse.core.formatter import format_cell, MIN_CELL_WIDTH
from favbrowse.core.lister import DirectoryLister, LocalFilesystem
from favbrowse.core.projector import DetailProjector
from favbrowse.core.favorites import FavoritesRegistry
from favbrowse.core.navigation import (
    NavigationStateMachine,
    NavigationOutcome,
    FavoriteHighlightChanged,
    FavoriteConfirmed,
    DetailRowConfirmed,
    CancelRequested,
)

__all__ = [
    "FavbrowseError",
    "DirectoryReadError",
    "ReadFailure",
    "FatalStartupError",
    "ConfigurationError",
    "format_cell",
    "MIN_CELL_WIDTH",
    "DirectoryLister",
    "LocalFilesystem",
    "DetailProjector",
    "FavoritesRegistry",
    "NavigationStateMachine",
    "NavigationOutcome",
    "FavoriteHighlightChanged",
    "FavoriteConfirmed",
    "DetailRowConfirmed",
    "CancelRequested",
]

"""
Custom exceptions for favbrowse.

Modified: 2026-10-19
"""

from enum import Enum


class FavbrowseError(Exception):
    """Base exception for all favbrowse errors."""

    pass


class ReadFailure(Enum):
    """Why a directory could not be listed."""

    NOT_FOUND = "not found"
    NOT_A_DIRECTORY = "not a directory"
    PERMISSION_DENIED = "permission denied"
    OTHER = "unreadable"


class DirectoryReadError(FavbrowseError):
    """Raised when a directory cannot be enumerated."""

    def __init__(self, path: str, reason: ReadFailure, detail: str = ""):
        self.path = path
        self.reason = reason
        self.detail = detail or reason.value
        super().__init__(f"{self.detail}: {path}")


class FatalStartupError(FavbrowseError):
    """Raised when the UI event loop cannot be started."""

    pass


class ConfigurationError(FavbrowseError):
    """Raised when configuration is invalid or missing."""

    pass

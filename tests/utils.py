"""Test utilities and helper functions.

Created: 2026-10-19
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional

from dateutil import tz

from favbrowse.core.lister import RawEntry
from favbrowse.core.projector import RFC1123_FORMAT

# 2024-03-01 12:00:00 UTC
KNOWN_MTIME = 1709294400


def create_test_tree(root: Path, mtime: int = KNOWN_MTIME) -> Path:
    """Create a directory holding "a.txt" (5 bytes) and an empty "sub" directory.

    Both entries get the same modification time.

    Returns:
        The created directory
    """
    root.mkdir(parents=True, exist_ok=True)

    file_path = root / "a.txt"
    file_path.write_bytes(b"hello")
    sub_path = root / "sub"
    sub_path.mkdir()

    os.utime(file_path, (mtime, mtime))
    os.utime(sub_path, (mtime, mtime))
    return root


def expected_date(mtime: float, date_format: str = RFC1123_FORMAT) -> str:
    """Render a timestamp the way the projector does."""
    return datetime.fromtimestamp(mtime, tz=tz.tzlocal()).strftime(date_format)


class FakeFilesystem:
    """Filesystem collaborator returning canned entries or raising an error.

    Example:
        fs = FakeFilesystem(error=PermissionError(13, "Permission denied"))
    """

    def __init__(self, entries: Optional[List[RawEntry]] = None, error: Optional[OSError] = None):
        self.entries = entries or []
        self.error = error
        self.calls: List[str] = []

    def scan(self, path: str) -> Iterator[RawEntry]:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return iter(list(self.entries))

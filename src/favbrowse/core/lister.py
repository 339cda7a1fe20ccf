"""
Directory listing for favbrowse.

Reads the immediate children of a directory into DirectoryEntry values.

Modified: 2026-10-19
"""

import logging
import os
from datetime import datetime
from typing import Iterator, List, Optional, Tuple

from dateutil import tz

from favbrowse.core.exceptions import DirectoryReadError, ReadFailure
from favbrowse.core.models import DirectoryEntry

logger = logging.getLogger(__name__)

# (name, mtime seconds, size in bytes, is directory)
RawEntry = Tuple[str, float, int, bool]


class LocalFilesystem:
    """Filesystem collaborator backed by os.scandir."""

    def scan(self, path: str) -> Iterator[RawEntry]:
        """
        Yield one raw record per immediate child of ``path``.

        Symlinks are reported as themselves, never resolved. Entries removed
        between enumeration and stat are skipped.

        Raises:
            OSError: If the directory cannot be opened or read
        """
        with os.scandir(path) as it:
            for entry in it:
                try:
                    st = entry.stat(follow_symlinks=False)
                    is_dir = entry.is_dir(follow_symlinks=False)
                except FileNotFoundError:
                    continue
                yield entry.name, st.st_mtime, st.st_size, is_dir


def _classify(error: OSError) -> ReadFailure:
    if isinstance(error, FileNotFoundError):
        return ReadFailure.NOT_FOUND
    if isinstance(error, NotADirectoryError):
        return ReadFailure.NOT_A_DIRECTORY
    if isinstance(error, PermissionError):
        return ReadFailure.PERMISSION_DENIED
    return ReadFailure.OTHER


class DirectoryLister:
    """Lists directories through a filesystem collaborator."""

    def __init__(self, filesystem: Optional[LocalFilesystem] = None):
        self.filesystem = filesystem or LocalFilesystem()
        self._tz = tz.tzlocal()

    def list(self, path: str) -> List[DirectoryEntry]:
        """
        List the immediate entries of a directory, ordered by name.

        Every call re-reads the filesystem.

        Args:
            path: Directory to list

        Returns:
            List of DirectoryEntry objects

        Raises:
            DirectoryReadError: If the path is missing, not a directory or unreadable
        """
        try:
            raw = list(self.filesystem.scan(path))
        except OSError as e:
            reason = _classify(e)
            logger.debug(f"Listing {path} failed ({reason.name}): {e}")
            raise DirectoryReadError(path, reason, e.strerror or str(e)) from e

        entries = [
            DirectoryEntry(
                name=name,
                modified_at=datetime.fromtimestamp(mtime, tz=self._tz),
                size_bytes=None if is_dir else size,
                is_directory=is_dir,
            )
            for name, mtime, size, is_dir in raw
        ]
        entries.sort(key=lambda e: e.name)
        logger.debug(f"Listed {len(entries)} entries in {path}")
        return entries

"""
Detail projection for favbrowse.

Turns a directory listing into the fixed-width table shown in the details
pane. Read failures become a single indicator row instead of an exception.

Modified: 2026-10-19
"""

import logging
from typing import Optional, Sequence

from favbrowse.core.exceptions import DirectoryReadError
from favbrowse.core.formatter import format_cell
from favbrowse.core.lister import DirectoryLister
from favbrowse.core.models import (
    DEFAULT_COLUMNS,
    ColumnSpec,
    DirectoryEntry,
    FormattedRow,
    RowKind,
    TableModel,
)

logger = logging.getLogger(__name__)

RFC1123_FORMAT = "%a, %d %b %Y %H:%M:%S %Z"


class DetailProjector:
    """Builds TableModel values from directory listings."""

    def __init__(
        self,
        lister: Optional[DirectoryLister] = None,
        columns: Sequence[ColumnSpec] = DEFAULT_COLUMNS,
        date_format: str = RFC1123_FORMAT,
    ):
        """
        Initialize the projector.

        Args:
            lister: Directory lister (defaults to the local filesystem)
            columns: Name, Date Modified, Size and Kind column specs, in order
            date_format: strftime pattern for the Date Modified column
        """
        if len(columns) != 4:
            raise ValueError(f"Expected 4 columns, got {len(columns)}")

        self.lister = lister or DirectoryLister()
        self.columns = tuple(columns)
        self.date_format = date_format

    def header_row(self) -> FormattedRow:
        cells = tuple(format_cell(col.title, col.width) for col in self.columns)
        return FormattedRow(cells, RowKind.HEADER)

    def entry_row(self, entry: DirectoryEntry) -> FormattedRow:
        """Format one directory entry into a data row."""
        values = (
            entry.name,
            entry.modified_at.strftime(self.date_format),
            entry.format_size(),
            entry.kind,
        )
        cells = tuple(
            format_cell(value, col.width, col.align)
            for value, col in zip(values, self.columns)
        )
        return FormattedRow(cells, RowKind.DATA)

    def project(self, path: str) -> TableModel:
        """
        Project a directory into a table: header first, then one row per entry.

        If the directory cannot be read, the header is followed by a single
        indicator row carrying the error message.

        Args:
            path: Directory to project

        Returns:
            TableModel for the details pane
        """
        rows = [self.header_row()]

        try:
            entries = self.lister.list(path)
        except DirectoryReadError as e:
            logger.warning(f"Cannot list {path}: {e}")
            rows.append(FormattedRow((f"Error: {e}",), RowKind.INDICATOR))
            return TableModel(rows=tuple(rows), path=path)

        rows.extend(self.entry_row(entry) for entry in entries)
        return TableModel(rows=tuple(rows), path=path)

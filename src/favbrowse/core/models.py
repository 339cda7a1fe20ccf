"""
Core data models for favbrowse.

Modified: 2026-10-19
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple


class Pane(Enum):
    """Pane that currently holds input focus."""

    FAVORITES = "favorites"
    DETAILS = "details"


class RowKind(Enum):
    """Role of a row inside a details table."""

    HEADER = "header"
    DATA = "data"
    INDICATOR = "indicator"


class Alignment(Enum):
    """Horizontal alignment of a padded cell."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class FavoriteEntry:
    """A named shortcut to a directory."""

    label: str
    path: str


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One immediate child of a listed directory.

    Produced fresh on every listing; nothing is cached between calls.
    """

    name: str
    modified_at: datetime
    size_bytes: Optional[int]  # None for directories
    is_directory: bool

    @property
    def kind(self) -> str:
        """Kind label shown in the details table."""
        return "Directory" if self.is_directory else "File"

    def format_size(self) -> str:
        """Format size for display (e.g., "5 bytes", "-" for directories)."""
        if self.is_directory or self.size_bytes is None:
            return "-"
        return f"{self.size_bytes} bytes"


@dataclass(frozen=True)
class ColumnSpec:
    """Title, width and alignment of one details column."""

    title: str
    width: int
    align: Alignment = Alignment.LEFT


DEFAULT_COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec("Name", 30),
    ColumnSpec("Date Modified", 25),
    ColumnSpec("Size", 15, Alignment.RIGHT),
    ColumnSpec("Kind", 10),
)


@dataclass(frozen=True)
class FormattedRow:
    """
    A row of display strings.

    Header and data rows hold one fixed-width string per column. Indicator
    rows hold a single unpadded message shown in place of data.
    """

    cells: Tuple[str, ...]
    kind: RowKind = RowKind.DATA

    @property
    def is_header(self) -> bool:
        return self.kind is RowKind.HEADER

    @property
    def selectable(self) -> bool:
        """Header rows can never be a selection target."""
        return self.kind is not RowKind.HEADER

    @property
    def first_cell(self) -> str:
        """First column with padding removed."""
        return self.cells[0].strip() if self.cells else ""


@dataclass(frozen=True)
class TableModel:
    """
    Everything the details pane shows for one directory.

    Equality is structural, so two projections of an unchanged directory
    compare equal.
    """

    rows: Tuple[FormattedRow, ...] = ()
    path: Optional[str] = None

    INVALID_FAVORITE_MESSAGE = "Invalid favorite selected"

    @classmethod
    def empty(cls) -> "TableModel":
        return cls()

    @classmethod
    def invalid_favorite(cls) -> "TableModel":
        """Table shown when a highlighted label is not a known favorite."""
        return cls(rows=(FormattedRow((cls.INVALID_FAVORITE_MESSAGE,), RowKind.INDICATOR),))

    @property
    def header(self) -> Optional[FormattedRow]:
        if self.rows and self.rows[0].is_header:
            return self.rows[0]
        return None

    @property
    def data_rows(self) -> List[FormattedRow]:
        return [row for row in self.rows if row.kind is RowKind.DATA]

    @property
    def is_error(self) -> bool:
        """True when the table holds an indicator instead of a listing."""
        return any(row.kind is RowKind.INDICATOR for row in self.rows)

    def selectable_indices(self) -> List[int]:
        """Row indices a cursor may land on, in display order."""
        return [i for i, row in enumerate(self.rows) if row.selectable]

    def row_at(self, index: int) -> Optional[FormattedRow]:
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None


@dataclass
class NavigationState:
    """Which favorite is selected and which pane has focus."""

    selected_favorite: Optional[str] = None
    focused_pane: Pane = Pane.FAVORITES

"""
Navigation state machine for favbrowse.

Holds which favorite is selected and which pane has focus, and reacts to
input events by refreshing the details table or moving focus. Every
transition is total: misses and read failures become indicator rows.

Modified: 2026-10-19
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from favbrowse.core.favorites import FavoritesRegistry
from favbrowse.core.models import NavigationState, Pane, RowKind, TableModel
from favbrowse.core.projector import DetailProjector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FavoriteHighlightChanged:
    """The favorites list cursor moved onto ``label``."""

    label: str


@dataclass(frozen=True)
class FavoriteConfirmed:
    """Confirm pressed in the favorites pane."""


@dataclass(frozen=True)
class DetailRowConfirmed:
    """
    Confirm pressed on row ``row`` of the current table.

    Only data rows report an item. Header, error and "Invalid favorite"
    rows are not entries, so confirming them reports nothing.
    """

    row: int


@dataclass(frozen=True)
class CancelRequested:
    """Escape pressed."""


NavigationEvent = Union[
    FavoriteHighlightChanged, FavoriteConfirmed, DetailRowConfirmed, CancelRequested
]


@dataclass(frozen=True)
class NavigationOutcome:
    """
    Result of dispatching one event.

    ``table`` is set only when the details table was replaced;
    ``selected_item`` only when a data row was confirmed.
    """

    focused_pane: Pane
    table: Optional[TableModel] = None
    selected_item: Optional[str] = None


class NavigationStateMachine:
    """Event-driven favorites/details navigator."""

    def __init__(
        self,
        registry: FavoritesRegistry,
        projector: DetailProjector,
        on_item_selected: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize the state machine.

        Args:
            registry: Favorites to resolve highlighted labels against
            projector: Builds the details table for a path
            on_item_selected: Called with the name of every confirmed row
        """
        self.registry = registry
        self.projector = projector
        self.on_item_selected = on_item_selected
        self.state = NavigationState()
        self.table = TableModel.empty()

    @property
    def focused_pane(self) -> Pane:
        return self.state.focused_pane

    def dispatch(self, event: NavigationEvent) -> NavigationOutcome:
        """Apply one input event and describe what changed."""
        if isinstance(event, FavoriteHighlightChanged):
            return self._on_highlight(event.label)
        if isinstance(event, FavoriteConfirmed):
            return self._on_favorite_confirmed()
        if isinstance(event, DetailRowConfirmed):
            return self._on_row_confirmed(event.row)
        if isinstance(event, CancelRequested):
            return self._on_cancel()

        logger.warning(f"Ignoring unknown navigation event: {event!r}")
        return self._unchanged()

    def refresh(self) -> NavigationOutcome:
        """Re-project the selected favorite, if any."""
        if self.state.selected_favorite is None:
            return self._unchanged()
        return self._on_highlight(self.state.selected_favorite)

    def _unchanged(self) -> NavigationOutcome:
        return NavigationOutcome(focused_pane=self.state.focused_pane)

    def _on_highlight(self, label: str) -> NavigationOutcome:
        path = self.registry.resolve(label)
        if path is None:
            logger.warning(f"Highlighted label is not a favorite: {label!r}")
            self.state.selected_favorite = None
            self.table = TableModel.invalid_favorite()
        else:
            self.state.selected_favorite = label
            self.table = self.projector.project(path)

        return NavigationOutcome(focused_pane=self.state.focused_pane, table=self.table)

    def _on_favorite_confirmed(self) -> NavigationOutcome:
        if self.state.focused_pane is Pane.FAVORITES:
            self.state.focused_pane = Pane.DETAILS
            logger.debug("Focus moved to details pane")
        return self._unchanged()

    def _on_row_confirmed(self, row: int) -> NavigationOutcome:
        if self.state.focused_pane is not Pane.DETAILS:
            return self._unchanged()

        target = self.table.row_at(row)
        if target is None or target.kind is not RowKind.DATA:
            return self._unchanged()

        item = target.first_cell
        logger.info(f"Selected item: {item}")
        if self.on_item_selected:
            self.on_item_selected(item)

        return NavigationOutcome(focused_pane=self.state.focused_pane, selected_item=item)

    def _on_cancel(self) -> NavigationOutcome:
        if self.state.focused_pane is Pane.DETAILS:
            self.state.focused_pane = Pane.FAVORITES
            logger.debug("Focus returned to favorites pane")
        return self._unchanged()

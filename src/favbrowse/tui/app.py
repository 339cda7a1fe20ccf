"""Main favbrowse TUI application.

Owns the navigation state machine and applies its outcomes to the widgets.

Modified: 2026-10-19
"""

import asyncio
from typing import Optional, List
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header

from ..core.exceptions import FatalStartupError
from ..core.favorites import FavoritesRegistry
from ..core.models import Pane
from ..core.navigation import (
    NavigationStateMachine,
    NavigationOutcome,
    FavoriteHighlightChanged,
    FavoriteConfirmed,
    DetailRowConfirmed,
    CancelRequested,
)
from ..core.projector import DetailProjector

from .ui.browser_view import BrowserView
from .ui.status_bar import StatusBar

from .messages import (
    FavoriteHighlighted,
    FavoriteChosen,
    DetailRowChosen,
    DetailsCancelled,
    StatusMessage,
)

from .keybindings import KeyContext, registry as key_registry
from ..config.settings import Settings


logger = logging.getLogger(__name__)

PANE_CONTEXTS = {
    Pane.FAVORITES: KeyContext.FAVORITES,
    Pane.DETAILS: KeyContext.DETAILS,
}


class FavbrowseApp(App):
    """Main application class for favbrowse."""

    TITLE = "favbrowse"
    SUB_TITLE = "Favorites Browser"

    # Keybindings
    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("?", "help", "Help"),
        Binding("ctrl+r", "refresh", "Refresh"),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        favorites: Optional[FavoritesRegistry] = None,
    ):
        """Initialize the application.

        Args:
            settings: Loaded settings (defaults to Settings.load())
            favorites: Favorites registry (defaults to the configured favorites)
        """
        super().__init__()

        self.settings = settings or Settings.load()
        if favorites is None:
            favorites = FavoritesRegistry.from_settings(self.settings)
        self.favorites = favorites

        projector = DetailProjector(
            columns=self.settings.columns(),
            date_format=self.settings.display.date_format,
        )
        self.navigator = NavigationStateMachine(
            self.favorites,
            projector,
            on_item_selected=self._record_selection,
        )

        # Items confirmed in the details pane, in order
        self.selected_items: List[str] = []

        # UI components
        self.browser_view: Optional[BrowserView] = None
        self.status_bar: Optional[StatusBar] = None
        self._shown_pane = Pane.FAVORITES

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()
        self.browser_view = BrowserView(self.favorites, id="browser-view")
        yield self.browser_view
        self.status_bar = StatusBar(id="status-bar")
        yield self.status_bar

    def on_mount(self) -> None:
        """Give the favorites pane initial focus."""
        try:
            if self.browser_view:
                self.browser_view.focus_pane(Pane.FAVORITES)
            if self.status_bar:
                self.status_bar.update_pane(Pane.FAVORITES.value)
            logger.info(f"Started with {len(self.favorites)} favorites")
        except Exception as e:
            logger.error(f"Error during initialization: {e}", exc_info=True)
            self.notify(f"Initialization error: {e}", severity="error")
            self.exit(1)

    def _record_selection(self, item: str) -> None:
        self.selected_items.append(item)

    def _apply(self, outcome: NavigationOutcome) -> None:
        """Push a navigation outcome to the widgets."""
        if outcome.table is not None and self.browser_view:
            self.browser_view.show_table(outcome.table)
            if self.status_bar:
                self.status_bar.update_context(outcome.table.path or "")

        if outcome.focused_pane is not self._shown_pane:
            self._shown_pane = outcome.focused_pane
            if self.browser_view:
                self.browser_view.focus_pane(outcome.focused_pane)
            if self.status_bar:
                self.status_bar.update_pane(outcome.focused_pane.value)
                self.status_bar.update_hints(PANE_CONTEXTS[outcome.focused_pane])

        if outcome.selected_item is not None:
            self.post_message(StatusMessage(f"Selected item: {outcome.selected_item}"))

    # Action handlers

    def action_help(self) -> None:
        """Show keybinding help."""
        self.notify(key_registry.format_help_text(), title="Keys", timeout=8)

    def action_refresh(self) -> None:
        """Re-read the selected favorite."""
        self._apply(self.navigator.refresh())

    # Message handlers

    def on_favorite_highlighted(self, message: FavoriteHighlighted) -> None:
        """Highlight moved in the favorites pane - refresh details."""
        self._apply(self.navigator.dispatch(FavoriteHighlightChanged(message.label)))

    def on_favorite_chosen(self, message: FavoriteChosen) -> None:
        """Enter in the favorites pane - move to details."""
        self._apply(self.navigator.dispatch(FavoriteConfirmed()))

    def on_detail_row_chosen(self, message: DetailRowChosen) -> None:
        """Enter in the details pane - report the item."""
        self._apply(self.navigator.dispatch(DetailRowConfirmed(message.row)))

    def on_details_cancelled(self, message: DetailsCancelled) -> None:
        """Escape - back to favorites."""
        self._apply(self.navigator.dispatch(CancelRequested()))

    def on_status_message(self, message: StatusMessage) -> None:
        """Handle status messages."""
        if self.status_bar:
            self.status_bar.show_message(message.message, duration=message.duration)


async def run_app(
    settings: Optional[Settings] = None,
    favorites: Optional[FavoritesRegistry] = None,
) -> FavbrowseApp:
    """Run the favbrowse TUI application.

    Args:
        settings: Optional preloaded settings
        favorites: Optional favorites registry

    Returns:
        The finished application (for its return code and selected items)

    Raises:
        FatalStartupError: If the event loop fails
    """
    app = FavbrowseApp(settings=settings, favorites=favorites)
    try:
        await app.run_async()
    except Exception as e:
        logger.error(f"Event loop failed: {e}", exc_info=True)
        raise FatalStartupError(f"Could not run the terminal UI: {e}") from e
    return app


if __name__ == "__main__":
    asyncio.run(run_app())

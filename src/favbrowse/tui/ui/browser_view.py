"""Two-pane browser view for favbrowse.

Favorites list on the left, details table on the right.

Modified: 2026-10-19
"""

from typing import List, Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import DataTable, Label, ListItem, ListView

from ...core.favorites import FavoritesRegistry
from ...core.models import Pane, TableModel
from ..messages import FavoriteHighlighted, FavoriteChosen, DetailRowChosen, DetailsCancelled


class FavoritesList(ListView):
    """Left pane listing favorites in registry order."""

    DEFAULT_CSS = """
    FavoritesList {
        height: 100%;
    }
    """

    def __init__(self, registry: FavoritesRegistry, **kwargs):
        items = [
            ListItem(Label(entry.label, markup=False), name=entry.label)
            for entry in registry
        ]
        super().__init__(*items, initial_index=0, **kwargs)

    def get_highlighted_label(self) -> Optional[str]:
        """Get the label under the cursor."""
        item = self.highlighted_child
        return item.name if item is not None else None


class DetailsTable(DataTable):
    """Right pane rendering a TableModel.

    The model's header row becomes the column labels, so the cursor can
    only ever land on data or indicator rows.
    """

    DEFAULT_CSS = """
    DetailsTable {
        height: 100%;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, cursor_type="row", **kwargs)
        self.model = TableModel.empty()
        self._row_indices: List[int] = []

    def show_model(self, model: TableModel) -> None:
        """Replace the table contents."""
        self.model = model
        self.clear(columns=True)

        header = model.header
        if header:
            self.show_header = True
            for cell in header.cells:
                self.add_column(Text(cell))
        else:
            self.show_header = False
            self.add_column("")

        column_count = len(self.columns)
        self._row_indices = model.selectable_indices()
        for index in self._row_indices:
            cells = list(model.rows[index].cells)[:column_count]
            cells += [""] * (column_count - len(cells))
            self.add_row(*(Text(cell) for cell in cells))

    def model_row(self, cursor_row: int) -> Optional[int]:
        """Map a cursor row to its index in the current TableModel."""
        if 0 <= cursor_row < len(self._row_indices):
            return self._row_indices[cursor_row]
        return None


class BrowserView(Widget):
    """Favorites pane and details pane side by side."""

    DEFAULT_CSS = """
    BrowserView {
        width: 100%;
        height: 100%;
    }

    BrowserView > Horizontal {
        height: 100%;
    }

    BrowserView #favorites-pane {
        width: 1fr;
        height: 100%;
        border: round $secondary;
    }

    BrowserView #details-pane {
        width: 3fr;
        height: 100%;
        border: round $secondary;
    }

    BrowserView #favorites-pane.focused,
    BrowserView #details-pane.focused {
        border: round $accent;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Back", show=False),
    ]

    def __init__(self, registry: FavoritesRegistry, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.registry = registry
        self.favorites_list: Optional[FavoritesList] = None
        self.details_table: Optional[DetailsTable] = None

    def compose(self) -> ComposeResult:
        """Create the two panes."""
        self.favorites_list = FavoritesList(self.registry, id="favorites-list")
        self.details_table = DetailsTable(id="details-table")

        with Horizontal():
            with Vertical(id="favorites-pane", classes="focused"):
                yield self.favorites_list
            with Vertical(id="details-pane"):
                yield self.details_table

    def on_mount(self) -> None:
        self.query_one("#favorites-pane").border_title = "Favorites"
        self.query_one("#details-pane").border_title = "Details"

    def show_table(self, model: TableModel) -> None:
        """Render a new table in the details pane."""
        if self.details_table:
            self.details_table.show_model(model)
        self.query_one("#details-pane").border_title = model.path or "Details"

    def focus_pane(self, pane: Pane) -> None:
        """Move input focus and the focus border to a pane."""
        favorites_pane = self.query_one("#favorites-pane")
        details_pane = self.query_one("#details-pane")

        if pane is Pane.DETAILS:
            favorites_pane.remove_class("focused")
            details_pane.add_class("focused")
            if self.details_table:
                self.details_table.focus()
        else:
            details_pane.remove_class("focused")
            favorites_pane.add_class("focused")
            if self.favorites_list:
                self.favorites_list.focus()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        """Report tab and mouse focus changes so navigation follows the real focus."""
        focused = self.app.focused
        if focused is not None and focused is self.details_table:
            self.post_message(FavoriteChosen())
        elif focused is not None and focused is self.favorites_list:
            self.post_message(DetailsCancelled())

    def action_cancel(self) -> None:
        """Escape pressed."""
        self.post_message(DetailsCancelled())

    # Widget event translation

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        event.stop()
        if event.item is not None and event.item.name is not None:
            self.post_message(FavoriteHighlighted(event.item.name))

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        self.post_message(FavoriteChosen())

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        event.stop()
        if self.details_table:
            row = self.details_table.model_row(event.cursor_row)
            if row is not None:
                self.post_message(DetailRowChosen(row))

"""Status bar widget for favbrowse.

Shows the current favorite, keyboard hints and the focused pane.

Modified: 2026-10-19
"""

from typing import Optional

from textual.app import ComposeResult
from textual.timer import Timer
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget
from textual.reactive import reactive

from ..keybindings import KeyContext, registry


class StatusBar(Widget):
    """Status bar showing location, hints and focus."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    StatusBar > Horizontal {
        width: 100%;
        height: 1;
    }

    StatusBar .status-left {
        width: 1fr;
        padding: 0 1;
    }

    StatusBar .status-center {
        width: 2fr;
        text-align: center;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-right {
        width: auto;
        text-align: right;
        padding: 0 1;
    }
    """

    # Reactive properties
    context = reactive("")
    hints = reactive("")
    pane = reactive("")
    message = reactive("")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.left_widget: Optional[Static] = None
        self.center_widget: Optional[Static] = None
        self.right_widget: Optional[Static] = None
        self._reset_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        """Create status bar layout."""
        with Horizontal():
            self.left_widget = Static("", classes="status-left", markup=False)
            self.center_widget = Static("", classes="status-center", markup=False)
            self.right_widget = Static("", classes="status-right", markup=False)

            yield self.left_widget
            yield self.center_widget
            yield self.right_widget

    def on_mount(self) -> None:
        """Initialize status bar with default values."""
        self.update_hints(KeyContext.FAVORITES)

    def update_context(self, context: str) -> None:
        """Update the current location (left side).

        Args:
            context: Path or label to display
        """
        self.context = context
        if self.left_widget:
            self.left_widget.update(context)

    def update_pane(self, pane: str) -> None:
        """Show which pane has focus (right side)."""
        self.pane = pane
        if self.right_widget:
            self.right_widget.update(pane.capitalize())

    def update_hints(self, context: KeyContext) -> None:
        """Update keyboard hints for the focused pane.

        Args:
            context: Keybinding context of the focused pane
        """
        self.hints = registry.get_hints(context)
        if self.center_widget:
            self.center_widget.update(self.hints)

    def show_message(self, message: str, duration: float = 3) -> None:
        """Show a temporary message in the center.

        Args:
            message: Message to display
            duration: Duration in seconds
        """
        self.message = message
        if self.center_widget:
            self.center_widget.update(message)

            # Reset after duration, restarting if a newer message arrives
            if self._reset_timer is not None:
                self._reset_timer.stop()

            def reset():
                self._reset_timer = None
                self.message = ""
                if self.center_widget:
                    self.center_widget.update(self.hints)

            self._reset_timer = self.set_timer(duration, reset)

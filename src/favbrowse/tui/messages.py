"""Custom Textual messages for favbrowse.

Defines the messages the browser widgets post to the application.

Modified: 2026-10-19
"""

from textual.message import Message


class FavoriteHighlighted(Message):
    """Message sent when the favorites cursor moves to a label."""

    def __init__(self, label: str):
        super().__init__()
        self.label = label


class FavoriteChosen(Message):
    """Message sent when a favorite is confirmed with enter."""

    pass


class DetailRowChosen(Message):
    """Message sent when a details row is confirmed with enter."""

    def __init__(self, row: int):
        """Initialize the message.

        Args:
            row: Index of the confirmed row in the current TableModel
        """
        super().__init__()
        self.row = row


class DetailsCancelled(Message):
    """Message sent when escape is pressed in the browser."""

    pass


class StatusMessage(Message):
    """Message sent to display a status message."""

    def __init__(self, message: str, duration: int = 3):
        super().__init__()
        self.message = message
        self.duration = duration

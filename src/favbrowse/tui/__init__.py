"""
TUI (Terminal User Interface) for favbrowse.

Textual-based two-pane interface: favorites on the left, details on the right.

Modified: 2026-10-19
"""

__all__ = ["app", "keybindings", "messages"]

"""
UI components for favbrowse TUI.

Modified: 2026-10-19
"""

__all__ = [
    "browser_view",
    "status_bar",
]

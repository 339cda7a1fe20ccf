"""
favbrowse - favorites file browser

A two-pane terminal file browser: pick a favorite directory on the left,
inspect its contents in a fixed-width details table on the right.

Created: 2026-10-19
"""

__version__ = "0.1.0"

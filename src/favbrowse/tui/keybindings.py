"""Central keybinding registry for favbrowse.

Provides a single source of truth for key help text and status bar hints.

Modified: 2026-10-19
"""

from dataclasses import dataclass
from typing import Dict, List
from enum import Enum


class KeyContext(Enum):
    """Context where a keybinding is active."""
    GLOBAL = "global"
    FAVORITES = "favorites"
    DETAILS = "details"


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # The key or key combination
    description: str  # Human-readable description
    context: KeyContext = KeyContext.GLOBAL  # Where this binding is active
    category: str = "General"  # Category for grouping in help
    hidden: bool = False  # Whether to show in help menu
    hint: str = ""  # Short label for the status bar


class KeybindingRegistry:
    """Central registry for all keybindings."""

    def __init__(self):
        self.keybindings: Dict[str, Keybinding] = {}
        self._initialize_default_bindings()

    def _initialize_default_bindings(self):
        """Initialize default keybindings."""

        # Global bindings
        self.register("q", "Quit application", KeyContext.GLOBAL, "Application", hint="quit")
        self.register("?", "Show this help", KeyContext.GLOBAL, "Application", hint="help")
        self.register("ctrl+r", "Re-read current favorite", KeyContext.GLOBAL, "Application")

        # Navigation
        self.register("up", "Move up", KeyContext.GLOBAL, "Navigation")
        self.register("down", "Move down", KeyContext.GLOBAL, "Navigation")

        # Favorites pane
        self.register("enter", "Open favorite in details pane", KeyContext.FAVORITES, "Favorites", hint="open")

        # Details pane
        self.register("enter", "Select highlighted item", KeyContext.DETAILS, "Details", hint="select")
        self.register("escape", "Back to favorites", KeyContext.DETAILS, "Details", hint="back")

    def register(self, key: str, description: str,
                 context: KeyContext = KeyContext.GLOBAL,
                 category: str = "General",
                 hidden: bool = False,
                 hint: str = "") -> None:
        """Register a keybinding.

        The same key may be bound in several contexts, so bindings are
        stored per context.
        """
        self.keybindings[f"{context.value}:{key}"] = Keybinding(
            key=key,
            description=description,
            context=context,
            category=category,
            hidden=hidden,
            hint=hint
        )

    def get_bindings_by_category(self) -> Dict[str, List[Keybinding]]:
        """Get keybindings organized by category."""
        result = {}
        for binding in self.keybindings.values():
            if not binding.hidden:
                if binding.category not in result:
                    result[binding.category] = []
                result[binding.category].append(binding)
        return result

    def get_bindings_for_context(self, context: KeyContext) -> List[Keybinding]:
        """Get keybindings active in a specific context, pane bindings first."""
        local = []
        shared = []
        for binding in self.keybindings.values():
            if binding.hidden:
                continue
            if binding.context == context and context != KeyContext.GLOBAL:
                local.append(binding)
            elif binding.context == KeyContext.GLOBAL:
                shared.append(binding)
        return local + shared

    def get_hints(self, context: KeyContext) -> str:
        """Status bar hint line, e.g. "enter:open q:quit ?:help"."""
        return " ".join(
            f"{b.key}:{b.hint}"
            for b in self.get_bindings_for_context(context)
            if b.hint
        )

    def format_help_text(self) -> str:
        """Format help text for display."""
        lines = []

        categories = self.get_bindings_by_category()
        for category in categories:
            lines.append(f"{category}:")
            for binding in categories[category]:
                key_str = binding.key.ljust(8)
                lines.append(f"  {key_str} {binding.description}")

        return "\n".join(lines)


# Global registry instance
registry = KeybindingRegistry()

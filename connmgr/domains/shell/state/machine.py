"""Hierarchical State Machine for UI action validation and binding display.

This module determines:
1. Which actions are valid in the current UI context
2. Which key hints to display in the status bar

Child states inherit actions from their parents while adding or blocking
specific behaviors.
"""

from __future__ import annotations

from connmgr.core.input_context import InputContext
from connmgr.core.keymap import format_key, get_keymap
from connmgr.core.state_base import ActionResult, DisplayBinding, State
from connmgr.domains.explorer.state import TreeFocusedState, TreeOnConnectionState
from connmgr.domains.modules.state import BrowsingState
from connmgr.domains.shell.state.confirm_pending import ConfirmPendingState
from connmgr.domains.shell.state.main_screen import MainScreenState
from connmgr.domains.shell.state.root import RootState


class UIStateMachine:
    """Hierarchical state machine for UI action validation and binding display."""

    def __init__(self) -> None:
        self.root = RootState()

        self.confirm_pending = ConfirmPendingState(parent=self.root)

        self.main_screen = MainScreenState(parent=self.root)

        self.browsing = BrowsingState(parent=self.main_screen)

        self.tree_focused = TreeFocusedState(parent=self.main_screen)
        self.tree_on_connection = TreeOnConnectionState(parent=self.tree_focused)

        self._states = [
            self.confirm_pending,
            self.tree_on_connection,  # Before tree_focused (leaf level is more specific)
            self.tree_focused,
            self.browsing,
            self.main_screen,
            self.root,
        ]

    def get_active_state(self, app: InputContext) -> State:
        """Find the most specific active state."""
        for state in self._states:
            if state.is_active(app):
                return state
        return self.root

    def check_action(self, app: InputContext, action_name: str) -> bool:
        """Check if action is allowed in current state."""
        state = self.get_active_state(app)
        result = state.check_action(app, action_name)
        return result == ActionResult.ALLOWED

    def get_display_bindings(self, app: InputContext) -> tuple[list[DisplayBinding], list[DisplayBinding]]:
        """Get key hints to display for the current state."""
        state = self.get_active_state(app)
        return state.get_display_bindings(app)

    def get_active_state_name(self, app: InputContext) -> str:
        """Get the name of the active state (for debugging)."""
        state = self.get_active_state(app)
        return state.__class__.__name__

    def generate_help_text(self) -> str:
        """Key reference grouped by state category."""
        keymap = get_keymap()
        sections: dict[str, list[str]] = {}
        for state in self._states:
            if not state.help_category:
                continue
            lines = sections.setdefault(state.help_category, [])
            for action, spec in state._actions.items():
                if not spec.help:
                    continue
                keys = spec.key or "/".join(format_key(k) for k in keymap.keys_for_action(action))
                lines.append(f"  [bold yellow]{keys:<12}[/] [dim]-[/] {spec.help}")

        blocks = []
        for title, lines in sections.items():
            if lines:
                blocks.append("\n".join([f"[bold]{title}[/]", *lines]))
        return "\n\n".join(blocks)

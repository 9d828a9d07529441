"""Main screen state definitions."""

from __future__ import annotations

from connmgr.core.input_context import InputContext
from connmgr.core.state_base import State


class MainScreenState(State):
    """Base state for main screen (no confirmation open)."""

    help_category = "Navigation"

    def _setup_actions(self) -> None:
        self.allows("request_quit", label="Quit", help="Quit (asks first)", right=True)
        self.allows("show_help", key="?", label="Help", help="Show key reference", right=True)

    def is_active(self, app: InputContext) -> bool:
        return app.mode != "confirm" and not app.modal_open

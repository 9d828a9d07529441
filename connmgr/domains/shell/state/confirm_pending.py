"""Quit confirmation state."""

from __future__ import annotations

from connmgr.core.input_context import InputContext
from connmgr.core.state_base import State


class ConfirmPendingState(State):
    """Quit confirmation is open; only yes/no get through."""

    help_category = "Quit"

    def _setup_actions(self) -> None:
        self.allows("confirm_quit", label="Yes", help="Quit connmgr")
        self.allows("cancel_quit", label="No", help="Return to where you were")

    def is_active(self, app: InputContext) -> bool:
        return app.mode == "confirm" or app.modal_open

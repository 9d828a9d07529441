"""Module bar browsing state."""

from __future__ import annotations

from connmgr.core.input_context import InputContext
from connmgr.core.state_base import State


class BrowsingState(State):
    """Module bar has focus."""

    help_category = "Modules"

    def _setup_actions(self) -> None:
        self.allows("hover_previous_module", key="←/h", label="Prev", help="Previous module")
        self.allows("hover_next_module", key="→/l", label="Next", help="Next module")
        self.allows("commit_module", label="Open", help="Open module tree")

    def is_active(self, app: InputContext) -> bool:
        return app.mode == "browsing"

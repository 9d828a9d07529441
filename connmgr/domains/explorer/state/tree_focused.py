"""Explorer tree focused state."""

from __future__ import annotations

from connmgr.core.input_context import InputContext
from connmgr.core.state_base import State


class TreeFocusedState(State):
    """Base state when the tree has focus."""

    help_category = "Explorer"

    def _setup_actions(self) -> None:
        self.allows("tree_cursor_up", key="↑/k", label="Up")
        self.allows("tree_cursor_down", key="↓/j", label="Down")
        self.allows("tree_expand", key="→/l", label="Expand", help="Expand / descend")
        self.allows("tree_collapse", key="←/h", label="Collapse", help="Collapse / ascend")
        self.allows("toggle_node", label="Toggle", help="Toggle expansion")
        self.allows("back_to_modules", label="Modules", help="Back to module bar")

    def is_active(self, app: InputContext) -> bool:
        return app.mode == "tree"

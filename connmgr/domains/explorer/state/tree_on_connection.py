"""Explorer tree state for connection nodes."""

from __future__ import annotations

from connmgr.core.input_context import InputContext
from connmgr.core.state_base import State


class TreeOnConnectionState(State):
    """Tree cursor on a connection (leaf) node."""

    help_category = "Explorer"

    def _setup_actions(self) -> None:
        self.allows("activate_connection", label="Select", help="Select connection")
        self.blocks("tree_expand")

    def is_active(self, app: InputContext) -> bool:
        return app.mode == "tree" and app.tree_level == "connection"

"""Root state of the UI state machine."""

from __future__ import annotations

from connmgr.core.input_context import InputContext
from connmgr.core.state_base import State


class RootState(State):
    """Fallback state; allows nothing on its own."""

    def is_active(self, app: InputContext) -> bool:
        return True

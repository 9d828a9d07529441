"""Explorer key state exports."""

from .tree_focused import TreeFocusedState
from .tree_on_connection import TreeOnConnectionState

__all__ = [
    "TreeFocusedState",
    "TreeOnConnectionState",
]

"""Expansion flags for tree nodes, keyed by NodeKey."""

from __future__ import annotations

from .tree_nodes import NodeKey


class ExpansionStore:
    """Map from NodeKey to an expanded flag. Absent keys are collapsed.

    Entries are never evicted; the key space is bounded by the catalog.
    """

    def __init__(self) -> None:
        self._flags: dict[NodeKey, bool] = {}

    def get(self, key: NodeKey) -> bool:
        return self._flags.get(key, False)

    def set(self, key: NodeKey, expanded: bool) -> None:
        self._flags[key] = bool(expanded)

    def snapshot(self) -> dict[NodeKey, bool]:
        return dict(self._flags)

    def __contains__(self, key: object) -> bool:
        return key in self._flags

    def __len__(self) -> int:
        return len(self._flags)

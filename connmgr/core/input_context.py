"""UI-agnostic input context used for key state evaluation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InputContext:
    """Snapshot of UI input state for key routing/state evaluation."""

    mode: str  # "browsing" | "tree" | "confirm"
    module_name: str
    tree_level: str | None = None  # "project" | "environment" | "connection"
    modal_open: bool = False

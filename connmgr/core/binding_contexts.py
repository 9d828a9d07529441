"""Resolve active keybinding contexts from the input context."""

from __future__ import annotations

from connmgr.core.input_context import InputContext


def get_binding_contexts(ctx: InputContext) -> set[str]:
    """Determine which keybinding contexts should be active."""
    if ctx.mode == "confirm":
        return {"confirm"}

    contexts = {"global"}
    if ctx.mode == "browsing":
        contexts.add("modules")
    elif ctx.mode == "tree":
        contexts.add("tree")
    return contexts

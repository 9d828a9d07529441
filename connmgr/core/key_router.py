"""Map key presses to actions for the active binding contexts."""

from __future__ import annotations

from collections.abc import Callable

from connmgr.core.binding_contexts import get_binding_contexts
from connmgr.core.input_context import InputContext
from connmgr.core.keymap import get_keymap


def resolve_action(
    key: str,
    ctx: InputContext,
    *,
    is_allowed: Callable[[str], bool] | None = None,
) -> str | None:
    """Return the first action bound to ``key`` that applies in ``ctx``.

    Bindings are tried in keymap order; a binding counts only if its context
    is active and ``is_allowed`` (when given) accepts the action.
    """
    contexts = get_binding_contexts(ctx)
    for binding in get_keymap().bindings_for_key(key):
        if binding.context is not None and binding.context not in contexts:
            continue
        if is_allowed is not None and not is_allowed(binding.action):
            continue
        return binding.action
    return None

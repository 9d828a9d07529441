"""Core keymap definitions (UI-agnostic)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from connmgr.shared.core.debug_events import emit_debug_event

KEY_DISPLAY_OVERRIDES: dict[str, str] = {
    "question_mark": "?",
    "space": "<space>",
    "escape": "<esc>",
    "enter": "<enter>",
    "left": "←",
    "right": "→",
    "up": "↑",
    "down": "↓",
}


def format_key(key: str) -> str:
    """Format a key name for display in UI hints."""
    if key in KEY_DISPLAY_OVERRIDES:
        return KEY_DISPLAY_OVERRIDES[key]
    if key.startswith("ctrl+"):
        return f"^{key.split('+', 1)[1]}"
    return key


@dataclass
class ActionKeyDef:
    """Definition of a regular action keybinding."""

    key: str  # The key to press
    action: str  # The action name
    context: str | None = None  # Binding context the key is active in
    primary: bool = True  # Primary key for display vs secondary aliases


class KeymapProvider(ABC):
    """Abstract base class for keymap providers."""

    @abstractmethod
    def get_action_keys(self) -> list[ActionKeyDef]:
        """Get all action key definitions."""
        raise NotImplementedError

    def action(self, action_name: str) -> str | None:
        """Get the key for an action, preferring primary bindings."""
        primary = None
        fallback = None
        for ak in self.get_action_keys():
            if ak.action != action_name:
                continue
            if fallback is None:
                fallback = ak.key
            if ak.primary and primary is None:
                primary = ak.key
        return primary or fallback

    def keys_for_action(self, action_name: str, *, include_secondary: bool = True) -> list[str]:
        """Get all keys for an action, primary first."""
        primary_keys: list[str] = []
        secondary_keys: list[str] = []
        seen: set[str] = set()
        for ak in self.get_action_keys():
            if ak.action != action_name or ak.key in seen:
                continue
            seen.add(ak.key)
            if ak.primary:
                primary_keys.append(ak.key)
            elif include_secondary:
                secondary_keys.append(ak.key)
        return primary_keys + secondary_keys

    def bindings_for_key(self, key: str) -> list[ActionKeyDef]:
        """Get every binding for a key, in definition order."""
        return [ak for ak in self.get_action_keys() if ak.key == key]

    def actions_for_key(self, key: str) -> list[str]:
        """Get all actions bound to a key."""
        return [ak.action for ak in self.bindings_for_key(key)]


class DefaultKeymapProvider(KeymapProvider):
    """Default keymap with hardcoded bindings."""

    def __init__(self) -> None:
        self._action_keys_cache: list[ActionKeyDef] | None = None
        self._action_emitted: bool = False

    def _ensure_action_keys(self) -> list[ActionKeyDef]:
        if self._action_keys_cache is None:
            self._action_keys_cache = self._build_action_keys()
        return self._action_keys_cache

    def get_action_keys(self) -> list[ActionKeyDef]:
        bindings = self._ensure_action_keys()
        if not self._action_emitted:
            for binding in bindings:
                emit_debug_event(
                    "keybinding.register",
                    provider=self.__class__.__name__,
                    key=binding.key,
                    action=binding.action,
                    context=binding.context,
                    primary=binding.primary,
                )
            self._action_emitted = True
        return list(bindings)

    def _build_action_keys(self) -> list[ActionKeyDef]:
        return [
            # Module bar
            ActionKeyDef("left", "hover_previous_module", "modules"),
            ActionKeyDef("h", "hover_previous_module", "modules", primary=False),
            ActionKeyDef("H", "hover_previous_module", "modules", primary=False),
            ActionKeyDef("right", "hover_next_module", "modules"),
            ActionKeyDef("l", "hover_next_module", "modules", primary=False),
            ActionKeyDef("L", "hover_next_module", "modules", primary=False),
            ActionKeyDef("enter", "commit_module", "modules"),
            # Tree (enter activates on connections, expands elsewhere)
            ActionKeyDef("up", "tree_cursor_up", "tree"),
            ActionKeyDef("k", "tree_cursor_up", "tree", primary=False),
            ActionKeyDef("down", "tree_cursor_down", "tree"),
            ActionKeyDef("j", "tree_cursor_down", "tree", primary=False),
            ActionKeyDef("left", "tree_collapse", "tree"),
            ActionKeyDef("h", "tree_collapse", "tree", primary=False),
            ActionKeyDef("right", "tree_expand", "tree"),
            ActionKeyDef("l", "tree_expand", "tree", primary=False),
            ActionKeyDef("space", "toggle_node", "tree"),
            ActionKeyDef("enter", "activate_connection", "tree"),
            ActionKeyDef("enter", "tree_expand", "tree", primary=False),
            ActionKeyDef("escape", "back_to_modules", "tree"),
            # Global
            ActionKeyDef("q", "request_quit", "global"),
            ActionKeyDef("Q", "request_quit", "global", primary=False),
            ActionKeyDef("ctrl+q", "request_quit", "global", primary=False),
            ActionKeyDef("question_mark", "show_help", "global"),
            # Quit confirmation
            ActionKeyDef("y", "confirm_quit", "confirm"),
            ActionKeyDef("Y", "confirm_quit", "confirm", primary=False),
            ActionKeyDef("n", "cancel_quit", "confirm"),
            ActionKeyDef("N", "cancel_quit", "confirm", primary=False),
            ActionKeyDef("escape", "cancel_quit", "confirm", primary=False),
        ]


# Global keymap instance
_keymap_provider: KeymapProvider | None = None


def get_keymap() -> KeymapProvider:
    """Get the current keymap provider."""
    global _keymap_provider
    if _keymap_provider is None:
        _keymap_provider = DefaultKeymapProvider()
    return _keymap_provider


def set_keymap(provider: KeymapProvider) -> None:
    """Set the keymap provider (for testing or custom keymaps)."""
    global _keymap_provider
    _keymap_provider = provider


def reset_keymap() -> None:
    """Reset to default keymap provider."""
    global _keymap_provider
    _keymap_provider = None

"""Base classes for the hierarchical UI state machine."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from connmgr.core.input_context import InputContext
from connmgr.core.keymap import format_key, get_keymap

Guard = Callable[[InputContext], bool]


class ActionResult(Enum):
    ALLOWED = auto()
    BLOCKED = auto()
    UNHANDLED = auto()


@dataclass(frozen=True)
class DisplayBinding:
    """A key hint shown in the status bar."""

    key: str
    label: str
    action: str


@dataclass
class ActionSpec:
    guard: Guard | None = None
    key: str | None = None
    label: str | None = None
    help: str | None = None
    right: bool = False


def resolve_display_key(action: str) -> str | None:
    """Display form of the primary key bound to ``action``."""
    key = get_keymap().action(action)
    return format_key(key) if key else None


class State:
    """A node in the state hierarchy.

    Child states inherit every action their parent allows unless they block
    it explicitly.
    """

    help_category: str | None = None

    def __init__(self, parent: State | None = None) -> None:
        self.parent = parent
        self._actions: dict[str, ActionSpec] = {}
        self._blocked: set[str] = set()
        self._setup_actions()

    def _setup_actions(self) -> None:
        pass

    def allows(
        self,
        action: str,
        guard: Guard | None = None,
        *,
        key: str | None = None,
        label: str | None = None,
        help: str | None = None,
        right: bool = False,
    ) -> None:
        self._actions[action] = ActionSpec(guard=guard, key=key, label=label, help=help, right=right)

    def blocks(self, *actions: str) -> None:
        self._blocked.update(actions)

    def is_active(self, app: InputContext) -> bool:
        raise NotImplementedError

    def check_action(self, app: InputContext, action: str) -> ActionResult:
        if action in self._blocked:
            return ActionResult.BLOCKED
        spec = self._actions.get(action)
        if spec is not None:
            if spec.guard is None or spec.guard(app):
                return ActionResult.ALLOWED
            return ActionResult.BLOCKED
        if self.parent is not None:
            return self.parent.check_action(app, action)
        return ActionResult.UNHANDLED

    def get_display_bindings(self, app: InputContext) -> tuple[list[DisplayBinding], list[DisplayBinding]]:
        left: list[DisplayBinding] = []
        right: list[DisplayBinding] = []
        seen: set[str] = set()
        for action, spec in self._actions.items():
            if not spec.label:
                continue
            if spec.guard is not None and not spec.guard(app):
                continue
            key = spec.key or resolve_display_key(action) or action
            (right if spec.right else left).append(DisplayBinding(key=key, label=spec.label, action=action))
            seen.add(action)

        if self.parent is not None:
            parent_left, parent_right = self.parent.get_display_bindings(app)
            left.extend(b for b in parent_left if b.action not in seen and b.action not in self._blocked)
            right.extend(b for b in parent_right if b.action not in seen and b.action not in self._blocked)
        return left, right

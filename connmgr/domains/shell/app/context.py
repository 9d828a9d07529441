"""Application context: owns all interaction state and dispatches actions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from connmgr.domains.explorer.app.data_provider import DataProvider
from connmgr.domains.explorer.app.navigator import HierarchyNavigator
from connmgr.domains.explorer.domain.expansion_state import ExpansionStore
from connmgr.domains.explorer.domain.tree_nodes import Connection, Level, NodeKey
from connmgr.domains.modules.app.selector import ModuleSelector
from connmgr.domains.modules.domain.catalog import Module
from connmgr.domains.shell.app.confirmation import (
    CANCEL_ACTION,
    CONFIRM_ACTION,
    ConfirmationGate,
)
from connmgr.domains.shell.domain.mode import (
    BROWSING,
    TREE_NAVIGATING,
    ConfirmPending,
    Mode,
    TreeNavigating,
)
from connmgr.shared.core.debug_events import emit_debug_event


class DispatchResult(Enum):
    HANDLED = "handled"
    IGNORED = "ignored"
    SWALLOWED = "swallowed"
    QUIT = "quit"


ActivationListener = Callable[[Module, NodeKey, Connection], None]


class AppContext:
    """Single owner of selector, navigator, expansion flags and mode.

    One instance exists per process. Each :meth:`dispatch` call is one
    complete state transition followed by a render request.
    """

    def __init__(
        self,
        modules: Sequence[Module],
        provider: DataProvider,
        *,
        initial_module: int = 0,
        on_change: Callable[[], None] | None = None,
        on_activate: ActivationListener | None = None,
        on_quit: Callable[[], None] | None = None,
    ) -> None:
        self.provider = provider
        self.expansion = ExpansionStore()
        self.navigator = HierarchyNavigator(
            provider,
            self.expansion,
            on_exit=self._exit_tree,
            on_activate=self._connection_activated,
        )
        self.selector = ModuleSelector(modules, initial=initial_module, on_commit=self._module_committed)
        self.gate = ConfirmationGate(on_confirm=on_quit)
        self.mode: Mode = BROWSING
        self.status_message = ""
        self.last_activated: tuple[Module, NodeKey, Connection] | None = None
        self._on_change = on_change
        self._on_activate = on_activate
        self.navigator.reset(self.selector.current_module)

        self._browsing_actions: dict[str, Callable[[], object]] = {
            "hover_previous_module": self.selector.hover_previous,
            "hover_next_module": self.selector.hover_next,
            "commit_module": self.selector.commit,
        }
        self._tree_actions: dict[str, Callable[[], object]] = {
            "tree_cursor_up": self.navigator.move_up,
            "tree_cursor_down": self.navigator.move_down,
            "tree_collapse": self.navigator.collapse_or_ascend,
            "tree_expand": self.navigator.expand_or_descend,
            "toggle_node": self.navigator.toggle_expansion,
            "activate_connection": self.navigator.activate,
            "back_to_modules": self._exit_tree,
        }

    @property
    def tree_level(self) -> Level | None:
        if isinstance(self.mode, TreeNavigating):
            return self.navigator.level
        return None

    def dispatch(self, action: str) -> DispatchResult:
        """Apply one action in the current mode."""
        if isinstance(self.mode, ConfirmPending):
            result = self._dispatch_confirm(action)
        elif action == "request_quit":
            self._set_mode(self.gate.open(self.mode))
            result = DispatchResult.HANDLED
        else:
            table = self._tree_actions if isinstance(self.mode, TreeNavigating) else self._browsing_actions
            handler = table.get(action)
            if handler is None:
                result = DispatchResult.IGNORED
            else:
                handler()
                result = DispatchResult.HANDLED

        if result is DispatchResult.IGNORED:
            emit_debug_event("dispatch.ignored", action=action, mode=self.mode.name)
            return result
        emit_debug_event("dispatch.action", action=action, mode=self.mode.name, result=result.value)
        if result is DispatchResult.HANDLED and self._on_change is not None:
            self._on_change()
        return result

    def _dispatch_confirm(self, action: str) -> DispatchResult:
        if action == CONFIRM_ACTION:
            self.gate.confirm()
            return DispatchResult.QUIT
        if action == CANCEL_ACTION:
            self._set_mode(self.gate.cancel())
            return DispatchResult.HANDLED
        return DispatchResult.SWALLOWED

    def _set_mode(self, mode: Mode) -> None:
        if mode == self.mode:
            return
        emit_debug_event("mode.changed", previous=self.mode.name, current=mode.name)
        self.mode = mode

    def _module_committed(self, module: Module) -> None:
        self.navigator.reset(module)
        if self.navigator.count_at(Level.PROJECT) == 0:
            emit_debug_event("modules.commit_refused", module=module.id, reason="no projects")
            self.status_message = f"{module.name} has no projects"
            return
        emit_debug_event("modules.commit", module=module.id)
        self.status_message = ""
        self._set_mode(TREE_NAVIGATING)

    def _exit_tree(self) -> None:
        emit_debug_event("tree.exit", module=self.selector.current_module.id)
        self._set_mode(BROWSING)

    def _connection_activated(self, module: Module, key: NodeKey, connection: Connection) -> None:
        emit_debug_event(
            "tree.activate",
            module=module.id,
            node=str(key),
            connection=connection.name,
            status=connection.status.value,
        )
        self.last_activated = (module, key, connection)
        self.status_message = f"Selected {connection.name} ({connection.status.value})"
        if self._on_activate is not None:
            self._on_activate(module, key, connection)

"""Main Textual application for connmgr."""

from __future__ import annotations

from typing import Any, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from connmgr.core.input_context import InputContext
from connmgr.core.key_router import resolve_action
from connmgr.domains.explorer.domain.tree_nodes import Connection, NodeKey
from connmgr.domains.modules.domain.catalog import Module, find_module_index
from connmgr.domains.shell.app.confirmation import CANCEL_ACTION, CONFIRM_ACTION
from connmgr.domains.shell.app.context import AppContext, DispatchResult
from connmgr.domains.shell.app.startup_flow import DEFAULT_THEME, run_on_mount
from connmgr.domains.shell.domain.mode import ConfirmPending, TreeNavigating
from connmgr.domains.shell.state import UIStateMachine
from connmgr.domains.shell.ui.render import render_main_panel, render_module_bar, render_status
from connmgr.domains.shell.ui.screens.confirm import ConfirmScreen
from connmgr.shared.app import AppServices, RuntimeConfig, build_app_services
from connmgr.shared.core.debug_events import get_debug_recorder


class ConnectionManagerApp(App):
    """Module bar, connection tree and status bar stacked vertically."""

    TITLE = "ConnectionManager"
    ENABLE_COMMAND_PALETTE = False

    # Overrides the inherited ctrl+q quit.
    BINDINGS: ClassVar[list[Any]] = [
        Binding("ctrl+q", "request_quit", show=False, priority=True),
    ]

    CSS = """
    #main-container {
        height: 1fr;
    }

    #module-bar {
        height: 3;
        border: double $foreground 60%;
        border-title-align: left;
    }

    #main-panel {
        height: 1fr;
        border: double $foreground 60%;
        border-title-align: left;
        overflow-y: auto;
    }

    #status-bar {
        height: 3;
        border: double $foreground 60%;
        border-title-align: left;
    }

    .active-pane {
        border: double $warning;
    }
    """

    def __init__(
        self,
        *,
        services: AppServices | None = None,
        runtime: RuntimeConfig | None = None,
    ):
        super().__init__()
        self.services = services or build_app_services(runtime or RuntimeConfig.from_env())
        start = self.services.settings_store.get("start_module")
        initial = find_module_index(self.services.modules, start) or 0
        self.context = AppContext(
            self.services.modules,
            self.services.data_provider,
            initial_module=initial,
            on_change=self._refresh_panels,
            on_activate=self._on_connection_activated,
            on_quit=self._on_quit_confirmed,
        )
        self._state_machine = UIStateMachine()

    def compose(self) -> ComposeResult:
        with Vertical(id="main-container"):
            yield Static("", id="module-bar")
            yield Static("", id="main-panel")
            yield Static("Ready...", id="status-bar")

    def on_mount(self) -> None:
        run_on_mount(self)

    def _get_input_context(self) -> InputContext:
        """Build a UI-agnostic input context snapshot."""
        level = self.context.tree_level
        return InputContext(
            mode=self.context.mode.name,
            module_name=self.context.selector.current_module.name,
            tree_level=level.name.lower() if level is not None else None,
            modal_open=any(isinstance(screen, ModalScreen) for screen in self.screen_stack),
        )

    def on_key(self, event: Key) -> None:
        """Route key presses through the core key router."""
        ctx = self._get_input_context()
        if ctx.modal_open:
            return

        action = resolve_action(
            event.key,
            ctx,
            is_allowed=lambda name: self._state_machine.check_action(ctx, name),
        )
        if action is None:
            return

        handler = getattr(self, f"action_{action}", None)
        if handler is not None:
            handler()
        else:
            self.context.dispatch(action)
        event.prevent_default()
        event.stop()

    def action_request_quit(self) -> None:
        result = self.context.dispatch("request_quit")
        if result is DispatchResult.HANDLED and isinstance(self.context.mode, ConfirmPending):
            self.push_screen(
                ConfirmScreen(self.context.selector.current_module.name),
                self._on_confirm_dismissed,
            )

    def action_show_help(self) -> None:
        self.notify(self._state_machine.generate_help_text(), title="Keys", timeout=10)

    def _on_confirm_dismissed(self, confirmed: bool | None) -> None:
        result = self.context.dispatch(CONFIRM_ACTION if confirmed else CANCEL_ACTION)
        if result is not DispatchResult.QUIT:
            # Panels live on the base screen, which may not be active yet.
            self.call_after_refresh(self._refresh_panels)

    def _on_quit_confirmed(self) -> None:
        self.exit(return_code=0)

    def _on_connection_activated(self, module: Module, key: NodeKey, connection: Connection) -> None:
        self.notify(
            f"{connection.name} ({connection.get_display_info()}): {connection.status.value}",
            title=module.name,
        )

    def _refresh_panels(self) -> None:
        try:
            module_bar = self.query_one("#module-bar", Static)
            main_panel = self.query_one("#main-panel", Static)
            status_bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        mode = self.context.mode
        if isinstance(mode, ConfirmPending):
            mode = mode.previous
        in_tree = isinstance(mode, TreeNavigating)
        module_bar.set_class(not in_tree, "active-pane")
        main_panel.set_class(in_tree, "active-pane")

        module_bar.update(render_module_bar(self.context))
        main_panel.update(render_main_panel(self.context))
        hints = self._state_machine.get_display_bindings(self._get_input_context())
        recorder = get_debug_recorder()
        latest = recorder.latest() if recorder.enabled else None
        status_bar.update(render_status(self.context, hints, latest))

    def _apply_theme_safe(self, theme_name: str) -> None:
        """Apply a theme with fallback to default on error."""
        try:
            self.theme = theme_name
        except Exception:
            self.theme = DEFAULT_THEME

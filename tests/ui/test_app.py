"""UI tests for the connection manager app shell."""

from __future__ import annotations

import pytest

from connmgr.domains.explorer.domain.tree_nodes import Level
from connmgr.domains.shell.app.main import ConnectionManagerApp
from connmgr.domains.shell.domain.mode import BROWSING, TREE_NAVIGATING, ConfirmPending
from connmgr.domains.shell.ui.screens.confirm import ConfirmScreen

from .mocks import MockSettingsStore, build_test_services


def _make_app(settings: dict | None = None) -> ConnectionManagerApp:
    services = build_test_services(settings_store=MockSettingsStore(settings))
    return ConnectionManagerApp(services=services)


def _confirm_screen(app: ConnectionManagerApp) -> ConfirmScreen | None:
    return next((s for s in app.screen_stack if isinstance(s, ConfirmScreen)), None)


class TestModuleBar:
    @pytest.mark.asyncio
    async def test_arrows_hover_and_enter_commits(self):
        app = _make_app()

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.pause()
            assert app.query_one("#module-bar").has_class("active-pane")

            await pilot.press("right", "right", "left")
            assert app.context.selector.snapshot() == (1, 0)
            assert app.context.mode == BROWSING

            await pilot.press("enter")
            await pilot.pause()

            assert app.context.mode == TREE_NAVIGATING
            assert app.context.selector.current_module.id == "mysql"
            assert app.query_one("#main-panel").has_class("active-pane")
            assert not app.query_one("#module-bar").has_class("active-pane")

    @pytest.mark.asyncio
    async def test_start_module_setting(self):
        app = _make_app({"start_module": "redis"})

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.pause()

            assert app.context.selector.snapshot() == (3, 3)
            assert app.context.navigator.module.id == "redis"


class TestTreeNavigation:
    @pytest.mark.asyncio
    async def test_walk_to_connection_and_select(self):
        app = _make_app()

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.press("right", "enter")
            await pilot.press("down", "down", "down")
            assert app.context.navigator.cursor.snapshot() == (Level.PROJECT, 2, 0, 0)

            await pilot.press("right", "down", "j")
            assert app.context.navigator.cursor.snapshot() == (Level.CONNECTION, 2, 0, 1)

            await pilot.press("enter")
            await pilot.pause()

            _, _, connection = app.context.last_activated
            assert connection.name == "reporting-replica-1"
            assert app.context.status_message == "Selected reporting-replica-1 (connected)"

    @pytest.mark.asyncio
    async def test_enter_expands_above_connections(self):
        app = _make_app()

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.press("enter")
            await pilot.press("enter")

            assert app.context.tree_level == Level.ENVIRONMENT
            assert app.context.last_activated is None

    @pytest.mark.asyncio
    async def test_escape_and_collapse_return_to_modules(self):
        app = _make_app()

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.press("enter", "escape")
            assert app.context.mode == BROWSING

            await pilot.press("enter", "l", "h", "h")
            assert app.context.mode == BROWSING


class TestQuitConfirmation:
    @pytest.mark.asyncio
    async def test_cancel_restores_previous_mode(self):
        app = _make_app()

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.press("right", "enter", "down")
            before = app.context.navigator.cursor.snapshot()

            await pilot.press("q")
            await pilot.pause()
            assert _confirm_screen(app) is not None
            assert app.context.mode == ConfirmPending(previous=TREE_NAVIGATING)

            # Swallowed while the dialog is open.
            await pilot.press("down")
            await pilot.press("n")
            await pilot.pause()

            assert _confirm_screen(app) is None
            assert app.context.mode == TREE_NAVIGATING
            assert app.context.navigator.cursor.snapshot() == before

    @pytest.mark.asyncio
    async def test_escape_cancels(self):
        app = _make_app()

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.press("q")
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()

            assert app.context.mode == BROWSING

    @pytest.mark.asyncio
    async def test_ctrl_q_opens_confirmation_instead_of_exiting(self):
        app = _make_app()

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.press("ctrl+q")
            await pilot.pause()

            assert _confirm_screen(app) is not None
            assert app.context.mode == ConfirmPending(previous=BROWSING)
            assert app.context.gate.confirmed is False
            assert app.return_code is None

            await pilot.press("ctrl+q")
            await pilot.pause()
            assert sum(isinstance(s, ConfirmScreen) for s in app.screen_stack) == 1

            await pilot.press("N")
            await pilot.pause()

            assert _confirm_screen(app) is None
            assert app.context.mode == BROWSING
            assert app.return_code is None

    @pytest.mark.asyncio
    async def test_uppercase_y_confirms(self):
        app = _make_app()

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.press("ctrl+q")
            await pilot.pause()
            await pilot.press("Y")
            await pilot.pause()

        assert app.context.gate.confirmed is True
        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_confirm_exits_with_zero(self):
        app = _make_app()

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.press("q")
            await pilot.pause()
            screen = _confirm_screen(app)
            assert screen is not None
            screen.action_yes()
            await pilot.pause()

        assert app.context.gate.confirmed is True
        assert app.return_code == 0


class TestStartup:
    @pytest.mark.asyncio
    async def test_unknown_theme_falls_back(self):
        app = _make_app({"theme": "no-such-theme"})

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.pause()

            assert app.theme == "textual-dark"

    @pytest.mark.asyncio
    async def test_debug_setting_enables_recording(self, tmp_path):
        from connmgr.shared.app import RuntimeConfig
        from connmgr.shared.core.debug_events import get_debug_recorder

        services = build_test_services(
            settings_store=MockSettingsStore({"debug_events_enabled": True}),
            runtime=RuntimeConfig(debug_log_path=tmp_path / "events.jsonl"),
        )
        app = ConnectionManagerApp(services=services)

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.pause()
            await pilot.press("right")

        names = [event.name for event in get_debug_recorder().events()]
        assert "startup.config_loaded" in names
        assert "dispatch.action" in names
        assert (tmp_path / "events.jsonl").exists()

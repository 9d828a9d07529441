"""Startup flow helpers for the main application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from connmgr.shared.core.debug_events import configure_debug_events, emit_debug_event

if TYPE_CHECKING:
    from connmgr.domains.shell.app.main import ConnectionManagerApp

DEFAULT_THEME = "textual-dark"


def configure_debug_from_settings(app: ConnectionManagerApp) -> bool:
    """Turn on debug event recording if the runtime or config asks for it."""
    runtime = app.services.runtime
    settings = app.services.settings_store.load_all()
    enabled = runtime.debug_mode or settings.get("debug_events_enabled") is True
    if enabled:
        configure_debug_events(enabled=True, log_path=runtime.resolved_debug_log_path())
    return enabled


def run_on_mount(app: ConnectionManagerApp) -> None:
    """Initialize the app after mount."""
    configure_debug_from_settings(app)

    store = app.services.settings_store
    if store.exists():
        emit_debug_event("startup.config_loaded", path=str(store.file_path))
    else:
        emit_debug_event("startup.config_missing", path=str(store.file_path))

    settings = store.load_all()
    app._apply_theme_safe(str(settings.get("theme") or DEFAULT_THEME))

    app.query_one("#module-bar").border_title = "Modules"
    app.query_one("#main-panel").border_title = "Connections"
    app.query_one("#status-bar").border_title = "Status"
    app._refresh_panels()

"""Service container handed to the application."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from connmgr.domains.explorer.app.data_provider import DataProvider, build_default_provider
from connmgr.domains.modules.domain.catalog import DEFAULT_MODULES, Module
from connmgr.shared.app.runtime import RuntimeConfig
from connmgr.shared.core.store import (
    ConfigError,
    SettingsStore,
    candidate_config_paths,
    discover_config_path,
)


@dataclass
class AppServices:
    """Everything the app needs from the outside world."""

    runtime: RuntimeConfig
    settings_store: SettingsStore
    data_provider: DataProvider
    modules: tuple[Module, ...] = field(default=DEFAULT_MODULES)


def resolve_settings_store(runtime: RuntimeConfig, cwd: Path | None = None) -> SettingsStore:
    """Locate the config file and parse it eagerly.

    Raises ConfigError if an explicit path is missing or the file found is
    malformed. No file at the default locations means defaults.
    """
    explicit = runtime.config_path
    if explicit is not None and not explicit.expanduser().is_file():
        raise ConfigError(explicit, "config file not found")
    path = discover_config_path(candidate_config_paths(explicit, cwd))
    store = SettingsStore(path) if path is not None else SettingsStore()
    store.load_all()
    return store


def build_app_services(runtime: RuntimeConfig, cwd: Path | None = None) -> AppServices:
    return AppServices(
        runtime=runtime,
        settings_store=resolve_settings_store(runtime, cwd),
        data_provider=build_default_provider(),
    )

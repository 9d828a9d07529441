"""Data providers for the project/environment/connection tree."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from connmgr.domains.explorer.domain.tree_nodes import (
    Connection,
    ConnectionStatus,
    Environment,
    Project,
)
from connmgr.domains.modules.domain.catalog import Module


class DataProvider(Protocol):
    """Read-only source of tree contents for a module.

    Implementations must be deterministic for a given module and index path
    and return an empty sequence for indices that do not exist.
    """

    def list_projects(self, module: Module) -> Sequence[Project]: ...

    def list_environments(self, module: Module, project_index: int) -> Sequence[Environment]: ...

    def list_connections(
        self, module: Module, project_index: int, env_index: int
    ) -> Sequence[Connection]: ...


@dataclass(frozen=True)
class EnvironmentEntry:
    environment: Environment
    connections: tuple[Connection, ...] = ()


@dataclass(frozen=True)
class ProjectEntry:
    project: Project
    environments: tuple[EnvironmentEntry, ...] = field(default_factory=tuple)


def _at(items: Sequence, index: int):
    if 0 <= index < len(items):
        return items[index]
    return None


class StaticDataProvider:
    """In-memory provider over a fixed catalog."""

    def __init__(self, catalog: Mapping[str, Sequence[ProjectEntry]]) -> None:
        self._catalog = {module_id: tuple(entries) for module_id, entries in catalog.items()}

    def _projects(self, module: Module) -> tuple[ProjectEntry, ...]:
        return self._catalog.get(module.id, ())

    def list_projects(self, module: Module) -> list[Project]:
        return [entry.project for entry in self._projects(module)]

    def list_environments(self, module: Module, project_index: int) -> list[Environment]:
        entry = _at(self._projects(module), project_index)
        if entry is None:
            return []
        return [env.environment for env in entry.environments]

    def list_connections(self, module: Module, project_index: int, env_index: int) -> list[Connection]:
        entry = _at(self._projects(module), project_index)
        if entry is None:
            return []
        env = _at(entry.environments, env_index)
        if env is None:
            return []
        return list(env.connections)


def _env(name: str, *connections: Connection) -> EnvironmentEntry:
    return EnvironmentEntry(Environment(name), tuple(connections))


def _project(name: str, *environments: EnvironmentEntry) -> ProjectEntry:
    return ProjectEntry(Project(name), tuple(environments))


_CONNECTED = ConnectionStatus.CONNECTED
_DISCONNECTED = ConnectionStatus.DISCONNECTED
_CONNECTING = ConnectionStatus.CONNECTING

DEFAULT_CATALOG: dict[str, tuple[ProjectEntry, ...]] = {
    "ssh": (
        _project(
            "Infrastructure",
            _env(
                "Development",
                Connection("SSH-Server-01", "192.168.1.10", 22, _CONNECTED),
                Connection("SSH-Server-02", "192.168.1.11", 22, _DISCONNECTED),
            ),
            _env(
                "Production",
                Connection("Production-Server", "prod.example.com", 22, _CONNECTED),
            ),
        ),
        _project("Sandbox"),
    ),
    "mysql": (
        _project(
            "Web Shop",
            _env("Development", Connection("MySQL-DB-01", "localhost", 3306, _DISCONNECTED)),
            _env("Production", Connection("MySQL-DB-02", "db.example.com", 3306, _DISCONNECTED)),
        ),
        _project(
            "Billing",
            _env("Staging", Connection("billing-staging", "billing-stg.example.com", 3306, _CONNECTING)),
        ),
        _project(
            "Reporting",
            _env(
                "Production",
                Connection("reporting-primary", "report-db1.example.com", 3306, _CONNECTED),
                Connection("reporting-replica-1", "report-db2.example.com", 3306, _CONNECTED),
                Connection("reporting-replica-2", "report-db3.example.com", 3306, _DISCONNECTED),
            ),
        ),
    ),
    "postgresql": (
        _project(
            "Core Platform",
            _env("Development", Connection("PostgreSQL-Main", "localhost", 5432, _CONNECTING)),
            _env(
                "Analytics",
                Connection("PostgreSQL-Analytics", "analytics.example.com", 5432, _CONNECTING),
            ),
        ),
    ),
    "redis": (
        _project(
            "Caching",
            _env(
                "Production",
                Connection("Redis-Cache-01", "localhost", 6379, _CONNECTED),
                Connection("Redis-Session", "session.example.com", 6379, _CONNECTED),
            ),
            _env("Staging"),
        ),
    ),
}


def build_default_provider() -> StaticDataProvider:
    return StaticDataProvider(DEFAULT_CATALOG)

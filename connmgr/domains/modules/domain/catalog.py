"""Module catalog definitions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Module:
    """A connection module shown in the module bar (SSH, MySQL, ...)."""

    id: str
    name: str


DEFAULT_MODULES: tuple[Module, ...] = (
    Module("ssh", "SSH"),
    Module("mysql", "MySQL"),
    Module("postgresql", "PostgreSQL"),
    Module("redis", "Redis"),
)


def find_module_index(modules: tuple[Module, ...] | list[Module], module_id: str | None) -> int | None:
    """Index of the module with ``module_id`` (case-insensitive), or None."""
    if not module_id:
        return None
    wanted = module_id.strip().lower()
    for index, module in enumerate(modules):
        if module.id == wanted or module.name.lower() == wanted:
            return index
    return None

"""Node data types for the project/environment/connection tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Level(IntEnum):
    """Depth of hierarchical focus."""

    PROJECT = 0
    ENVIRONMENT = 1
    CONNECTION = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class ConnectionStatus(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"


@dataclass(frozen=True)
class Project:
    """Top-level grouping of environments."""

    name: str


@dataclass(frozen=True)
class Environment:
    """Deployment environment inside a project (dev, staging, ...)."""

    name: str


@dataclass(frozen=True)
class Connection:
    """A connection endpoint; the leaf level of the tree."""

    name: str
    host: str = ""
    port: int | None = None
    status: ConnectionStatus = ConnectionStatus.DISCONNECTED

    def get_display_info(self) -> str:
        if not self.host:
            return ""
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class NodeKey:
    """Identity of a tree node: module id plus the index path down to it.

    ``path`` holds one index per level, from the project down to and
    including the node itself, so ``len(path) - 1`` is the node's level.
    """

    module_id: str
    path: tuple[int, ...]

    def __post_init__(self) -> None:
        if not 1 <= len(self.path) <= len(Level):
            raise ValueError(f"NodeKey path must have 1..{len(Level)} indices, got {self.path!r}")

    @property
    def level(self) -> Level:
        return Level(len(self.path) - 1)

    def parent(self) -> NodeKey | None:
        if len(self.path) == 1:
            return None
        return NodeKey(self.module_id, self.path[:-1])

    def __str__(self) -> str:
        return "/".join([self.module_id, *(str(index) for index in self.path)])

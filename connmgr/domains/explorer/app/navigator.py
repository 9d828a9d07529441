"""Cursor movement and expansion over the project/environment/connection tree."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from connmgr.domains.explorer.app.data_provider import DataProvider
from connmgr.domains.explorer.domain.expansion_state import ExpansionStore
from connmgr.domains.explorer.domain.tree_nodes import (
    Connection,
    Environment,
    Level,
    NodeKey,
    Project,
)
from connmgr.domains.modules.domain.catalog import Module

TreeNode = Project | Environment | Connection


@dataclass
class NavigationCursor:
    """Active level plus the selected index at each level.

    Indices below the active level are kept at 0 and carry no meaning until
    that level is entered.
    """

    level: Level = Level.PROJECT
    project: int = 0
    environment: int = 0
    connection: int = 0

    def index(self, level: Level) -> int:
        return (self.project, self.environment, self.connection)[level]

    def path(self, level: Level | None = None) -> tuple[int, ...]:
        depth = self.level if level is None else level
        return (self.project, self.environment, self.connection)[: depth + 1]

    def set_index(self, level: Level, value: int) -> None:
        """Set the index at ``level`` and reset every descendant index."""
        if level == Level.PROJECT:
            self.project = value
            self.environment = 0
            self.connection = 0
        elif level == Level.ENVIRONMENT:
            self.environment = value
            self.connection = 0
        else:
            self.connection = value

    def snapshot(self) -> tuple[int, int, int, int]:
        return (int(self.level), self.project, self.environment, self.connection)


class HierarchyNavigator:
    """State machine over the three tree levels of the active module.

    Movement and expansion are independent: moving between siblings never
    collapses anything, and only expand/collapse/toggle touch the
    expansion store. Moving down past the last sibling descends only into
    an open subtree (the node or its parent is expanded). Boundary moves
    are no-ops; every operation returns whether it changed anything.
    """

    def __init__(
        self,
        provider: DataProvider,
        expansion: ExpansionStore,
        *,
        on_exit: Callable[[], None] | None = None,
        on_activate: Callable[[Module, NodeKey, Connection], None] | None = None,
    ) -> None:
        self.provider = provider
        self.expansion = expansion
        self.module: Module | None = None
        self.cursor = NavigationCursor()
        self._on_exit = on_exit
        self._on_activate = on_activate

    def reset(self, module: Module) -> None:
        """Start a fresh cursor at the first project of ``module``."""
        self.module = module
        self.cursor = NavigationCursor()

    @property
    def level(self) -> Level:
        return self.cursor.level

    def _active_module(self) -> Module:
        if self.module is None:
            raise RuntimeError("HierarchyNavigator.reset() must be called before navigating")
        return self.module

    def count_at(self, level: Level) -> int:
        """Number of siblings at ``level`` under the cursor's ancestor path."""
        module = self._active_module()
        cursor = self.cursor
        if level == Level.PROJECT:
            return len(self.provider.list_projects(module))
        if level == Level.ENVIRONMENT:
            return len(self.provider.list_environments(module, cursor.project))
        return len(self.provider.list_connections(module, cursor.project, cursor.environment))

    def child_count(self) -> int:
        """Number of children of the highlighted node."""
        if self.cursor.level == Level.CONNECTION:
            return 0
        return self.count_at(Level(self.cursor.level + 1))

    def node_key(self, level: Level | None = None) -> NodeKey:
        return NodeKey(self._active_module().id, self.cursor.path(level))

    def current_node(self) -> TreeNode | None:
        module = self._active_module()
        cursor = self.cursor
        if cursor.level == Level.PROJECT:
            nodes: list = list(self.provider.list_projects(module))
        elif cursor.level == Level.ENVIRONMENT:
            nodes = list(self.provider.list_environments(module, cursor.project))
        else:
            nodes = list(self.provider.list_connections(module, cursor.project, cursor.environment))
        index = cursor.index(cursor.level)
        return nodes[index] if 0 <= index < len(nodes) else None

    def move_up(self) -> bool:
        cursor = self.cursor
        level = cursor.level
        index = cursor.index(level)
        if index > 0:
            cursor.set_index(level, index - 1)
            return True
        if level > Level.PROJECT:
            cursor.level = Level(level - 1)
            return True
        return False

    def move_down(self) -> bool:
        cursor = self.cursor
        level = cursor.level
        index = cursor.index(level)
        if index < self.count_at(level) - 1:
            cursor.set_index(level, index + 1)
            return True
        if level < Level.CONNECTION and self.child_count() > 0 and self._is_open():
            self._descend()
            return True
        return False

    def _is_open(self) -> bool:
        """Whether the highlighted node or its parent is expanded."""
        key = self.node_key()
        parent = key.parent()
        return self.expansion.get(key) or (parent is not None and self.expansion.get(parent))

    def collapse_or_ascend(self) -> bool:
        cursor = self.cursor
        if cursor.level == Level.PROJECT:
            if self._on_exit is not None:
                self._on_exit()
            return True
        cursor.level = Level(cursor.level - 1)
        self.expansion.set(self.node_key(), False)
        return True

    def expand_or_descend(self) -> bool:
        if self.cursor.level == Level.CONNECTION:
            return False
        self.expansion.set(self.node_key(), True)
        if self.child_count() > 0:
            self._descend()
        return True

    def toggle_expansion(self) -> bool:
        key = self.node_key()
        self.expansion.set(key, not self.expansion.get(key))
        return True

    def activate(self) -> Connection | None:
        """Hand the highlighted connection to the activation listener."""
        if self.cursor.level != Level.CONNECTION:
            return None
        node = self.current_node()
        if not isinstance(node, Connection):
            return None
        if self._on_activate is not None:
            self._on_activate(self._active_module(), self.node_key(), node)
        return node

    def _descend(self) -> None:
        child_level = Level(self.cursor.level + 1)
        self.cursor.level = child_level
        self.cursor.set_index(child_level, 0)

"""Text rendering for the project/environment/connection tree."""

from __future__ import annotations

from dataclasses import dataclass

from rich.markup import escape as escape_markup

from connmgr.domains.explorer.app.data_provider import DataProvider
from connmgr.domains.explorer.app.navigator import NavigationCursor
from connmgr.domains.explorer.domain.expansion_state import ExpansionStore
from connmgr.domains.explorer.domain.tree_nodes import Connection, ConnectionStatus, Level, NodeKey
from connmgr.domains.modules.domain.catalog import Module

INDENT = "  "
EXPANDED_MARKER = "▾"
COLLAPSED_MARKER = "▸"
LEAF_MARKER = " "

STATUS_STYLES: dict[ConnectionStatus, tuple[str, str]] = {
    ConnectionStatus.CONNECTED: ("#4ADE80", "connected"),
    ConnectionStatus.DISCONNECTED: ("red", "disconnected"),
    ConnectionStatus.CONNECTING: ("#FBBF24", "connecting..."),
}


@dataclass(frozen=True)
class TreeRow:
    """One visible line of the tree."""

    key: NodeKey
    label: str
    has_children: bool
    expanded: bool
    is_cursor: bool

    @property
    def depth(self) -> int:
        return int(self.key.level)


def format_connection_label(conn: Connection) -> str:
    color, text = STATUS_STYLES[conn.status]
    info = conn.get_display_info()
    info_part = f" [dim]({escape_markup(info)})[/dim]" if info else ""
    return f"[{color}]•[/] {escape_markup(conn.name)}{info_part} [{color}]{text}[/]"


def _on_cursor_path(cursor: NavigationCursor | None, path: tuple[int, ...]) -> bool:
    """Whether the node at ``path`` is a strict ancestor of the cursor."""
    if cursor is None or cursor.level < len(path):
        return False
    return cursor.path(Level(len(path) - 1)) == path


def build_tree_rows(
    module: Module,
    provider: DataProvider,
    expansion: ExpansionStore,
    cursor: NavigationCursor | None = None,
) -> list[TreeRow]:
    """Flatten the visible part of the tree.

    A node's children are visible when its flag is set or when the cursor
    sits below it, so the highlighted row is always on screen.
    """
    rows: list[TreeRow] = []
    cursor_path = cursor.path() if cursor is not None else None

    def add(key: NodeKey, label: str, child_count: int) -> bool:
        open_ = child_count > 0 and (expansion.get(key) or _on_cursor_path(cursor, key.path))
        rows.append(
            TreeRow(
                key=key,
                label=label,
                has_children=child_count > 0,
                expanded=open_,
                is_cursor=key.path == cursor_path,
            )
        )
        return open_

    for p, project in enumerate(provider.list_projects(module)):
        environments = provider.list_environments(module, p)
        project_key = NodeKey(module.id, (p,))
        if not add(project_key, escape_markup(project.name), len(environments)):
            continue
        for e, environment in enumerate(environments):
            connections = provider.list_connections(module, p, e)
            env_key = NodeKey(module.id, (p, e))
            if not add(env_key, escape_markup(environment.name), len(connections)):
                continue
            for c, connection in enumerate(connections):
                add(NodeKey(module.id, (p, e, c)), format_connection_label(connection), 0)
    return rows


def render_row(row: TreeRow) -> str:
    if row.has_children:
        marker = EXPANDED_MARKER if row.expanded else COLLAPSED_MARKER
    else:
        marker = LEAF_MARKER
    line = f"{marker} {row.label}"
    if row.is_cursor:
        line = f"[reverse]{line}[/reverse]"
    return f"{INDENT * row.depth}{line}"


def render_tree(
    module: Module,
    provider: DataProvider,
    expansion: ExpansionStore,
    cursor: NavigationCursor | None = None,
) -> str:
    """Main panel text: module heading followed by the visible tree."""
    lines = [f"[yellow]{escape_markup(module.name)} Connections[/]", ""]
    rows = build_tree_rows(module, provider, expansion, cursor)
    if not rows:
        lines.append("[dim](no projects)[/dim]")
    lines.extend(render_row(row) for row in rows)
    return "\n".join(lines)

"""Tests for tree and pane rendering."""

from __future__ import annotations

from rich.text import Text

from connmgr.core.state_base import DisplayBinding
from connmgr.domains.explorer.app.data_provider import (
    EnvironmentEntry,
    ProjectEntry,
    StaticDataProvider,
    build_default_provider,
)
from connmgr.domains.explorer.app.navigator import NavigationCursor
from connmgr.domains.explorer.domain.expansion_state import ExpansionStore
from connmgr.domains.explorer.domain.tree_nodes import (
    Connection,
    ConnectionStatus,
    Environment,
    Level,
    NodeKey,
    Project,
)
from connmgr.domains.explorer.ui.tree_render import (
    build_tree_rows,
    format_connection_label,
    render_tree,
)
from connmgr.domains.modules.domain.catalog import DEFAULT_MODULES, Module
from connmgr.domains.shell.app.context import AppContext
from connmgr.domains.shell.ui.render import (
    format_hints,
    render_confirm_prompt,
    render_main_panel,
    render_module_bar,
    render_status,
)
from connmgr.shared.core.debug_events import DebugEvent

SSH, MYSQL, POSTGRESQL, REDIS = DEFAULT_MODULES


def plain(markup: str) -> str:
    return Text.from_markup(markup).plain


class TestTreeRows:
    def test_collapsed_tree_shows_projects_only(self):
        rows = build_tree_rows(MYSQL, build_default_provider(), ExpansionStore())

        assert [row.key.path for row in rows] == [(0,), (1,), (2,)]
        assert all(not row.expanded and not row.is_cursor for row in rows)

    def test_expanded_flags_reveal_children(self):
        expansion = ExpansionStore()
        expansion.set(NodeKey("ssh", (0,)), True)
        expansion.set(NodeKey("ssh", (0, 1)), True)

        rows = build_tree_rows(SSH, build_default_provider(), expansion)

        assert [row.key.path for row in rows] == [(0,), (0, 0), (0, 1), (0, 1, 0), (1,)]
        assert [row.depth for row in rows] == [0, 1, 1, 2, 0]

    def test_collapsed_ancestor_hides_expanded_descendants(self):
        expansion = ExpansionStore()
        expansion.set(NodeKey("ssh", (0, 0)), True)

        rows = build_tree_rows(SSH, build_default_provider(), expansion)

        assert [row.key.path for row in rows] == [(0,), (1,)]

    def test_cursor_ancestors_are_drawn_expanded(self):
        cursor = NavigationCursor(level=Level.CONNECTION, project=2, environment=0, connection=1)

        rows = build_tree_rows(MYSQL, build_default_provider(), ExpansionStore(), cursor)

        paths = [row.key.path for row in rows]
        assert paths == [(0,), (1,), (2,), (2, 0), (2, 0, 0), (2, 0, 1), (2, 0, 2)]
        assert [row.key.path for row in rows if row.is_cursor] == [(2, 0, 1)]

    def test_childless_nodes_never_show_expanded(self):
        expansion = ExpansionStore()
        expansion.set(NodeKey("ssh", (1,)), True)

        rows = build_tree_rows(SSH, build_default_provider(), expansion)

        sandbox = rows[-1]
        assert sandbox.has_children is False
        assert sandbox.expanded is False


class TestTreeText:
    def test_heading_and_markers(self):
        expansion = ExpansionStore()
        expansion.set(NodeKey("mysql", (0,)), True)

        text = plain(render_tree(MYSQL, build_default_provider(), expansion))

        lines = text.splitlines()
        assert lines[0] == "MySQL Connections"
        assert "▾ Web Shop" in lines
        assert "  ▸ Development" in lines
        assert "▸ Billing" in lines

    def test_empty_module(self):
        text = plain(render_tree(Module("none", "None"), build_default_provider(), ExpansionStore()))

        assert "(no projects)" in text

    def test_names_are_escaped(self):
        provider = StaticDataProvider(
            {"x": [ProjectEntry(Project("[prod]"), (EnvironmentEntry(Environment("e")),))]}
        )

        text = plain(render_tree(Module("x", "X"), provider, ExpansionStore()))

        assert "[prod]" in text

    def test_connection_label(self):
        conn = Connection("db-1", "db.example.com", 5432, ConnectionStatus.CONNECTING)

        assert plain(format_connection_label(conn)) == "• db-1 (db.example.com:5432) connecting..."


class TestPanes:
    def test_module_bar_lists_all_modules(self):
        context = AppContext(DEFAULT_MODULES, build_default_provider())

        text = plain(render_module_bar(context))

        for module in DEFAULT_MODULES:
            assert module.name in text

    def test_cursor_only_rendered_in_tree_mode(self):
        context = AppContext(DEFAULT_MODULES, build_default_provider())
        assert "[reverse]" not in render_main_panel(context)

        context.dispatch("commit_module")

        assert "[reverse]" in render_main_panel(context)

    def test_status_line(self):
        context = AppContext(DEFAULT_MODULES, build_default_provider())
        assert plain(render_status(context)) == "Mode: Browsing | Module: SSH"

        context.dispatch("commit_module")

        assert plain(render_status(context)) == "Mode: Tree | Module: SSH | Level: Project"

    def test_status_line_with_hints(self):
        context = AppContext(DEFAULT_MODULES, build_default_provider())
        hints = (
            [DisplayBinding("←/h", "Prev", "hover_previous_module")],
            [DisplayBinding("q", "Quit", "request_quit")],
        )

        text = plain(render_status(context, hints))

        assert text.endswith("←/h Prev, q Quit")

    def test_status_line_with_debug_event(self):
        context = AppContext(DEFAULT_MODULES, build_default_provider())
        event = DebugEvent("dispatch.action", 0.0, {"action": "[b]", "result": "handled"})

        text = plain(render_status(context, debug_event=event))

        assert text.endswith("| dispatch.action action='[b]' result='handled'")

    def test_format_hints_escapes_keys(self):
        assert format_hints([DisplayBinding("[b]", "Odd", "odd")], []) == "\\[b] Odd"

    def test_confirm_prompt(self):
        text = plain(render_confirm_prompt())

        assert "Quit connmgr?" in text
        assert "Yes (Y)" in text
        assert "No (N)" in text

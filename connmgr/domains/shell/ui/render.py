"""Render the application context as Rich markup for the three panes."""

from __future__ import annotations

from rich.markup import escape as escape_markup

from connmgr.core.state_base import DisplayBinding
from connmgr.domains.explorer.ui.tree_render import render_tree
from connmgr.domains.shell.app.context import AppContext
from connmgr.domains.shell.domain.mode import ConfirmPending, TreeNavigating
from connmgr.shared.core.debug_events import DebugEvent, format_debug_data


def render_module_bar(context: AppContext) -> str:
    selector = context.selector
    parts = []
    for index, module in enumerate(selector.modules):
        name = escape_markup(module.name)
        if index == selector.hovered:
            parts.append(f"[bold white on blue] {name} [/]")
        elif index == selector.current:
            parts.append(f"[bold underline] {name} [/]")
        else:
            parts.append(f" {name} ")
    return "  " + "  ".join(parts)


def render_main_panel(context: AppContext) -> str:
    mode = context.mode
    if isinstance(mode, ConfirmPending):
        mode = mode.previous
    cursor = context.navigator.cursor if isinstance(mode, TreeNavigating) else None
    module = context.navigator.module or context.selector.current_module
    return render_tree(module, context.provider, context.expansion, cursor)


def format_hints(left: list[DisplayBinding], right: list[DisplayBinding]) -> str:
    hints = [f"{escape_markup(b.key)} {b.label}" for b in [*left, *right]]
    return ", ".join(hints)


def render_status(
    context: AppContext,
    hints: tuple[list[DisplayBinding], list[DisplayBinding]] | None = None,
    debug_event: DebugEvent | None = None,
) -> str:
    parts = [
        f"[yellow]Mode: {context.mode.label}[/]",
        f"[blue]Module: {escape_markup(context.selector.current_module.name)}[/]",
    ]
    level = context.tree_level
    if level is not None:
        parts.append(f"Level: {level.label}")
    if context.status_message:
        parts.append(escape_markup(context.status_message))
    if hints is not None:
        text = format_hints(*hints)
        if text:
            parts.append(f"[dim]{text}[/dim]")
    if debug_event is not None:
        parts.append(f"[magenta]{escape_markup(format_debug_event(debug_event))}[/]")
    return " | ".join(parts)


def format_debug_event(event: DebugEvent) -> str:
    data = format_debug_data(event.data)
    return f"{event.name} {data}" if data else event.name


def render_confirm_prompt() -> str:
    return "\n[yellow]Quit connmgr?[/]\n\n[green]Yes (Y)[/]    [red]No (N)[/]\n"

"""Quit confirmation dialog."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from connmgr.core.input_context import InputContext
from connmgr.core.key_router import resolve_action
from connmgr.domains.shell.app.confirmation import CANCEL_ACTION, CONFIRM_ACTION
from connmgr.domains.shell.ui.render import render_confirm_prompt


class ConfirmScreen(ModalScreen[bool]):
    """Small centered Yes/No box. Dismisses with True on yes.

    Keys come from the ``confirm`` context of the active keymap.
    """

    CSS = """
    ConfirmScreen {
        align: center middle;
        background: transparent;
    }

    #confirm-box {
        width: 40;
        height: 7;
        border: double $warning;
        border-title-align: left;
        content-align: center middle;
        text-align: center;
    }
    """

    def __init__(self, module_name: str = "") -> None:
        super().__init__()
        self._module_name = module_name

    def compose(self) -> ComposeResult:
        box = Static(render_confirm_prompt(), id="confirm-box")
        box.border_title = "Confirm quit"
        yield box

    def on_key(self, event: Key) -> None:
        ctx = InputContext(mode="confirm", module_name=self._module_name, modal_open=True)
        action = resolve_action(event.key, ctx)
        if action == CONFIRM_ACTION:
            self.action_yes()
        elif action == CANCEL_ACTION:
            self.action_no()
        else:
            return
        event.prevent_default()
        event.stop()

    def action_yes(self) -> None:
        self.dismiss(True)

    def action_no(self) -> None:
        self.dismiss(False)

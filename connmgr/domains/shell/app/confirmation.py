"""Quit confirmation gate."""

from __future__ import annotations

from collections.abc import Callable

from connmgr.domains.shell.domain.mode import Browsing, ConfirmPending, TreeNavigating

CONFIRM_ACTION = "confirm_quit"
CANCEL_ACTION = "cancel_quit"


class ConfirmationGate:
    """Modal quit confirmation.

    While pending, only confirm and cancel are recognised; every other
    action is swallowed. The gate only remembers the mode to restore and
    never touches selector or navigator state.
    """

    def __init__(self, on_confirm: Callable[[], None] | None = None) -> None:
        self._pending: ConfirmPending | None = None
        self._on_confirm = on_confirm
        self.confirmed = False

    @property
    def is_open(self) -> bool:
        return self._pending is not None

    def open(self, previous: Browsing | TreeNavigating) -> ConfirmPending:
        self._pending = ConfirmPending(previous=previous)
        return self._pending

    def confirm(self) -> None:
        self._pending = None
        self.confirmed = True
        if self._on_confirm is not None:
            self._on_confirm()

    def cancel(self) -> Browsing | TreeNavigating:
        if self._pending is None:
            raise RuntimeError("cancel() called with no pending confirmation")
        previous = self._pending.previous
        self._pending = None
        return previous

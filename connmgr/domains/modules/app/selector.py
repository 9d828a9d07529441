"""Module bar selection state."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from connmgr.domains.modules.domain.catalog import Module


class ModuleSelector:
    """Tracks the hovered and committed module.

    ``hovered`` moves freely with the arrow keys; ``current`` only changes on
    :meth:`commit`, which also notifies the commit listener so the tree can be
    reset for the newly committed module.
    """

    def __init__(
        self,
        modules: Sequence[Module],
        *,
        initial: int = 0,
        on_commit: Callable[[Module], None] | None = None,
    ) -> None:
        if not modules:
            raise ValueError("ModuleSelector requires at least one module")
        self.modules: tuple[Module, ...] = tuple(modules)
        start = max(0, min(initial, len(self.modules) - 1))
        self.hovered = start
        self.current = start
        self._on_commit = on_commit

    @property
    def hovered_module(self) -> Module:
        return self.modules[self.hovered]

    @property
    def current_module(self) -> Module:
        return self.modules[self.current]

    def hover_previous(self) -> bool:
        if self.hovered <= 0:
            return False
        self.hovered -= 1
        return True

    def hover_next(self) -> bool:
        if self.hovered >= len(self.modules) - 1:
            return False
        self.hovered += 1
        return True

    def commit(self) -> Module:
        self.current = self.hovered
        module = self.current_module
        if self._on_commit is not None:
            self._on_commit(module)
        return module

    def snapshot(self) -> tuple[int, int]:
        return (self.hovered, self.current)

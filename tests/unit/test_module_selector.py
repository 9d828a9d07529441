"""Tests for the module bar selector."""

from __future__ import annotations

import pytest

from connmgr.domains.modules.app.selector import ModuleSelector
from connmgr.domains.modules.domain.catalog import DEFAULT_MODULES, Module, find_module_index


class TestModuleSelector:
    def test_hover_is_clamped_at_both_ends(self):
        selector = ModuleSelector(DEFAULT_MODULES)

        assert selector.hover_previous() is False
        assert selector.hovered == 0
        for _ in range(len(DEFAULT_MODULES) - 1):
            assert selector.hover_next() is True
        assert selector.hover_next() is False
        assert selector.hovered == len(DEFAULT_MODULES) - 1

    def test_hover_does_not_change_current(self):
        selector = ModuleSelector(DEFAULT_MODULES)

        selector.hover_next()
        selector.hover_next()

        assert selector.snapshot() == (2, 0)
        assert selector.current_module.id == "ssh"
        assert selector.hovered_module.id == "postgresql"

    def test_commit_notifies_listener(self):
        committed = []
        selector = ModuleSelector(DEFAULT_MODULES, on_commit=committed.append)
        selector.hover_next()

        module = selector.commit()

        assert module.id == "mysql"
        assert selector.current == 1
        assert committed == [module]

    def test_initial_index_is_clamped(self):
        selector = ModuleSelector(DEFAULT_MODULES, initial=42)

        assert selector.snapshot() == (3, 3)

    def test_requires_modules(self):
        with pytest.raises(ValueError):
            ModuleSelector([])


class TestFindModuleIndex:
    def test_matches_id_or_name_case_insensitively(self):
        assert find_module_index(DEFAULT_MODULES, "redis") == 3
        assert find_module_index(DEFAULT_MODULES, "PostgreSQL") == 2
        assert find_module_index(DEFAULT_MODULES, " MYSQL ") == 1

    def test_unknown_or_empty(self):
        assert find_module_index(DEFAULT_MODULES, "mongo") is None
        assert find_module_index(DEFAULT_MODULES, None) is None
        assert find_module_index([Module("a", "A")], "") is None

"""Pytest fixtures shared by the connmgr test suite."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

# Keep the config dir out of the user's home before connmgr is imported.
_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="connmgr-test-config-"))
os.environ.setdefault("CONNMGR_CONFIG_DIR", str(_TEST_CONFIG_DIR))
for _name in ("CONNMGR_CONFIG_PATH", "CONNMGR_DEBUG", "CONNMGR_DEBUG_LOG"):
    os.environ.pop(_name, None)


@pytest.fixture(autouse=True)
def _reset_globals():
    """Debug recording and keymap are process-wide; isolate each test."""
    from connmgr.core.keymap import reset_keymap
    from connmgr.shared.core.debug_events import configure_debug_events, get_debug_recorder

    configure_debug_events(enabled=False)
    get_debug_recorder().clear()
    reset_keymap()
    yield
    configure_debug_events(enabled=False)
    get_debug_recorder().clear()
    reset_keymap()


@pytest.fixture
def debug_events():
    """Enable in-memory debug recording and hand back the recorder."""
    from connmgr.shared.core.debug_events import configure_debug_events, get_debug_recorder

    configure_debug_events(enabled=True)
    return get_debug_recorder()

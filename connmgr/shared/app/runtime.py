"""Runtime configuration for connmgr."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from connmgr.shared.core.store import CONFIG_DIR


@dataclass
class RuntimeConfig:
    """Runtime configuration provided by CLI or tests."""

    config_path: Path | None = None
    debug_mode: bool = False
    debug_log_path: Path | None = None

    @classmethod
    def from_env(cls) -> RuntimeConfig:
        def _parse_bool(value: str | None, default: bool) -> bool:
            if value is None or not value.strip():
                return default
            return value.strip().lower() in {"1", "true", "yes", "on"}

        config_path = os.environ.get("CONNMGR_CONFIG_PATH", "").strip() or None
        debug_log = os.environ.get("CONNMGR_DEBUG_LOG", "").strip() or None

        return cls(
            config_path=Path(config_path).expanduser() if config_path else None,
            debug_mode=_parse_bool(os.environ.get("CONNMGR_DEBUG"), False),
            debug_log_path=Path(debug_log).expanduser() if debug_log else None,
        )

    def resolved_debug_log_path(self) -> Path:
        return self.debug_log_path or CONFIG_DIR / "debug-events.jsonl"

"""JSON file stores and config discovery."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "config.json"

# Known settings and the JSON type each must have. null means unset.
SETTING_TYPES: dict[str, tuple[type, str]] = {
    "start_module": (str, "a string"),
    "theme": (str, "a string"),
    "debug_events_enabled": (bool, "true or false"),
}


def _resolve_config_dir() -> Path:
    override = os.environ.get("CONNMGR_CONFIG_DIR", "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".connectionmanager"


CONFIG_DIR = _resolve_config_dir()


class ConfigError(ValueError):
    """Raised when a config file exists but cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class JSONFileStore:
    """Base class for stores backed by a single JSON file."""

    def __init__(self, file_path: Path) -> None:
        self.file_path = file_path

    def exists(self) -> bool:
        return self.file_path.is_file()

    def _read_json(self) -> Any | None:
        """Read and parse the file. Returns None if it does not exist."""
        if not self.exists():
            return None
        try:
            text = self.file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(self.file_path, f"cannot read file ({e.strerror})") from e
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(self.file_path, f"invalid JSON at line {e.lineno}: {e.msg}") from e


class SettingsStore(JSONFileStore):
    """Read-only view over the user config file.

    The file is a JSON object; a missing or empty file means defaults.
    """

    def __init__(self, file_path: Path | None = None) -> None:
        super().__init__(file_path or CONFIG_DIR / CONFIG_FILENAME)
        self._cache: dict[str, Any] | None = None

    def load_all(self) -> dict[str, Any]:
        if self._cache is None:
            data = self._read_json()
            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ConfigError(self.file_path, "top level must be a JSON object")
            self._validate(data)
            self._cache = data
        return dict(self._cache)

    def _validate(self, data: dict[str, Any]) -> None:
        for key, (expected, description) in SETTING_TYPES.items():
            value = data.get(key)
            if value is not None and not isinstance(value, expected):
                raise ConfigError(self.file_path, f"{key} must be {description}")

    def get(self, key: str, default: Any = None) -> Any:
        return self.load_all().get(key, default)


def candidate_config_paths(explicit: Path | None = None, cwd: Path | None = None) -> list[Path]:
    """Config locations in lookup order."""
    if explicit is not None:
        return [explicit.expanduser()]
    base = cwd or Path.cwd()
    return [base / CONFIG_FILENAME, CONFIG_DIR / CONFIG_FILENAME]


def discover_config_path(candidates: Iterable[Path]) -> Path | None:
    """Return the first existing config file, if any."""
    for path in candidates:
        if path.is_file():
            return path
    return None

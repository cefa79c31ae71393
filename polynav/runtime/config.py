"""Persistent JSON settings and the mutable config boundary.

Stores the workspace root, directory names, build command and counterpart
markers. All access is defensive: malformed or missing settings fall back to
defaults one key at a time.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import replace
from pathlib import Path

from platformdirs import user_config_dir

from ..workspace.discovery import find_workspace_root, workspace_root_from_env
from ..workspace.types import CounterpartRule, WorkspaceConfig, WorkspaceConfigError

APP_NAME = "polynav"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

WORKSPACE_KEYS = ("components_dir", "bases_dir", "projects_dir", "build_command")
COUNTERPART_KEYS = ("src_segment", "test_segment", "test_suffix")
SETTING_KEYS = ("workspace_root", *WORKSPACE_KEYS, *COUNTERPART_KEYS)

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON settings object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable settings at %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> bool:
    """Persist settings as pretty-printed JSON.

    Returns ``False`` instead of raising when the file cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not write settings to %s: %s", CONFIG_PATH, exc)
        return False
    return True


def _string_setting(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_workspace_root() -> Path | None:
    """Return the persisted workspace root when it is an absolute path."""
    raw = _string_setting(load_config(), "workspace_root")
    if raw is None:
        return None
    root = Path(os.path.expanduser(raw))
    return root if root.is_absolute() else None


def default_workspace_root(cwd: Path | None = None) -> Path:
    """Pick a root: ``POLYNAV_WORKSPACE``, settings, discovery, then ``cwd``."""
    start = Path(os.path.abspath(cwd or Path.cwd()))
    for candidate in (workspace_root_from_env(), load_workspace_root(), find_workspace_root(start)):
        if candidate is not None:
            return candidate
    return start


def _sanitized_counterpart(data: dict[str, object]) -> CounterpartRule:
    rule = CounterpartRule()
    for key in COUNTERPART_KEYS:
        value = _string_setting(data, key)
        if value is None:
            continue
        try:
            rule = replace(rule, **{key: value})
        except WorkspaceConfigError as exc:
            logger.debug("dropping setting %s: %s", key, exc)
    return rule


def build_workspace_config(root: Path, data: dict[str, object] | None = None) -> WorkspaceConfig:
    """Build a config for ``root`` from settings, dropping invalid values per key."""
    if data is None:
        data = load_config()
    config = WorkspaceConfig(root=root, counterpart=_sanitized_counterpart(data))
    for key in WORKSPACE_KEYS:
        value = _string_setting(data, key)
        if value is None:
            continue
        try:
            config = replace(config, **{key: value})
        except WorkspaceConfigError as exc:
            logger.debug("dropping setting %s: %s", key, exc)
    return config


def config_to_settings(config: WorkspaceConfig) -> dict[str, object]:
    """Serialize a config into the persisted settings shape."""
    return {
        "workspace_root": str(config.root),
        "components_dir": config.components_dir,
        "bases_dir": config.bases_dir,
        "projects_dir": config.projects_dir,
        "build_command": config.build_command,
        "src_segment": config.counterpart.src_segment,
        "test_segment": config.counterpart.test_segment,
        "test_suffix": config.counterpart.test_suffix,
    }


class ConfigStore:
    """Own the single current ``WorkspaceConfig`` and its reload lifecycle."""

    def __init__(self, root_override: Path | None = None, cwd: Path | None = None) -> None:
        self._root_override = root_override
        self._cwd = cwd
        self.last_save_ok = True
        self._current = self._load()

    @property
    def current(self) -> WorkspaceConfig:
        return self._current

    def _load(self) -> WorkspaceConfig:
        root = self._root_override or default_workspace_root(self._cwd)
        return build_workspace_config(Path(os.path.abspath(root)))

    def reload(self) -> WorkspaceConfig:
        """Re-read settings from disk and replace the current config."""
        self._current = self._load()
        return self._current

    def update(self, **changes: str) -> WorkspaceConfig:
        """Validate ``changes``, persist them, and swap in the new config.

        Raises ``WorkspaceConfigError`` for unknown keys or invalid values;
        the current config is left untouched in that case. A failed write
        still swaps the config in and leaves ``last_save_ok`` false.
        """
        unknown = sorted(set(changes) - set(SETTING_KEYS))
        if unknown:
            raise WorkspaceConfigError(f"unknown setting(s): {', '.join(unknown)}")

        config = self._current
        counterpart_changes = {key: value for key, value in changes.items() if key in COUNTERPART_KEYS}
        if counterpart_changes:
            config = replace(config, counterpart=replace(config.counterpart, **counterpart_changes))
        workspace_changes = {key: value for key, value in changes.items() if key in WORKSPACE_KEYS}
        if "workspace_root" in changes:
            workspace_changes["root"] = Path(os.path.expanduser(changes["workspace_root"]))
        if workspace_changes:
            config = replace(config, **workspace_changes)

        data = load_config()
        for key in changes:
            data[key] = config_to_settings(config)[key]
        self.last_save_ok = save_config(data)
        if not self.last_save_ok:
            logger.warning("settings not persisted to %s", CONFIG_PATH)
        if "workspace_root" in changes:
            self._root_override = None
        self._current = config
        return config


__all__ = [
    "CONFIG_PATH",
    "SETTING_KEYS",
    "ConfigStore",
    "build_workspace_config",
    "config_to_settings",
    "default_workspace_root",
    "load_config",
    "load_workspace_root",
    "save_config",
]

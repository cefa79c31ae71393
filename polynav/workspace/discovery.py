"""Locate a workspace root by walking up from a starting directory."""

from __future__ import annotations

import os
from pathlib import Path

WORKSPACE_MARKER = "workspace.edn"
WORKSPACE_ENV_VAR = "POLYNAV_WORKSPACE"


def find_workspace_root(start: Path | str, marker: str = WORKSPACE_MARKER) -> Path | None:
    """Return the nearest ancestor of ``start`` (inclusive) holding ``marker``."""
    current = Path(os.path.abspath(start))
    if current.is_file():
        current = current.parent
    for candidate in (current, *current.parents):
        if (candidate / marker).is_file():
            return candidate
    return None


def workspace_root_from_env() -> Path | None:
    """Return an absolute root from ``POLYNAV_WORKSPACE`` when set."""
    raw = os.environ.get(WORKSPACE_ENV_VAR, "").strip()
    if not raw:
        return None
    return Path(os.path.abspath(os.path.expanduser(raw)))


__all__ = ["WORKSPACE_ENV_VAR", "WORKSPACE_MARKER", "find_workspace_root", "workspace_root_from_env"]

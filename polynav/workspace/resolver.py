"""Directory arithmetic and listings for a components/bases/projects workspace.

Every listing is read fresh from disk. A missing or unreadable root lists as
empty so navigation commands can report it instead of failing.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .types import DirectoryEntry, TargetKind, WorkspaceConfig

logger = logging.getLogger(__name__)


def resolve_components_dir(config: WorkspaceConfig) -> Path:
    """Return ``<root>/<components_dir>`` without touching the filesystem."""
    return config.root / config.components_dir


def resolve_bases_dir(config: WorkspaceConfig) -> Path:
    """Return ``<root>/<bases_dir>`` without touching the filesystem."""
    return config.root / config.bases_dir


def resolve_projects_dir(config: WorkspaceConfig) -> Path:
    """Return ``<root>/<projects_dir>`` without touching the filesystem."""
    return config.root / config.projects_dir


_TARGET_RESOLVERS: dict[TargetKind, Callable[[WorkspaceConfig], Path]] = {
    TargetKind.COMPONENT: resolve_components_dir,
    TargetKind.BASE: resolve_bases_dir,
    TargetKind.PROJECT: resolve_projects_dir,
}


def resolve_target_dir(config: WorkspaceConfig, kind: TargetKind) -> Path:
    """Return the top-level directory holding entries of ``kind``."""
    return _TARGET_RESOLVERS[kind](config)


def list_immediate_directories(root: Path | str) -> list[DirectoryEntry]:
    """List direct child directories of ``root`` in filesystem order.

    Files are skipped; symlinks pointing at directories are kept. Returns an
    empty list when ``root`` is missing, is not a directory, or cannot be read.
    """
    base = Path(os.path.abspath(root))
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(base) as children:
            for child in children:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                if is_dir:
                    entries.append(DirectoryEntry(name=child.name, path=base / child.name))
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("no directory to list at %s", base)
        return []
    except OSError as exc:
        logger.debug("cannot list %s: %s", base, exc)
        return []
    return entries


def list_project_names(root: Path | str) -> list[str]:
    """Return only the names of the direct child directories of ``root``."""
    return [entry.name for entry in list_immediate_directories(root)]


def list_target_entries(config: WorkspaceConfig, kind: TargetKind) -> list[DirectoryEntry]:
    """List entries of ``kind`` sorted case-insensitively by name."""
    entries = list_immediate_directories(resolve_target_dir(config, kind))
    entries.sort(key=lambda entry: (entry.name.casefold(), entry.name))
    return entries


__all__ = [
    "list_immediate_directories",
    "list_project_names",
    "list_target_entries",
    "resolve_bases_dir",
    "resolve_components_dir",
    "resolve_projects_dir",
    "resolve_target_dir",
]

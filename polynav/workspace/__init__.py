"""Host-independent workspace model.

This package contains the pure navigation logic:
- configuration and listing datatypes
- directory resolution and immediate-child listings
- source/test counterpart mapping
- workspace-root discovery
"""

from __future__ import annotations

from .counterpart import counterpart_for, to_counterpart
from .discovery import find_workspace_root, workspace_root_from_env
from .resolver import (
    list_immediate_directories,
    list_project_names,
    list_target_entries,
    resolve_bases_dir,
    resolve_components_dir,
    resolve_projects_dir,
    resolve_target_dir,
)
from .types import CounterpartRule, DirectoryEntry, TargetKind, WorkspaceConfig, WorkspaceConfigError

__all__ = [
    "CounterpartRule",
    "DirectoryEntry",
    "TargetKind",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "counterpart_for",
    "find_workspace_root",
    "list_immediate_directories",
    "list_project_names",
    "list_target_entries",
    "resolve_bases_dir",
    "resolve_components_dir",
    "resolve_projects_dir",
    "resolve_target_dir",
    "to_counterpart",
    "workspace_root_from_env",
]

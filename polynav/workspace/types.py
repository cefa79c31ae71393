"""Domain datatypes for workspace configuration and directory listings."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_COMPONENTS_DIR = "components"
DEFAULT_BASES_DIR = "bases"
DEFAULT_PROJECTS_DIR = "projects"
DEFAULT_BUILD_COMMAND = "clojure -T:build uberjar :project {project}"


class WorkspaceConfigError(ValueError):
    """Raised when a workspace setting violates its invariants."""


class TargetKind(enum.Enum):
    """Top-level workspace directories that can be listed and navigated."""

    COMPONENT = "component"
    BASE = "base"
    PROJECT = "project"


def _is_bare_name(value: object) -> bool:
    if not isinstance(value, str) or not value:
        return False
    if value in {".", ".."}:
        return False
    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in value for sep in separators)


@dataclass(frozen=True)
class CounterpartRule:
    """Markers pairing a source file with its test file."""

    src_segment: str = "src"
    test_segment: str = "test"
    test_suffix: str = "_test"

    def __post_init__(self) -> None:
        for label, value in (("src_segment", self.src_segment), ("test_segment", self.test_segment)):
            if not _is_bare_name(value):
                raise WorkspaceConfigError(f"{label} must be a bare directory name, got {value!r}")
        if self.src_segment == self.test_segment:
            raise WorkspaceConfigError("src_segment and test_segment must differ")
        if not _is_bare_name(self.test_suffix):
            raise WorkspaceConfigError(f"test_suffix must be a non-empty name fragment, got {self.test_suffix!r}")


@dataclass(frozen=True)
class WorkspaceConfig:
    """Immutable workspace settings passed into every resolver operation."""

    root: Path
    components_dir: str = DEFAULT_COMPONENTS_DIR
    bases_dir: str = DEFAULT_BASES_DIR
    projects_dir: str = DEFAULT_PROJECTS_DIR
    build_command: str = DEFAULT_BUILD_COMMAND
    counterpart: CounterpartRule = field(default_factory=CounterpartRule)

    def __post_init__(self) -> None:
        root = Path(self.root)
        if not root.is_absolute():
            raise WorkspaceConfigError(f"workspace root must be absolute: {self.root}")
        object.__setattr__(self, "root", root)
        for label, value in (
            ("components_dir", self.components_dir),
            ("bases_dir", self.bases_dir),
            ("projects_dir", self.projects_dir),
        ):
            if not _is_bare_name(value):
                raise WorkspaceConfigError(f"{label} must be a bare directory name, got {value!r}")
        if not isinstance(self.build_command, str) or not self.build_command.strip():
            raise WorkspaceConfigError("build_command must not be empty")


@dataclass(frozen=True)
class DirectoryEntry:
    """One direct child directory of a listed root."""

    name: str
    path: Path


__all__ = [
    "DEFAULT_BASES_DIR",
    "DEFAULT_BUILD_COMMAND",
    "DEFAULT_COMPONENTS_DIR",
    "DEFAULT_PROJECTS_DIR",
    "CounterpartRule",
    "DirectoryEntry",
    "TargetKind",
    "WorkspaceConfig",
    "WorkspaceConfigError",
]

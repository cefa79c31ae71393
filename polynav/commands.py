"""User-facing workspace commands over injected host capabilities.

Each command maps one workspace operation onto one host call: choosing,
opening, or launching. Commands return ``None`` on success or a message for
the user; none of the conditions they report is fatal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .build import BUILD_SINK, format_build_command
from .workspace.counterpart import counterpart_for
from .workspace.resolver import (
    list_project_names,
    list_target_entries,
    resolve_components_dir,
    resolve_projects_dir,
    resolve_target_dir,
)
from .workspace.types import TargetKind, WorkspaceConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandHost:
    """Capabilities supplied by the surrounding application."""

    choose: Callable[[str, Sequence[str]], int | None]
    open_path: Callable[[Path], str | None]
    launch: Callable[[str, Path, str], str | None]
    confirm: Callable[[str], bool]


_TARGET_LABELS: dict[TargetKind, tuple[str, str]] = {
    TargetKind.COMPONENT: ("Component", "components"),
    TargetKind.BASE: ("Base", "bases"),
    TargetKind.PROJECT: ("Project", "projects"),
}


def find_target(config: WorkspaceConfig, host: CommandHost, kind: TargetKind) -> str | None:
    """Pick one directory of ``kind`` and open it."""
    prompt, plural = _TARGET_LABELS[kind]
    entries = list_target_entries(config, kind)
    if not entries:
        return f"No {plural} found in {resolve_target_dir(config, kind)}"
    choice = host.choose(prompt, [entry.name for entry in entries])
    if choice is None:
        return None
    return host.open_path(entries[choice].path)


def find_component(config: WorkspaceConfig, host: CommandHost) -> str | None:
    return find_target(config, host, TargetKind.COMPONENT)


def find_base(config: WorkspaceConfig, host: CommandHost) -> str | None:
    return find_target(config, host, TargetKind.BASE)


def jump_to_components_dir(config: WorkspaceConfig, host: CommandHost) -> str | None:
    components_dir = resolve_components_dir(config)
    if not components_dir.is_dir():
        return f"Components directory not found: {components_dir}"
    return host.open_path(components_dir)


def run_build_for_selected_project(config: WorkspaceConfig, host: CommandHost) -> str | None:
    """Pick a project by name and launch the configured build for it."""
    projects_dir = resolve_projects_dir(config)
    names = sorted(list_project_names(projects_dir), key=str.casefold)
    if not names:
        return f"No projects found in {projects_dir}"
    choice = host.choose("Project", names)
    if choice is None:
        return None
    command = format_build_command(config.build_command, names[choice])
    logger.info("building project %s: %s", names[choice], command)
    return host.launch(command, config.root, BUILD_SINK)


def toggle_source_test_file(config: WorkspaceConfig, host: CommandHost, current_file: Path) -> str | None:
    """Open the source/test counterpart of ``current_file``.

    A missing counterpart is created (with parent directories) only after
    the user confirms.
    """
    target = counterpart_for(current_file, config)
    if target is None:
        return f"No source/test counterpart for {current_file}"
    if not target.exists():
        if not host.confirm(f"{target} does not exist. Create it?"):
            return f"Not created: {target}"
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.touch(exist_ok=True)
        except OSError as exc:
            return f"Cannot create {target}: {exc}"
        logger.info("created %s", target)
    return host.open_path(target)


def workspace_listing(config: WorkspaceConfig, kind: TargetKind) -> list[str]:
    """Return sorted ``name<TAB>path`` rows for ``kind``."""
    entries = list_target_entries(config, kind)
    return [f"{entry.name}\t{entry.path}" for entry in entries]


COMMANDS: tuple[tuple[str, str], ...] = (
    ("component", "Find component"),
    ("base", "Find base"),
    ("jump", "Jump to components directory"),
    ("build", "Run build for selected project"),
    ("toggle", "Toggle source/test file"),
)

__all__ = [
    "COMMANDS",
    "CommandHost",
    "find_base",
    "find_component",
    "find_target",
    "jump_to_components_dir",
    "run_build_for_selected_project",
    "toggle_source_test_file",
    "workspace_listing",
]

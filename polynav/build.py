"""Fire-and-forget launcher for workspace build commands.

The command runs through the shell, detached in its own session. Its combined
stdout/stderr is appended to ``<log_dir>/<sink>.log`` so it can be followed
with ``tail -f``.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "polynav"
BUILD_SINK = "polylith-build"

logger = logging.getLogger(__name__)

# Started builds stay referenced until they exit; they are never waited on.
_RUNNING: list[subprocess.Popen] = []


@dataclass(frozen=True)
class BuildHandle:
    """A started build process and the log file receiving its output."""

    process: subprocess.Popen
    log_path: Path
    command: str

    @property
    def pid(self) -> int:
        return self.process.pid


def default_log_dir() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False))


def sink_log_path(sink: str, log_dir: Path | None = None) -> Path:
    """Return the log file backing the named output sink."""
    safe_name = "".join(ch if ch.isalnum() or ch in "-_." else "_" for ch in sink).strip(".") or "build"
    return (log_dir or default_log_dir()) / f"{safe_name}.log"


def format_build_command(template: str, project: str) -> str:
    """Substitute ``{project}`` in a build command template, shell-quoted."""
    return template.replace("{project}", shlex.quote(project))


def running_builds() -> list[subprocess.Popen]:
    """Return started builds that have not exited yet."""
    _RUNNING[:] = [process for process in _RUNNING if process.poll() is None]
    return list(_RUNNING)


def launch_build(command: str, cwd: Path, sink: str = BUILD_SINK, log_dir: Path | None = None) -> BuildHandle:
    """Start the shell command ``command`` in ``cwd`` without waiting for it.

    Raises ``ValueError`` for a blank command and ``OSError`` when the log
    file or process cannot be created.
    """
    if not command.strip():
        raise ValueError("build command is empty")

    log_path = sink_log_path(sink, log_dir)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as log_file:
        stamp = time.strftime("%Y-%m-%d %H:%M:%S")
        log_file.write(f"\n=== {stamp} $ {command}  (cwd: {cwd})\n")
        log_file.flush()
        process = subprocess.Popen(
            command,
            shell=True,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=log_file,
            stderr=subprocess.STDOUT,
            start_new_session=True,
        )
    running_builds()
    _RUNNING.append(process)
    logger.info("started build (pid %s): %s; output in %s", process.pid, command, log_path)
    return BuildHandle(process=process, log_path=log_path, command=command)


def start_build(command: str, cwd: Path, sink: str = BUILD_SINK, log_dir: Path | None = None) -> str:
    """Launch a build and describe the outcome as a user-facing message."""
    try:
        handle = launch_build(command, cwd, sink, log_dir)
    except ValueError as exc:
        return f"Cannot run build: {exc}"
    except OSError as exc:
        return f"Failed to start build: {exc}"
    return f"Build started (pid {handle.pid}); output: {handle.log_path}"


__all__ = [
    "BUILD_SINK",
    "BuildHandle",
    "default_log_dir",
    "format_build_command",
    "launch_build",
    "running_builds",
    "sink_log_path",
    "start_build",
]

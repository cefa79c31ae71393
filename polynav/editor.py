"""Editor launch helper for opening files and directories.

Runs ``$VISUAL`` or ``$EDITOR`` on the target and waits for it to exit.
Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path

EDITOR_ENV_VARS = ("VISUAL", "EDITOR")

logger = logging.getLogger(__name__)


def editor_command() -> list[str] | None:
    """Return the configured editor argv, or ``None`` when none is set."""
    for name in EDITOR_ENV_VARS:
        raw = os.environ.get(name, "").strip()
        if not raw:
            continue
        try:
            cmd = shlex.split(raw)
        except ValueError:
            continue
        if cmd:
            return cmd
    return None


def open_in_editor(target: Path) -> str | None:
    cmd = editor_command()
    if cmd is None:
        return f"Cannot open {target}: neither $VISUAL nor $EDITOR is set."
    logger.debug("opening %s with %s", target, cmd[0])
    try:
        subprocess.run([*cmd, str(target)], check=False)
    except OSError as exc:
        return f"Failed to launch editor: {exc}"
    return None


__all__ = ["EDITOR_ENV_VARS", "editor_command", "open_in_editor"]

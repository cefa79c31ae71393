"""Interactive chooser sessions.

``run_picker`` drives a raw-mode full-screen picker when stdin is a tty and
otherwise falls back to a numbered line prompt.
"""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Callable, Sequence

from ..input import read_key
from ..terminal import TerminalController
from .keys import ACCEPT, CANCEL, handle_picker_key
from .render import render_picker
from .state import new_picker_state


def pick_interactively(
    prompt: str,
    labels: Sequence[str],
    stdin_fd: int,
    stdout_fd: int,
    no_color: bool = False,
) -> int | None:
    """Run the raw-mode picker and return the chosen label index."""
    state = new_picker_state(prompt, list(labels))
    terminal = TerminalController(stdin_fd, stdout_fd)
    with terminal.raw_mode():
        while True:
            if state.dirty:
                size = shutil.get_terminal_size((80, 24))
                terminal.write(render_picker(state, size.columns, size.lines, no_color))
                state.dirty = False
            key = read_key(stdin_fd)
            if not key:
                return None
            outcome = handle_picker_key(state, key)
            if outcome == CANCEL:
                return None
            if outcome == ACCEPT:
                return state.selected_index()


def pick_by_number(
    prompt: str,
    labels: Sequence[str],
    read_line: Callable[[str], str] = input,
    write: Callable[[str], object] | None = None,
) -> int | None:
    """Print a numbered list and read a choice; blank or invalid input cancels."""
    write = write or sys.stderr.write
    for idx, label in enumerate(labels, start=1):
        write(f"{idx:>3}  {label}\n")
    try:
        raw = read_line(f"{prompt} [1-{len(labels)}]: ").strip()
    except EOFError:
        return None
    if not raw:
        return None
    if raw.isdigit() and 1 <= int(raw) <= len(labels):
        return int(raw) - 1
    # Accept an exact label as well as its number.
    for idx, label in enumerate(labels):
        if label == raw:
            return idx
    write(f"Not a valid choice: {raw}\n")
    return None


def run_picker(prompt: str, labels: Sequence[str], no_color: bool = False) -> int | None:
    """Choose one of ``labels``; returns its index or ``None`` when cancelled."""
    if not labels:
        return None
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if os.isatty(stdin_fd) and os.isatty(stdout_fd):
        return pick_interactively(prompt, labels, stdin_fd, stdout_fd, no_color=no_color)
    return pick_by_number(prompt, labels)


__all__ = ["pick_by_number", "pick_interactively", "run_picker"]

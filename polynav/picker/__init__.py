"""Terminal interactive chooser.

State, key dispatch and rendering are pure so they can be tested without a
tty; ``session`` wires them to the terminal.
"""

from __future__ import annotations

from .keys import ACCEPT, CANCEL, CONTINUE, handle_picker_key
from .render import render_picker, render_picker_lines
from .session import pick_by_number, run_picker
from .state import PickerState, new_picker_state, refresh_matches

__all__ = [
    "ACCEPT",
    "CANCEL",
    "CONTINUE",
    "PickerState",
    "handle_picker_key",
    "new_picker_state",
    "pick_by_number",
    "refresh_matches",
    "render_picker",
    "render_picker_lines",
    "run_picker",
]

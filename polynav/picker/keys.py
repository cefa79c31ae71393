"""Picker key dispatch.

Maps one normalized key token onto a ``PickerState`` change and reports
whether the session continues, accepts the selection, or is cancelled.
"""

from __future__ import annotations

from .state import PickerState, refresh_matches

CONTINUE = "continue"
ACCEPT = "accept"
CANCEL = "cancel"

CANCEL_KEYS = frozenset({"ESC", "CTRL_C", "CTRL_G"})
UP_KEYS = frozenset({"UP", "CTRL_P"})
DOWN_KEYS = frozenset({"DOWN", "CTRL_N", "TAB"})


def _move_selection(state: PickerState, direction: int) -> None:
    if not state.match_labels:
        return
    previous = state.selected
    state.selected = max(0, min(len(state.match_labels) - 1, state.selected + direction))
    if state.selected != previous:
        state.dirty = True


def _delete_word(query: str) -> str:
    trimmed = query.rstrip()
    cut = max(trimmed.rfind(sep) for sep in " /_-.")
    return trimmed[: cut + 1] if cut >= 0 else ""


def handle_picker_key(state: PickerState, key: str) -> str:
    """Apply ``key`` to ``state``; returns ``CONTINUE``, ``ACCEPT`` or ``CANCEL``."""
    if key in CANCEL_KEYS:
        return CANCEL
    if key == "ENTER":
        return ACCEPT if state.match_indices else CONTINUE
    if key in UP_KEYS:
        _move_selection(state, -1)
        return CONTINUE
    if key in DOWN_KEYS:
        _move_selection(state, 1)
        return CONTINUE
    if key == "HOME":
        _move_selection(state, -len(state.match_labels))
        return CONTINUE
    if key == "END":
        _move_selection(state, len(state.match_labels))
        return CONTINUE
    if key == "BACKSPACE":
        if state.query:
            state.query = state.query[:-1]
            refresh_matches(state, reset_selection=True)
        return CONTINUE
    if key == "CTRL_U":
        if state.query:
            state.query = ""
            refresh_matches(state, reset_selection=True)
        return CONTINUE
    if key == "CTRL_W":
        if state.query:
            state.query = _delete_word(state.query)
            refresh_matches(state, reset_selection=True)
        return CONTINUE
    if len(key) == 1 and key.isprintable():
        state.query += key
        refresh_matches(state, reset_selection=True)
    return CONTINUE


__all__ = ["ACCEPT", "CANCEL", "CONTINUE", "handle_picker_key"]

"""Mutable picker state and match refresh."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..search.fuzzy import fuzzy_match_labels

PICKER_RESULT_LIMIT = 200


@dataclass
class PickerState:
    """Query, narrowed matches and selection for one picker session."""

    prompt: str
    labels: list[str]
    query: str = ""
    match_indices: list[int] = field(default_factory=list)
    match_labels: list[str] = field(default_factory=list)
    selected: int = 0
    list_start: int = 0
    message: str = ""
    dirty: bool = True

    def selected_index(self) -> int | None:
        """Return the index into ``labels`` of the highlighted match."""
        if not self.match_indices:
            return None
        return self.match_indices[self.selected]


def refresh_matches(state: PickerState, reset_selection: bool = False) -> None:
    """Recompute visible matches from the current query."""
    matched = fuzzy_match_labels(state.query, state.labels, limit=PICKER_RESULT_LIMIT)
    state.match_indices = [idx for idx, _, _ in matched]
    state.match_labels = [label for _, label, _ in matched]
    state.message = "" if state.match_labels else " no matches"
    if reset_selection or not state.match_labels:
        state.selected = 0
        state.list_start = 0
    else:
        state.selected = max(0, min(state.selected, len(state.match_labels) - 1))
    state.dirty = True


def new_picker_state(prompt: str, labels: list[str]) -> PickerState:
    state = PickerState(prompt=prompt, labels=list(labels))
    refresh_matches(state, reset_selection=True)
    return state


__all__ = ["PICKER_RESULT_LIMIT", "PickerState", "new_picker_state", "refresh_matches"]

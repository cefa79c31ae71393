"""Frame rendering for the terminal picker."""

from __future__ import annotations

from .state import PickerState

RESET = "\033[0m"
REVERSE = "\033[7m"
DIM = "\033[2m"
CLEAR_SCREEN = "\033[H\033[2J"


def _clip(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return text[:1]
    return text[: width - 1] + "…"


def visible_list_rows(height: int) -> int:
    """Rows available for matches once prompt and status rows are drawn."""
    return max(1, height - 2)


def scroll_into_view(state: PickerState, rows: int) -> None:
    """Adjust ``list_start`` so the selected match is on screen."""
    if state.selected < state.list_start:
        state.list_start = state.selected
    elif state.selected >= state.list_start + rows:
        state.list_start = state.selected - rows + 1
    state.list_start = max(0, min(state.list_start, max(0, len(state.match_labels) - rows)))


def render_picker_lines(state: PickerState, width: int, height: int, no_color: bool = False) -> list[str]:
    """Return display rows: prompt, visible matches, then a status row."""
    rows = visible_list_rows(height)
    scroll_into_view(state, rows)

    lines = [_clip(f"{state.prompt}> {state.query}", width)]
    window = state.match_labels[state.list_start : state.list_start + rows]
    for offset, label in enumerate(window):
        idx = state.list_start + offset
        marker = "> " if idx == state.selected else "  "
        text = _clip(marker + label, width)
        if idx == state.selected and not no_color:
            text = f"{REVERSE}{text}{RESET}"
        lines.append(text)
    while len(lines) < rows + 1:
        lines.append("")

    status = state.message.strip() or f"{len(state.match_labels)}/{len(state.labels)}"
    status = _clip(status, width)
    lines.append(status if no_color else f"{DIM}{status}{RESET}")
    return lines


def render_picker(state: PickerState, width: int, height: int, no_color: bool = False) -> str:
    """Return one full-screen frame for raw-mode output."""
    return CLEAR_SCREEN + "\r\n".join(render_picker_lines(state, width, height, no_color))


__all__ = ["render_picker", "render_picker_lines", "scroll_into_view", "visible_list_rows"]

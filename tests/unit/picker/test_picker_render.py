"""Rendering tests for picker frames."""

from __future__ import annotations

import unittest

from polynav.picker import handle_picker_key, new_picker_state, render_picker, render_picker_lines


class PickerRenderTests(unittest.TestCase):
    def test_lines_contain_prompt_matches_and_status(self) -> None:
        state = new_picker_state("Base", ["api", "worker"])

        lines = render_picker_lines(state, width=40, height=6, no_color=True)

        self.assertEqual(lines[0], "Base> ")
        self.assertEqual(lines[1], "> api")
        self.assertEqual(lines[2], "  worker")
        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[-1], "2/2")

    def test_selection_scrolls_into_view(self) -> None:
        labels = [f"project-{idx:02d}" for idx in range(20)]
        state = new_picker_state("Project", labels)
        for _ in range(10):
            handle_picker_key(state, "DOWN")

        lines = render_picker_lines(state, width=40, height=5, no_color=True)

        self.assertIn("> project-10", lines)
        self.assertEqual(state.list_start, 8)

    def test_long_labels_are_clipped_to_width(self) -> None:
        state = new_picker_state("Component", ["a" * 50])

        lines = render_picker_lines(state, width=10, height=4, no_color=True)

        self.assertTrue(all(len(line) <= 10 for line in lines))
        self.assertTrue(lines[1].endswith("…"))

    def test_colored_frame_highlights_selection(self) -> None:
        state = new_picker_state("Component", ["auth"])

        frame = render_picker(state, width=20, height=4)

        self.assertTrue(frame.startswith("\033[H\033[2J"))
        self.assertIn("\033[7m> auth\033[0m", frame)
        self.assertIn("\r\n", frame)


if __name__ == "__main__":
    unittest.main()

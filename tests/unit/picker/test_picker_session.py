"""Tests for the non-tty numbered chooser fallback."""

from __future__ import annotations

import unittest

from polynav.picker import pick_by_number


class PickByNumberTests(unittest.TestCase):
    def _pick(self, answer: str | None, labels: list[str]) -> tuple[int | None, str]:
        written: list[str] = []

        def read_line(prompt: str) -> str:
            written.append(prompt)
            if answer is None:
                raise EOFError
            return answer

        choice = pick_by_number("Project", labels, read_line=read_line, write=written.append)
        return choice, "".join(written)

    def test_number_selects_label(self) -> None:
        choice, output = self._pick("2", ["api", "worker"])

        self.assertEqual(choice, 1)
        self.assertIn("  1  api\n", output)
        self.assertIn("Project [1-2]: ", output)

    def test_exact_label_selects_label(self) -> None:
        choice, _ = self._pick("worker", ["api", "worker"])

        self.assertEqual(choice, 1)

    def test_blank_eof_and_out_of_range_cancel(self) -> None:
        self.assertIsNone(self._pick("", ["api"])[0])
        self.assertIsNone(self._pick(None, ["api"])[0])
        choice, output = self._pick("7", ["api"])
        self.assertIsNone(choice)
        self.assertIn("Not a valid choice: 7", output)


if __name__ == "__main__":
    unittest.main()

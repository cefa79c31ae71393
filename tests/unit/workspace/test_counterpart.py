"""Tests for the source/test counterpart mapping."""

from __future__ import annotations

import unittest
from pathlib import Path

from polynav.workspace import CounterpartRule, WorkspaceConfig, counterpart_for, to_counterpart


class ToCounterpartTests(unittest.TestCase):
    def test_test_file_maps_to_source_file(self) -> None:
        self.assertEqual(to_counterpart("/ws/test/pkg/foo_test.clj"), Path("/ws/src/pkg/foo.clj"))

    def test_source_file_maps_to_test_file(self) -> None:
        self.assertEqual(to_counterpart("/ws/src/pkg/foo.clj"), Path("/ws/test/pkg/foo_test.clj"))

    def test_path_without_markers_has_no_counterpart(self) -> None:
        self.assertIsNone(to_counterpart("/ws/other/foo.clj"))

    def test_marker_must_match_a_whole_segment(self) -> None:
        self.assertIsNone(to_counterpart("/ws/test_utils/helpers.clj"))
        self.assertEqual(
            to_counterpart("/ws/src/test_utils/helpers.clj"),
            Path("/ws/test/test_utils/helpers_test.clj"),
        )

    def test_filename_is_not_treated_as_a_marker_segment(self) -> None:
        self.assertIsNone(to_counterpart("/ws/lib/test"))

    def test_only_first_test_segment_is_replaced(self) -> None:
        self.assertEqual(
            to_counterpart("/ws/test/fixtures/test/data_test.clj"),
            Path("/ws/src/fixtures/test/data.clj"),
        )

    def test_test_direction_wins_when_both_markers_present(self) -> None:
        self.assertEqual(
            to_counterpart("/ws/src/app/test/io_test.clj"),
            Path("/ws/src/app/src/io.clj"),
        )

    def test_test_file_without_suffix_keeps_its_name(self) -> None:
        self.assertEqual(to_counterpart("/ws/test/pkg/helpers.clj"), Path("/ws/src/pkg/helpers.clj"))

    def test_bare_suffix_filename_is_not_stripped_to_nothing(self) -> None:
        self.assertEqual(to_counterpart("/ws/test/pkg/_test.clj"), Path("/ws/src/pkg/_test.clj"))

    def test_only_last_extension_is_preserved(self) -> None:
        self.assertEqual(to_counterpart("/ws/src/pkg/foo.cljc"), Path("/ws/test/pkg/foo_test.cljc"))
        self.assertEqual(to_counterpart("/ws/test/pkg/foo_test.cljc"), Path("/ws/src/pkg/foo.cljc"))

    def test_file_without_extension_gets_plain_suffix(self) -> None:
        self.assertEqual(to_counterpart("/ws/src/bin/run"), Path("/ws/test/bin/run_test"))

    def test_relative_paths_stay_relative(self) -> None:
        self.assertEqual(to_counterpart("src/pkg/foo.clj"), Path("test/pkg/foo_test.clj"))

    def test_custom_markers(self) -> None:
        rule = CounterpartRule(src_segment="main", test_segment="spec", test_suffix="_spec")

        self.assertEqual(to_counterpart("/ws/main/a/b.rb", rule), Path("/ws/spec/a/b_spec.rb"))
        self.assertEqual(to_counterpart("/ws/spec/a/b_spec.rb", rule), Path("/ws/main/a/b.rb"))
        self.assertIsNone(to_counterpart("/ws/src/a/b.rb", rule))

    def test_round_trip_holds_for_single_marker_paths(self) -> None:
        for raw in (
            "/ws/components/auth/src/acme/auth/core.clj",
            "/ws/bases/api/src/acme/api/handler.clj",
            "/ws/components/auth/test/acme/auth/core_test.clj",
        ):
            with self.subTest(path=raw):
                path = Path(raw)
                self.assertEqual(to_counterpart(to_counterpart(path)), path)

    def test_round_trip_is_not_an_involution_when_both_markers_present(self) -> None:
        original = Path("/ws/src/app/test/io.clj")

        source = to_counterpart(original)

        self.assertEqual(source, Path("/ws/src/app/src/io.clj"))
        self.assertEqual(to_counterpart(source), Path("/ws/test/app/src/io_test.clj"))

    def test_suffixed_source_file_round_trips_by_stripping_one_suffix(self) -> None:
        source = Path("/ws/src/pkg/foo_test.clj")

        test_file = to_counterpart(source)

        self.assertEqual(test_file, Path("/ws/test/pkg/foo_test_test.clj"))
        self.assertEqual(to_counterpart(test_file), source)


class AnchoredCounterpartTests(unittest.TestCase):
    def test_markers_above_the_anchor_are_ignored(self) -> None:
        root = Path("/home/dev/src/acme")
        source = root / "components" / "auth" / "src" / "acme" / "auth" / "core.clj"

        self.assertEqual(
            to_counterpart(source, anchor=root),
            root / "components" / "auth" / "test" / "acme" / "auth" / "core_test.clj",
        )
        self.assertIsNone(to_counterpart(root / "deps.edn", anchor=root))

    def test_paths_outside_the_anchor_use_the_whole_path(self) -> None:
        self.assertEqual(
            to_counterpart("/other/src/foo.clj", anchor=Path("/ws")),
            Path("/other/test/foo_test.clj"),
        )

    def test_counterpart_for_uses_workspace_markers_and_root(self) -> None:
        config = WorkspaceConfig(
            root=Path("/home/dev/test/ws"),
            counterpart=CounterpartRule(test_suffix="-test"),
        )

        self.assertEqual(
            counterpart_for("/home/dev/test/ws/components/db/src/db/core.clj", config),
            Path("/home/dev/test/ws/components/db/test/db/core-test.clj"),
        )


if __name__ == "__main__":
    unittest.main()

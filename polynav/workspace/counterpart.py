"""Source/test counterpart mapping by path-segment substitution.

A file under a ``test`` directory maps to the same relative location under
``src`` with the ``_test`` filename suffix stripped, and vice versa. Segments
are compared by exact equality, so directories such as ``test_utils`` never
act as markers.

The mapping is not a true involution. ``src/a/foo_test.clj`` maps to
``test/a/foo_test_test.clj``, which maps back to ``src/a/foo_test.clj`` only
because exactly one suffix is stripped; paths holding both markers always
take the test-to-source direction.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from .types import CounterpartRule, WorkspaceConfig


def _split_anchor(path: Path, anchor: Path | None) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split ``path`` into a fixed prefix and the parts eligible for marker search."""
    if anchor is not None:
        try:
            relative = path.relative_to(anchor)
        except ValueError:
            pass
        else:
            return Path(anchor).parts, relative.parts
    return (), path.parts


def _first_index(parts: tuple[str, ...], segment: str) -> int | None:
    # The last part is the filename and never counts as a marker.
    for idx, part in enumerate(parts[:-1]):
        if part == segment:
            return idx
    return None


def _strip_suffix(filename: str, suffix: str) -> str:
    pure = PurePath(filename)
    stem = pure.stem
    if len(stem) > len(suffix) and stem.endswith(suffix):
        return stem[: -len(suffix)] + pure.suffix
    return filename


def _add_suffix(filename: str, suffix: str) -> str:
    pure = PurePath(filename)
    return f"{pure.stem}{suffix}{pure.suffix}"


def to_counterpart(
    file_path: Path | str,
    rule: CounterpartRule | None = None,
    *,
    anchor: Path | None = None,
) -> Path | None:
    """Return the source/test counterpart of ``file_path`` or ``None``.

    When ``anchor`` is given and contains ``file_path``, only segments below
    the anchor are searched for markers.
    """
    rule = rule or CounterpartRule()
    path = Path(file_path)
    prefix, parts = _split_anchor(path, anchor)
    if len(parts) < 2:
        return None

    test_idx = _first_index(parts, rule.test_segment)
    if test_idx is not None:
        replaced = list(parts)
        replaced[test_idx] = rule.src_segment
        replaced[-1] = _strip_suffix(replaced[-1], rule.test_suffix)
        return Path(*prefix, *replaced)

    src_idx = _first_index(parts, rule.src_segment)
    if src_idx is not None:
        replaced = list(parts)
        replaced[src_idx] = rule.test_segment
        replaced[-1] = _add_suffix(replaced[-1], rule.test_suffix)
        return Path(*prefix, *replaced)

    return None


def counterpart_for(file_path: Path | str, config: WorkspaceConfig) -> Path | None:
    """Map ``file_path`` using the workspace's markers, anchored at its root."""
    return to_counterpart(file_path, config.counterpart, anchor=config.root)


__all__ = ["counterpart_for", "to_counterpart"]

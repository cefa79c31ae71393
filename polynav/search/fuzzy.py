"""Candidate narrowing for the interactive picker.

Substring hits always outrank subsequence matches: when any label contains
the query verbatim only those labels are returned, earliest hit first.
"""

from __future__ import annotations

from collections.abc import Sequence

SUBSTRING_BASE_SCORE = 10_000
BOUNDARY_CHARS = "/_- ."


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score ``query`` as an in-order subsequence of ``candidate``.

    Contiguous runs and word-boundary hits score higher; gaps and long
    candidates score lower. Returns ``None`` when a query char is missing.
    """
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            run = 0
            score -= min(40, (idx - prev_idx - 1) * 2)
        if idx == 0 or candidate_folded[idx - 1] in BOUNDARY_CHARS:
            score += 35
        prev_idx = idx

    return score - len(candidate_folded) // 5


def substring_index(query: str, candidate: str) -> int | None:
    """Return the case-insensitive position of ``query`` in ``candidate``."""
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    return None if idx < 0 else idx


def fuzzy_match_labels(query: str, labels: Sequence[str], limit: int = 200) -> list[tuple[int, str, int]]:
    """Return ``(label_index, label, score)`` for matching labels, best first."""
    limit = max(1, limit)
    substring_hits: list[tuple[int, int, str, int]] = []
    for label_idx, label in enumerate(labels):
        hit = substring_index(query, label)
        if hit is not None:
            substring_hits.append((hit, len(label), label, label_idx))
    if substring_hits:
        substring_hits.sort(key=lambda item: (item[0], item[1], item[2]))
        return [
            (label_idx, label, SUBSTRING_BASE_SCORE - hit * 50 - label_len)
            for hit, label_len, label, label_idx in substring_hits[:limit]
        ]

    scored: list[tuple[int, int, str, int]] = []
    for label_idx, label in enumerate(labels):
        score = fuzzy_score(query, label)
        if score is not None:
            scored.append((score, len(label), label, label_idx))
    scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    return [(label_idx, label, score) for score, _, label, label_idx in scored[:limit]]


__all__ = ["fuzzy_match_labels", "fuzzy_score", "substring_index"]

"""Label search helpers used by the picker."""

from __future__ import annotations

from .fuzzy import fuzzy_match_labels, fuzzy_score, substring_index

__all__ = ["fuzzy_match_labels", "fuzzy_score", "substring_index"]

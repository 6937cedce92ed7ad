"""Grapheme-cluster aware helpers for width measurement, search and truncation.

Display width and truncation must never count bytes or code points: a
combining accent or a ZWJ emoji sequence is a single user-perceived
character. ``regex`` exposes Unicode extended grapheme clusters as ``\\X``.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

import regex

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> List[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def grapheme_count(text: str) -> int:
    return len(graphemes(text))


def truncate_graphemes(text: str, limit: int, ellipsis: str = "") -> str:
    """Cut ``text`` to at most ``limit`` clusters, appending ``ellipsis`` when cut."""
    clusters = graphemes(text)
    if len(clusters) <= limit:
        return text
    return "".join(clusters[:limit]) + ellipsis


def grapheme_span(haystack: str, needle: str) -> Optional[Tuple[int, int]]:
    """Case-insensitive search returning the grapheme span of the first match.

    Matching uses full case folding over the whole string, so ``STRASSE``
    finds ``straße`` and a ligature finds itself. Only matches that start
    and end on cluster boundaries are reported, so a query never lands
    inside a combined character.
    """
    if not needle:
        return None
    boundaries = {0: 0}
    offset = 0
    for index, cluster in enumerate(graphemes(haystack), start=1):
        offset += len(cluster)
        boundaries[offset] = index
    pattern = regex.compile(regex.escape(needle), regex.IGNORECASE | regex.FULLCASE | regex.V1)
    for start, start_index in boundaries.items():
        match = pattern.match(haystack, start)
        if match is not None and match.end() in boundaries:
            return start_index, boundaries[match.end()]
    return None


def grapheme_find(haystack: str, needle: str) -> Optional[int]:
    """Grapheme offset of the first case-insensitive match, or None."""
    span = grapheme_span(haystack, needle)
    return span[0] if span is not None else None

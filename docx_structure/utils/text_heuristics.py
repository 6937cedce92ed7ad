"""Pattern-based predicates shared by the heading and list classifiers."""
from __future__ import annotations

import re
from typing import Optional, Tuple

BULLET_PREFIXES = ("• ", "- ", "* ")
SENTENCE_CONNECTORS = (" and ", " but ", " however ", " therefore ")

# Text after "<digit>." longer than this reads as a list item, not a numbered heading.
LIST_ITEM_MIN_TAIL_BYTES = 20
LONG_SENTENCE_BYTES = 80

MANUAL_NUMBERING_PATTERNS = (
    re.compile(r"^(\d+(?:\.\d+)*\.?)\s+(.+)$"),
    re.compile(r"^((?:Section|Chapter|Part)\s+\d+(?:\.\d+)*\.?)\s+(.+)$"),
    re.compile(r"^([A-Z]\.)\s+(.+)$"),
    re.compile(r"^([IVX]+\.)\s+(.+)$"),
)


def byte_length(text: str) -> int:
    """Length in UTF-8 bytes; the unit every length threshold is tuned in."""
    return len(text.encode("utf-8"))


def starts_with_digit(text: str) -> bool:
    return bool(text) and text[0].isnumeric()


def is_lettered_marker(text: str) -> bool:
    """``a.`` / ``B.`` style prefix on text longer than three bytes."""
    return (
        byte_length(text) > 3
        and len(text) > 1
        and text[1] == "."
        and text[0].isascii()
        and text[0].isalpha()
    )


def is_list_item_like(text: str) -> bool:
    text = text.strip()

    if starts_with_digit(text) and "." in text:
        after_dot = text.split(".", 1)[1].strip()
        if byte_length(after_dot) > LIST_ITEM_MIN_TAIL_BYTES:
            return True

    if text.startswith(BULLET_PREFIXES):
        return True

    return is_lettered_marker(text)


def is_sentence_like(text: str) -> bool:
    text = text.strip()

    if text.count(". ") > 1:
        return True

    if byte_length(text) > LONG_SENTENCE_BYTES and text.endswith((".", "!", "?")):
        return True

    return any(connector in text for connector in SENTENCE_CONNECTORS)


def match_manual_numbering(text: str) -> Optional[Tuple[str, str]]:
    """Split a typed-in number off the front of ``text``.

    Returns ``(number, remaining_text)`` with the number's trailing dot
    removed, e.g. ``"1.1 Project Overview"`` -> ``("1.1", "Project Overview")``.
    """
    text = text.strip()
    if not text:
        return None

    for pattern in MANUAL_NUMBERING_PATTERNS:
        match = pattern.match(text)
        if match is None:
            continue
        number = match.group(1).rstrip(".")
        remaining = match.group(2).strip()
        if number and remaining:
            return number, remaining

    return None

"""Decide whether a normalized paragraph is a heading, at what level and with which number."""
from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from docx_structure.model.document_model import TextFormatting
from docx_structure.model.elements import NumberingInfo
from docx_structure.model.numbering_model import MAX_HEADING_LEVEL
from docx_structure.utils.text_heuristics import (
    byte_length,
    is_list_item_like,
    is_sentence_like,
    match_manual_numbering,
)

MAX_HEADING_BYTES = 100
BOLD_HEADING_MIN_BYTES = 5
BOLD_HEADING_MAX_BYTES = 60
CAPS_HEADING_MIN_BYTES = 15
CAPS_HEADING_MAX_BYTES = 50
PHRASE_HEADING_MIN_BYTES = 10
PHRASE_HEADING_MAX_BYTES = 40
PHRASE_MIN_WORDS = 2
PHRASE_MAX_WORDS = 5
MEANINGFUL_WORD_MIN_BYTES = 4
LEVEL_ONE_MAX_BYTES = 20
LEVEL_TWO_MAX_BYTES = 40

NON_HEADING_GLYPHS = ("⏺", "⎿", "☐", "☒")
MID_SENTENCE_CONNECTORS = (" the ", " and ", " with ", " for ")
STRUCTURAL_PREFIXES = ("Chapter ", "Section ", "Part ")

_HEADING_STYLE = re.compile(r"^heading", re.IGNORECASE)

# (numbering level, heading style level) -> reconstructed number.
_NUMBERING_BY_LEVELS = {
    (0, 1): "1",
    (1, 2): "1.1",
    (2, 3): "1.1.1",
    (3, 4): "1.1.1.1",
}
_NUMBERING_BY_STYLE_LEVEL = {1: "1", 2: "1.1", 3: "1.1.1"}
_DEEPEST_STYLE_NUMBER = "1.1.1.1"


@dataclass(slots=True)
class HeadingMatch:
    """Classifier verdict for a heading paragraph.

    ``auto_number`` is set when the heading came from a heading style but no
    number could be read from the text or the numbering metadata; the
    assembler then assigns one from the document's counters.
    """

    level: int
    text: str
    number: Optional[str] = None
    auto_number: bool = False


def heading_level_from_style(style_id: Optional[str]) -> Optional[int]:
    """``Heading3`` -> 3, ``heading`` -> 1, anything else -> None."""
    if not style_id or not _HEADING_STYLE.match(style_id):
        return None
    last = style_id[-1]
    if last.isdigit():
        return min(max(int(last), 1), MAX_HEADING_LEVEL)
    return 1


def reconstruct_heading_number(numbering_level: int, heading_level: int) -> str:
    """Approximate the number Word would display for auto-numbered headings."""
    number = _NUMBERING_BY_LEVELS.get((numbering_level, heading_level))
    if number is not None:
        return number
    return _NUMBERING_BY_STYLE_LEVEL.get(heading_level, _DEEPEST_STYLE_NUMBER)


def level_from_length(text: str) -> int:
    """Shorter text sits higher in the outline."""
    length = byte_length(text)
    if length < LEVEL_ONE_MAX_BYTES:
        return 1
    if length < LEVEL_TWO_MAX_BYTES:
        return 2
    return 3


# ----------------------------------------------------------------------
# Text heuristics, used only when the paragraph has no heading style.

def _rejects_heading(text: str) -> bool:
    return (
        byte_length(text) >= MAX_HEADING_BYTES
        or "\n" in text
        or is_list_item_like(text)
        or is_sentence_like(text)
        or text.startswith(NON_HEADING_GLYPHS)
        or any(connector in text for connector in MID_SENTENCE_CONNECTORS)
    )


def _is_short_bold(text: str, formatting: TextFormatting) -> bool:
    return (
        formatting.bold
        and BOLD_HEADING_MIN_BYTES < byte_length(text) < BOLD_HEADING_MAX_BYTES
        and not text.endswith((".", ",", ";", ":"))
    )


def _is_caps_char(char: str) -> bool:
    return (
        char.isupper()
        or char.isspace()
        or char.isnumeric()
        or (char.isascii() and char in string.punctuation)
    )


def _is_all_caps(text: str, formatting: TextFormatting) -> bool:
    return (
        CAPS_HEADING_MIN_BYTES < byte_length(text) < CAPS_HEADING_MAX_BYTES
        and all(_is_caps_char(char) for char in text)
    )


def _has_structural_prefix(text: str, formatting: TextFormatting) -> bool:
    return text.startswith(STRUCTURAL_PREFIXES)


def _is_title_phrase(text: str, formatting: TextFormatting) -> bool:
    if not PHRASE_HEADING_MIN_BYTES < byte_length(text) < PHRASE_HEADING_MAX_BYTES:
        return False
    if text.endswith(".") or any(mark in text for mark in (",", "(", ":")):
        return False
    words = text.split()
    if not PHRASE_MIN_WORDS <= len(words) <= PHRASE_MAX_WORDS:
        return False
    has_meaningful_word = any(
        byte_length(word) >= MEANINGFUL_WORD_MIN_BYTES and word.isalpha() for word in words
    )
    return has_meaningful_word and text[0].isupper()


HeadingRule = Tuple[Callable[[str, TextFormatting], bool], Callable[[str], int]]

TEXT_HEADING_RULES: Sequence[HeadingRule] = (
    (_is_short_bold, level_from_length),
    (_is_all_caps, lambda text: 1),
    (_has_structural_prefix, level_from_length),
    (_is_title_phrase, level_from_length),
)


def heading_level_from_text(text: str, formatting: TextFormatting) -> Optional[int]:
    """Guess a heading level for unstyled text, or None when it reads as body text."""
    text = text.strip()
    if _rejects_heading(text):
        return None
    for predicate, level_for in TEXT_HEADING_RULES:
        if predicate(text, formatting):
            return level_for(text)
    return None


class HeadingClassifier:
    """Applies the heading rules to one paragraph at a time, first match wins."""

    def classify(
        self,
        text: str,
        formatting: TextFormatting,
        style_id: Optional[str] = None,
        numbering: Optional[NumberingInfo] = None,
    ) -> Optional[HeadingMatch]:
        style_level = heading_level_from_style(style_id)
        if style_level is None:
            level = heading_level_from_text(text, formatting)
            if level is None:
                return None
            return HeadingMatch(level=level, text=text)
        return self._classify_styled(text, style_level, numbering)

    def _classify_styled(
        self,
        text: str,
        style_level: int,
        numbering: Optional[NumberingInfo],
    ) -> HeadingMatch:
        manual = match_manual_numbering(text)
        if manual is not None:
            number, clean_text = manual
            return HeadingMatch(level=style_level, text=clean_text, number=number)

        if numbering is not None and numbering.num_id is not None:
            number = reconstruct_heading_number(numbering.level or 0, style_level)
            return HeadingMatch(level=style_level, text=text, number=number)

        return HeadingMatch(level=style_level, text=text, auto_number=True)

"""List item detection and grouping of consecutive items into list blocks."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from docx_structure.model.document_model import ListBlock, ListItem, Paragraph, TextFormatting
from docx_structure.model.elements import NumberingInfo
from docx_structure.utils.text_heuristics import (
    BULLET_PREFIXES,
    is_lettered_marker,
    is_list_item_like,
    starts_with_digit,
)

# Word's default mixed list: bullets at the top, letters and roman numerals below.
MIXED_LIST_NUM_ID = 1
SPACES_PER_LIST_LEVEL = 2

ORDERED_MARKERS = {
    0: "1. ",
    1: "a) ",
    2: "i. ",
    3: "A. ",
    4: "I. ",
}
UNORDERED_MARKER = "* "


@dataclass(slots=True)
class PendingParagraph:
    """Body paragraph waiting for the grouping pass.

    ``preformatted`` marks items already rendered from numbering metadata;
    the text detector must not look at them again.
    """

    text: str
    formatting: TextFormatting = field(default_factory=TextFormatting)
    indent: int = 0
    preformatted: bool = False

    def to_paragraph(self) -> Paragraph:
        return Paragraph(text=self.text, formatting=self.formatting)


def is_ordered_numbering(numbering: NumberingInfo) -> bool:
    if numbering.num_id is None:
        return False
    level = numbering.level or 0
    if numbering.num_id != MIXED_LIST_NUM_ID:
        return True
    if level == 0:
        return False
    if level in (1, 2):
        return True
    return level % 2 == 1


def list_marker(level: int, ordered: bool) -> str:
    if not ordered:
        return UNORDERED_MARKER
    return ORDERED_MARKERS.get(level, f"{level + 1}. ")


def render_numbered_item(text: str, numbering: NumberingInfo) -> str:
    """Render an automatically numbered paragraph with indent and marker."""
    level = numbering.level or 0
    indent = " " * (SPACES_PER_LIST_LEVEL * level)
    return f"{indent}{list_marker(level, is_ordered_numbering(numbering))}{text.strip()}"


def list_level_from_indent(leading_spaces: int) -> int:
    return leading_spaces // SPACES_PER_LIST_LEVEL


def clean_list_item_text(text: str) -> str:
    """Remove the leading bullet, number or letter marker of a list item."""
    text = text.strip()

    if text.startswith(BULLET_PREFIXES):
        return text[2:].strip()

    prefix, dot, rest = text.partition(".")
    if dot and prefix.isascii() and prefix.isdigit():
        return rest.strip()

    if is_lettered_marker(text):
        return text[2:].strip()

    return text


class ListAccumulator:
    """Collects consecutive list items until the ordering changes or a non-item arrives."""

    def __init__(self) -> None:
        self._items: List[ListItem] = []
        self._ordered = False

    def add(self, item: ListItem, ordered: bool) -> Optional[ListBlock]:
        """Append an item; returns the previous block when the ordering switched."""
        flushed = None
        if self._items and ordered != self._ordered:
            flushed = self.flush()
        self._ordered = ordered
        self._items.append(item)
        return flushed

    def flush(self) -> Optional[ListBlock]:
        if not self._items:
            return None
        block = ListBlock(items=self._items, ordered=self._ordered)
        self._items = []
        return block


def group_list_items(elements: Iterable[object]) -> List[object]:
    """Merge runs of list-like paragraphs into ``ListBlock`` elements.

    Source order is preserved; anything that is not an untagged list-like
    paragraph closes the open block first.
    """
    result: List[object] = []
    accumulator = ListAccumulator()

    for element in elements:
        if (
            isinstance(element, PendingParagraph)
            and not element.preformatted
            and is_list_item_like(element.text)
        ):
            item = ListItem(
                text=clean_list_item_text(element.text),
                level=list_level_from_indent(element.indent),
            )
            flushed = accumulator.add(item, ordered=starts_with_digit(element.text.strip()))
            if flushed is not None:
                result.append(flushed)
            continue

        flushed = accumulator.flush()
        if flushed is not None:
            result.append(flushed)
        result.append(element)

    flushed = accumulator.flush()
    if flushed is not None:
        result.append(flushed)
    return result


def clear_list_tags(elements: Iterable[object]) -> List[object]:
    """Turn every pending paragraph into a plain ``Paragraph``, dropping its tag."""
    return [
        element.to_paragraph() if isinstance(element, PendingParagraph) else element
        for element in elements
    ]

"""Table-of-contents view built from the headings of a document."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from docx_structure.model.document_model import Document, Heading


@dataclass(slots=True)
class OutlineItem:
    title: str
    level: int
    element_index: int


def generate_outline(document: Document) -> List[OutlineItem]:
    """Pair each heading's number and text, keeping the element position."""
    outline: List[OutlineItem] = []
    for index, element in enumerate(document.elements):
        if not isinstance(element, Heading):
            continue
        title = f"{element.number} {element.text}" if element.number else element.text
        outline.append(OutlineItem(title=title, level=element.level, element_index=index))
    return outline

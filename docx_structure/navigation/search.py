"""Case-insensitive text search over a reconstructed document."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from docx_structure.model.document_model import (
    Document,
    DocumentElement,
    Heading,
    Image,
    ListBlock,
    Paragraph,
    Table,
)
from docx_structure.utils.unicode_text import grapheme_span, truncate_graphemes

PREVIEW_GRAPHEMES = 77
ELLIPSIS = "..."


@dataclass(slots=True)
class SearchResult:
    """A match inside one element; ``start``/``end`` are grapheme offsets into ``text``."""

    element_index: int
    text: str
    start: int
    end: int

    def preview(self, max_graphemes: int = PREVIEW_GRAPHEMES) -> str:
        """Result text cut on a grapheme boundary, never inside a character."""
        return truncate_graphemes(self.text, max_graphemes, ELLIPSIS)


def searchable_texts(element: DocumentElement) -> Iterator[str]:
    """Yield every piece of text of an element that search should look at."""
    if isinstance(element, (Heading, Paragraph)):
        yield element.text
    elif isinstance(element, ListBlock):
        for item in element.items:
            yield item.text
    elif isinstance(element, Table):
        for header in element.table.headers:
            yield header.content
        for row in element.table.rows:
            for cell in row:
                yield cell.content
    elif isinstance(element, Image):
        yield element.description


def search_document(document: Document, query: str) -> List[SearchResult]:
    """Find ``query`` in headings, paragraphs, list items, table cells and image descriptions."""
    results: List[SearchResult] = []
    if not query:
        return results

    for element_index, element in enumerate(document.elements):
        for text in searchable_texts(element):
            span = grapheme_span(text, query)
            if span is not None:
                results.append(SearchResult(element_index, text, *span))
    return results

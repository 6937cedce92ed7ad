"""Reconstructed, semantically typed document tree handed to downstream consumers."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

WORDS_PER_PAGE = 250


class TextAlignment(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"


class CellDataType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    DATE = "date"
    BOOLEAN = "boolean"
    EMPTY = "empty"

    @property
    def is_numeric(self) -> bool:
        return self in (CellDataType.NUMBER, CellDataType.CURRENCY, CellDataType.PERCENTAGE)


@dataclass(slots=True)
class TextFormatting:
    """Inline formatting; a paragraph carries exactly one of these."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    font_size: Optional[float] = None
    color: Optional[str] = None


@dataclass(slots=True)
class Heading:
    level: int
    text: str
    number: Optional[str] = None


@dataclass(slots=True)
class Paragraph:
    text: str
    formatting: TextFormatting = field(default_factory=TextFormatting)


@dataclass(slots=True)
class ListItem:
    text: str
    level: int = 0


@dataclass(slots=True)
class ListBlock:
    """Run of consecutive list items sharing one ordering."""

    items: List[ListItem]
    ordered: bool


@dataclass(slots=True)
class TableCell:
    content: str
    alignment: TextAlignment = TextAlignment.LEFT
    formatting: TextFormatting = field(default_factory=TextFormatting)
    data_type: CellDataType = CellDataType.TEXT


@dataclass(slots=True)
class TableMetadata:
    column_count: int
    row_count: int
    has_headers: bool
    column_widths: List[int] = field(default_factory=list)
    column_alignments: List[TextAlignment] = field(default_factory=list)
    title: Optional[str] = None


@dataclass(slots=True)
class TableData:
    headers: List[TableCell]
    rows: List[List[TableCell]]
    metadata: TableMetadata

    def column_width(self, column_index: int) -> int:
        """Return the computed width of a column, or 10 for unknown columns."""
        if 0 <= column_index < len(self.metadata.column_widths):
            return self.metadata.column_widths[column_index]
        return 10

    def column_alignment(self, column_index: int) -> TextAlignment:
        if 0 <= column_index < len(self.metadata.column_alignments):
            return self.metadata.column_alignments[column_index]
        return TextAlignment.LEFT


@dataclass(slots=True)
class Table:
    table: TableData


@dataclass(slots=True)
class Image:
    """Picture placeholder produced by an external image pipeline; passed through untouched."""

    description: str
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(slots=True)
class PageBreak:
    pass


DocumentElement = Heading | Paragraph | ListBlock | Table | Image | PageBreak


def estimate_page_count(word_count: int) -> int:
    """Rough page estimate assuming ``WORDS_PER_PAGE`` words per page."""
    return math.ceil(word_count / WORDS_PER_PAGE)


@dataclass(slots=True)
class DocumentMetadata:
    file_path: str
    file_size: int
    word_count: int
    page_count: int
    created: Optional[str] = None
    modified: Optional[str] = None
    author: Optional[str] = None


@dataclass(slots=True)
class Document:
    """Flattened document representation that consumers read."""

    title: str
    metadata: DocumentMetadata
    elements: Sequence[DocumentElement] = field(default_factory=list)

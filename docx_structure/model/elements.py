"""In-memory representation of decoded document blocks, prior to reconstruction."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class RunFragment:
    """Represents a contiguous run of text with associated inline styling.

    ``text`` already carries ``\\t`` for tabs and ``\\n`` for line breaks.
    ``drawing`` marks a run that embeds a picture instead of text.
    """

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: Optional[str] = None
    font_size: Optional[float] = None
    drawing: bool = False


@dataclass(slots=True)
class NumberingInfo:
    """Automatic numbering reference (``w:numPr``) applied to a paragraph."""

    num_id: Optional[int]
    level: Optional[int] = None


@dataclass(slots=True)
class ParagraphElement:
    """High-level block element for paragraphs in the document body."""

    runs: List[RunFragment]
    style_id: Optional[str] = None
    numbering: Optional[NumberingInfo] = None


@dataclass(slots=True)
class CellElement:
    """Single table cell container."""

    content: List["BlockElement"] = field(default_factory=list)

    @property
    def paragraphs(self) -> List[ParagraphElement]:
        return [block for block in self.content if isinstance(block, ParagraphElement)]


@dataclass(slots=True)
class TableRow:
    """Row with a sequence of cells."""

    cells: List[CellElement]


@dataclass(slots=True)
class TableElement:
    """Tabular structure extracted from Word tables."""

    rows: List[TableRow]
    style_id: Optional[str] = None


BlockElement = ParagraphElement | TableElement

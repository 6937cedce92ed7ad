"""Convert decoded table rows into typed tables with headers, widths and alignments."""
from __future__ import annotations

from typing import List, Optional, Sequence

from docx_structure.model.document_model import (
    CellDataType,
    TableCell,
    TableData,
    TableMetadata,
    TextAlignment,
    TextFormatting,
)
from docx_structure.model.elements import CellElement, TableElement
from docx_structure.utils.logger import get_logger
from docx_structure.utils.text_heuristics import byte_length
from docx_structure.utils.text_normalizer import TextNormalizer
from docx_structure.utils.unicode_text import grapheme_count

LOGGER = get_logger(__name__)

HEADER_MAX_AVERAGE_LENGTH = 50
HEADER_MAX_WORDS = 3
HEADER_KEYWORDS = ("name", "date", "amount", "type", "status", "id", "description", "count")
NUMERIC_COLUMN_RATIO = 0.7
MIN_COLUMN_WIDTH = 3

CURRENCY_SYMBOLS = ("$", "€", "£")
BOOLEAN_WORDS = frozenset({"true", "false", "yes", "no", "y", "n"})
DATE_SEPARATORS = ("/", "-")


def detect_cell_data_type(content: str) -> CellDataType:
    """Classify cell content; the first matching type wins."""
    trimmed = content.strip()

    if not trimmed:
        return CellDataType.EMPTY
    if trimmed.startswith(CURRENCY_SYMBOLS):
        return CellDataType.CURRENCY
    if trimmed.endswith("%"):
        return CellDataType.PERCENTAGE
    if trimmed.lower() in BOOLEAN_WORDS:
        return CellDataType.BOOLEAN
    if _parses_as_float(trimmed.replace(",", "")):
        return CellDataType.NUMBER
    if _looks_like_date(trimmed):
        return CellDataType.DATE
    return CellDataType.TEXT


def _parses_as_float(value: str) -> bool:
    if "_" in value or not value.isascii():
        return False
    try:
        float(value)
    except ValueError:
        return False
    return True


def _looks_like_date(value: str) -> bool:
    if not any(separator in value for separator in DATE_SEPARATORS):
        return False
    parts = value.replace("/", "-").split("-")
    return len(parts) == 3 and all(part.isascii() and part.isdigit() for part in parts)


def default_alignment_for_type(data_type: CellDataType) -> TextAlignment:
    if data_type.is_numeric:
        return TextAlignment.RIGHT
    if data_type is CellDataType.BOOLEAN:
        return TextAlignment.CENTER
    return TextAlignment.LEFT


def make_cell(content: str, formatting: Optional[TextFormatting] = None) -> TableCell:
    """Build a typed cell with the default alignment for its data type."""
    data_type = detect_cell_data_type(content)
    cell = TableCell(content=content, alignment=default_alignment_for_type(data_type), data_type=data_type)
    if formatting is not None:
        cell.formatting = formatting
    return cell


def appears_to_be_header(row: Sequence[str]) -> bool:
    """Headers tend to be short phrases or contain typical column names."""
    if not row:
        return False
    average_length = sum(byte_length(cell) for cell in row) // len(row)
    if average_length > HEADER_MAX_AVERAGE_LENGTH:
        return False

    indicators = 0
    for cell in row:
        lowered = cell.lower()
        short_phrase = len(cell.split()) <= HEADER_MAX_WORDS and bool(cell.strip())
        if short_phrase or any(keyword in lowered for keyword in HEADER_KEYWORDS):
            indicators += 1
    return indicators > len(row) // 2


def calculate_column_widths(headers: Sequence[TableCell], rows: Sequence[Sequence[TableCell]]) -> List[int]:
    """Width per column in grapheme clusters, never below ``MIN_COLUMN_WIDTH``."""
    widths = [grapheme_count(header.content) for header in headers]
    for row in rows:
        for index, cell in enumerate(row[: len(widths)]):
            widths[index] = max(widths[index], grapheme_count(cell.content))
    return [max(width, MIN_COLUMN_WIDTH) for width in widths]


def determine_column_alignments(
    headers: Sequence[TableCell], rows: Sequence[Sequence[TableCell]]
) -> List[TextAlignment]:
    """Right-align columns whose data cells are mostly numeric."""
    alignments = []
    for column in range(len(headers)):
        cells = [row[column] for row in rows if column < len(row)]
        numeric = sum(1 for cell in cells if cell.data_type.is_numeric)
        if cells and numeric / len(cells) > NUMERIC_COLUMN_RATIO:
            alignments.append(TextAlignment.RIGHT)
        else:
            alignments.append(TextAlignment.LEFT)
    return alignments


def build_table_data(headers: List[TableCell], rows: List[List[TableCell]]) -> TableData:
    metadata = TableMetadata(
        column_count=len(headers),
        row_count=len(rows),
        has_headers=bool(headers),
        column_widths=calculate_column_widths(headers, rows),
        column_alignments=determine_column_alignments(headers, rows),
    )
    return TableData(headers=headers, rows=rows, metadata=metadata)


class TableSchemaInferencer:
    """Turns a decoded ``TableElement`` into ``TableData``."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self._normalizer = normalizer or TextNormalizer()

    def infer(self, table: TableElement) -> Optional[TableData]:
        """Return the typed table, or None when it has neither header nor data rows."""
        headers: List[TableCell] = []
        rows: List[List[TableCell]] = []
        first_row = True

        for row in table.rows:
            cells = [self._cell(cell) for cell in row.cells]
            if not cells:
                continue
            if first_row and appears_to_be_header([cell.content for cell in cells]):
                headers = cells
            else:
                rows.append(cells)
            first_row = False

        if not headers and rows:
            headers = rows.pop(0)

        if not headers and not rows:
            LOGGER.debug("Dropping table without content (%d raw rows)", len(table.rows))
            return None

        return build_table_data(headers, rows)

    def _cell(self, cell: CellElement) -> TableCell:
        runs = [run for paragraph in cell.paragraphs for run in paragraph.runs]
        text = ""
        for run in runs:
            piece = self._normalizer.run_text(run)
            if not piece:
                continue
            if text and not text[-1].isspace():
                text += " "
            text += piece
        return make_cell(text.strip(), self._normalizer.paragraph_formatting(runs))

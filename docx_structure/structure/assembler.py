"""Drive the reconstruction pass over decoded blocks and assemble the ``Document``."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence

from docx_structure.model.document_model import (
    Document,
    DocumentMetadata,
    Heading,
    Image,
    PageBreak,
    Table,
    estimate_page_count,
)
from docx_structure.model.elements import ParagraphElement, TableElement
from docx_structure.model.numbering_model import HeadingNumberTracker
from docx_structure.structure.heading_classifier import (
    HeadingClassifier,
    HeadingMatch,
    heading_level_from_style,
)
from docx_structure.structure.list_classifier import (
    PendingParagraph,
    clear_list_tags,
    group_list_items,
    render_numbered_item,
)
from docx_structure.structure.table_schema import TableSchemaInferencer
from docx_structure.utils.logger import get_logger
from docx_structure.utils.text_normalizer import NormalizedParagraph, TextNormalizer

LOGGER = get_logger(__name__)

DEFAULT_TITLE = "Untitled Document"


@dataclass(slots=True)
class AssemblyState:
    """Mutable state of a single conversion; never shared between documents."""

    headings: HeadingNumberTracker = field(default_factory=HeadingNumberTracker)
    elements: List[object] = field(default_factory=list)
    word_count: int = 0


ParagraphRule = Callable[[ParagraphElement, NormalizedParagraph, AssemblyState], Optional[object]]


class DocumentAssembler:
    """Builds a ``Document`` from an ordered stream of decoded blocks.

    Paragraphs go through the rules in ``paragraph_rules`` top to bottom and
    the first rule returning an element wins:

    1. heading style (with typed-in, metadata or automatic number)
    2. automatic list numbering metadata
    3. heading guessed from the text alone
    4. body paragraph (list detection by text happens when grouping)

    Heading style outranks list numbering on purpose: a numbered heading
    paragraph stays a ``Heading`` and takes its number from the numbering
    metadata rather than becoming a marker-prefixed list paragraph.
    """

    def __init__(
        self,
        normalizer: Optional[TextNormalizer] = None,
        heading_classifier: Optional[HeadingClassifier] = None,
        table_inferencer: Optional[TableSchemaInferencer] = None,
    ) -> None:
        self._normalizer = normalizer or TextNormalizer()
        self._headings = heading_classifier or HeadingClassifier()
        self._tables = table_inferencer or TableSchemaInferencer(self._normalizer)
        self.paragraph_rules: Sequence[ParagraphRule] = (
            self._styled_heading,
            self._numbered_list_item,
            self._text_heading,
            self._body_paragraph,
        )

    def assemble(
        self,
        blocks: Iterable[object],
        title: str = DEFAULT_TITLE,
        file_path: str = "",
        file_size: int = 0,
    ) -> Document:
        state = AssemblyState()

        for block in blocks:
            if isinstance(block, ParagraphElement):
                self._add_paragraph(block, state)
            elif isinstance(block, TableElement):
                self._add_table(block, state)
            elif isinstance(block, (Image, PageBreak)):
                state.elements.append(block)
            else:
                LOGGER.debug("Skipping unsupported block: %s", type(block).__name__)

        elements = clear_list_tags(group_list_items(state.elements))

        metadata = DocumentMetadata(
            file_path=file_path,
            file_size=file_size,
            word_count=state.word_count,
            page_count=estimate_page_count(state.word_count),
        )
        LOGGER.info("Assembled %d elements (%d words) for %s", len(elements), state.word_count, title)
        return Document(title=title, metadata=metadata, elements=elements)

    # ------------------------------------------------------------------
    def _add_paragraph(self, paragraph: ParagraphElement, state: AssemblyState) -> None:
        normalized = self._normalizer.normalize_paragraph(paragraph)
        if normalized is None:
            return
        state.word_count += normalized.word_count

        for rule in self.paragraph_rules:
            element = rule(paragraph, normalized, state)
            if element is not None:
                state.elements.append(element)
                return

    def _add_table(self, table: TableElement, state: AssemblyState) -> None:
        data = self._tables.infer(table)
        if data is None:
            return
        state.elements.append(Table(table=data))

    # ------------------------------------------------------------------
    # Paragraph rules

    def _styled_heading(
        self, paragraph: ParagraphElement, normalized: NormalizedParagraph, state: AssemblyState
    ) -> Optional[Heading]:
        if heading_level_from_style(paragraph.style_id) is None:
            return None
        match = self._headings.classify(
            normalized.text, normalized.formatting, paragraph.style_id, paragraph.numbering
        )
        return self._heading(match, state) if match is not None else None

    def _numbered_list_item(
        self, paragraph: ParagraphElement, normalized: NormalizedParagraph, state: AssemblyState
    ) -> Optional[PendingParagraph]:
        if paragraph.numbering is None:
            return None
        return PendingParagraph(
            text=render_numbered_item(normalized.text, paragraph.numbering),
            formatting=normalized.formatting,
            preformatted=True,
        )

    def _text_heading(
        self, paragraph: ParagraphElement, normalized: NormalizedParagraph, state: AssemblyState
    ) -> Optional[Heading]:
        match = self._headings.classify(normalized.text, normalized.formatting)
        return self._heading(match, state) if match is not None else None

    def _body_paragraph(
        self, paragraph: ParagraphElement, normalized: NormalizedParagraph, state: AssemblyState
    ) -> PendingParagraph:
        return PendingParagraph(
            text=normalized.text,
            formatting=normalized.formatting,
            indent=normalized.leading_spaces,
        )

    def _heading(self, match: HeadingMatch, state: AssemblyState) -> Heading:
        number = match.number
        if match.auto_number:
            number = state.headings.next_number(match.level)
        return Heading(level=match.level, text=match.text, number=number)


def assemble_document(blocks: Iterable[object], title: str = DEFAULT_TITLE) -> Document:
    """Convenience wrapper running a fresh ``DocumentAssembler`` over ``blocks``."""
    return DocumentAssembler().assemble(blocks, title=title)

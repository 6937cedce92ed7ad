"""
Text normalization utilities for decoded paragraphs.

Flattens a paragraph's runs into one trimmed string and one formatting
record, and counts the words it contributes to the document.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from docx_structure.model.document_model import TextFormatting
from docx_structure.model.elements import ParagraphElement, RunFragment


DRAWING_PLACEHOLDER = "[Image]"


@dataclass(slots=True)
class NormalizedParagraph:
    """Flattened paragraph ready for classification."""

    text: str
    raw_text: str
    formatting: TextFormatting = field(default_factory=TextFormatting)

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    @property
    def leading_spaces(self) -> int:
        return len(self.raw_text) - len(self.raw_text.lstrip())


class TextNormalizer:
    """Normalizes run content of decoded paragraphs."""

    def normalize_paragraph(self, paragraph: ParagraphElement) -> Optional[NormalizedParagraph]:
        """Return the flattened paragraph, or None when it holds no visible text."""
        raw_text = self.join_runs(paragraph.runs)
        text = raw_text.strip()
        if not text:
            return None
        return NormalizedParagraph(
            text=text,
            raw_text=raw_text,
            formatting=self.paragraph_formatting(paragraph.runs),
        )

    def join_runs(self, runs: Iterable[RunFragment]) -> str:
        """Concatenate run texts, replacing drawings with a placeholder token."""
        return "".join(self.run_text(run) for run in runs)

    def run_text(self, run: RunFragment) -> str:
        if run.drawing:
            return run.text + DRAWING_PLACEHOLDER
        return run.text

    def paragraph_formatting(self, runs: Iterable[RunFragment]) -> TextFormatting:
        """Pick a single formatting record for a sequence of runs.

        Each run overwrites the current record until one carrying bold or
        italic is reached; that one sticks and later runs are ignored.
        """
        formatting = TextFormatting()
        for run in runs:
            if formatting.bold or formatting.italic:
                break
            formatting = run_formatting(run)
        return formatting


def run_formatting(run: RunFragment) -> TextFormatting:
    return TextFormatting(
        bold=run.bold,
        italic=run.italic,
        underline=run.underline,
        font_size=run.font_size,
        color=run.color,
    )

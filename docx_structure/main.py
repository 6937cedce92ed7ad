"""Entry-point for the DOCX structure reconstruction pipeline."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from docx_structure.model.document_model import Document
from docx_structure.parser.docx_loader import DocxPackage
from docx_structure.parser.document_parser import DocumentParser
from docx_structure.structure.assembler import DEFAULT_TITLE, DocumentAssembler
from docx_structure.utils.debug import DebugDumper
from docx_structure.utils.logger import get_logger

LOGGER = get_logger(__name__)


def build_document(package: DocxPackage, title: str = DEFAULT_TITLE) -> Document:
    """Decode the package body and reconstruct its document tree."""
    blocks = DocumentParser(package).parse()
    return DocumentAssembler().assemble(
        blocks,
        title=title,
        file_path=package.source,
        file_size=package.size,
    )


def load_document(docx_file: str | Path, debug_dir: Optional[Path] = None) -> Document:
    """Load a .docx file into a ``Document``.

    Raises ``FileNotFoundError`` for a missing path and ``DocumentLoadError``
    when the container cannot be decoded; nothing partial is returned.
    """
    docx_path = Path(docx_file).resolve()
    if not docx_path.exists():
        raise FileNotFoundError(f"DOCX file not found: {docx_path}")

    LOGGER.info("Building document for %s", docx_path.name)
    package = DocxPackage.load(docx_path)
    document = build_document(package, title=docx_path.stem or DEFAULT_TITLE)

    if debug_dir is not None:
        DebugDumper(Path(debug_dir)).dump(document)
    return document

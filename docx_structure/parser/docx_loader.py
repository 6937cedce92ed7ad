"""DOCX package loader responsible for unpacking the XML parts the core reads."""
from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional
from xml.etree import ElementTree as ET

from docx_structure.errors import DocumentLoadError
from docx_structure.utils.logger import get_logger
from docx_structure.utils.xml_utils import parse_xml

LOGGER = get_logger(__name__)

DOCUMENT_XML_PATH = "word/document.xml"


@dataclass(slots=True)
class DocxPackage:
    """Container for the XML parts extracted from a DOCX archive."""

    raw_parts: Mapping[str, bytes]
    source: str = ""
    size: int = 0
    xml_cache: Dict[str, ET.ElementTree] = field(default_factory=dict)

    @classmethod
    def load(cls, docx_path: Path) -> "DocxPackage":
        """Open a DOCX archive from disk."""
        docx_path = Path(docx_path)
        try:
            data = docx_path.read_bytes()
        except OSError as exc:
            raise DocumentLoadError(f"Cannot read {docx_path}: {exc}") from exc
        return cls.from_bytes(data, source=str(docx_path))

    @classmethod
    def from_bytes(cls, data: bytes, source: str = "<memory>") -> "DocxPackage":
        """Open a DOCX archive held in memory."""
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as docx_zip:
                parts = {name: docx_zip.read(name) for name in docx_zip.namelist()}
        except (zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
            raise DocumentLoadError(f"{source} is not a valid DOCX archive: {exc}") from exc

        LOGGER.debug("Loaded %d parts from %s", len(parts), source)
        package = cls(raw_parts=parts, source=source, size=len(data))
        package.require_document_xml()
        return package

    # ------------------------------------------------------------------
    # Public helpers
    def require_document_xml(self) -> ET.ElementTree:
        tree = self.get_xml_part(DOCUMENT_XML_PATH)
        if tree is None:
            raise DocumentLoadError(f"Required DOCX part missing: {DOCUMENT_XML_PATH}")
        return tree

    def get_xml_part(self, name: str) -> Optional[ET.ElementTree]:
        if name in self.xml_cache:
            return self.xml_cache[name]
        data = self.raw_parts.get(name)
        if data is None:
            return None
        try:
            tree = parse_xml(data)
        except ET.ParseError as exc:
            raise DocumentLoadError(f"Malformed XML in {name}: {exc}") from exc
        self.xml_cache[name] = tree
        return tree

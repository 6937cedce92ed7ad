"""Parse document.xml into decoded content blocks."""
from __future__ import annotations

from typing import List, Optional
from xml.etree import ElementTree as ET

from docx_structure.model.elements import (
    BlockElement,
    CellElement,
    NumberingInfo,
    ParagraphElement,
    RunFragment,
    TableElement,
    TableRow,
)
from docx_structure.parser.docx_loader import DocxPackage
from docx_structure.utils.logger import get_logger
from docx_structure.utils.xml_utils import Namespaces, qualify, strip_namespace

LOGGER = get_logger(__name__)

_FALSE_VALUES = {"0", "false", "off"}
_RUN_CONTAINERS = {"hyperlink", "ins", "smartTag", "fldSimple"}


class DocumentParser:
    """Transforms Word body XML into decoded block elements."""

    def __init__(self, package: DocxPackage) -> None:
        self._package = package

    def parse(self) -> List[BlockElement]:
        """Parse the document body into paragraph and table blocks, in order."""
        root = self._package.require_document_xml().getroot()
        body = root.find("w:body", Namespaces.WORD)
        if body is None:
            LOGGER.warning("document.xml missing body element")
            return []
        return self._parse_blocks(body)

    def _parse_blocks(self, container: ET.Element) -> List[BlockElement]:
        blocks: List[BlockElement] = []
        for child in list(container):
            tag = strip_namespace(child.tag)
            if tag == "p":
                blocks.append(self._parse_paragraph(child))
            elif tag == "tbl":
                blocks.append(self._parse_table(child))
            elif tag == "sdt":
                content = child.find("w:sdtContent", Namespaces.WORD)
                if content is not None:
                    blocks.extend(self._parse_blocks(content))
            elif tag not in ("sectPr", "tcPr", "bookmarkStart", "bookmarkEnd"):
                LOGGER.debug("Skipping unsupported element: %s", tag)
        return blocks

    def _parse_paragraph(self, paragraph_el: ET.Element) -> ParagraphElement:
        return ParagraphElement(
            runs=self._collect_runs(paragraph_el),
            style_id=self._get_attr(paragraph_el.find("w:pPr/w:pStyle", Namespaces.WORD), "w:val"),
            numbering=self._extract_numbering_info(paragraph_el),
        )

    def _collect_runs(self, container: ET.Element) -> List[RunFragment]:
        runs: List[RunFragment] = []
        for child in list(container):
            tag = strip_namespace(child.tag)
            if tag == "r":
                runs.extend(self._parse_run(child))
            elif tag in _RUN_CONTAINERS:
                runs.extend(self._collect_runs(child))
            elif tag == "del":
                # Tracked deletions are not part of the visible text.
                continue
        return runs

    def _parse_table(self, table_el: ET.Element) -> TableElement:
        rows: List[TableRow] = []
        for row_el in table_el.findall("w:tr", Namespaces.WORD):
            cells = [
                CellElement(content=self._parse_blocks(cell_el))
                for cell_el in row_el.findall("w:tc", Namespaces.WORD)
            ]
            rows.append(TableRow(cells=cells))
        style_id = self._get_attr(table_el.find("w:tblPr/w:tblStyle", Namespaces.WORD), "w:val")
        return TableElement(rows=rows, style_id=style_id)

    # ------------------------------------------------------------------
    def _parse_run(self, run_el: ET.Element) -> List[RunFragment]:
        """Parse a run element into text fragments; drawings get their own fragment."""
        fragments: List[RunFragment] = []
        props = run_el.find("w:rPr", Namespaces.WORD)
        current_text = ""

        for child in list(run_el):
            tag = strip_namespace(child.tag)
            if tag == "t":
                current_text += child.text or ""
            elif tag == "tab":
                current_text += "\t"
            elif tag in ("br", "cr"):
                current_text += "\n"
            elif tag == "drawing":
                if current_text:
                    fragments.append(self._fragment(current_text, props))
                    current_text = ""
                fragments.append(self._fragment("", props, drawing=True))
            elif tag not in ("rPr", "lastRenderedPageBreak"):
                LOGGER.debug("Skipping run child element: %s", tag)

        if current_text or not fragments:
            fragments.append(self._fragment(current_text, props))
        return fragments

    def _fragment(self, text: str, props: Optional[ET.Element], drawing: bool = False) -> RunFragment:
        return RunFragment(
            text=text,
            bold=self._is_on(props, "w:b"),
            italic=self._is_on(props, "w:i"),
            underline=self._is_underlined(props),
            color=self._get_child_attr(props, "w:color", "w:val"),
            font_size=self._font_size(props),
            drawing=drawing,
        )

    def _extract_numbering_info(self, paragraph_el: ET.Element) -> Optional[NumberingInfo]:
        num_pr = paragraph_el.find("w:pPr/w:numPr", Namespaces.WORD)
        if num_pr is None:
            return None
        return NumberingInfo(
            num_id=self._get_int(self._get_child_attr(num_pr, "w:numId", "w:val")),
            level=self._get_int(self._get_child_attr(num_pr, "w:ilvl", "w:val")),
        )

    # ------------------------------------------------------------------
    # Property helpers
    def _is_on(self, props: Optional[ET.Element], child_name: str) -> bool:
        if props is None:
            return False
        toggle = props.find(child_name, Namespaces.WORD)
        if toggle is None:
            return False
        value = self._get_attr(toggle, "w:val")
        return value is None or value.lower() not in _FALSE_VALUES

    def _is_underlined(self, props: Optional[ET.Element]) -> bool:
        if props is None or props.find("w:u", Namespaces.WORD) is None:
            return False
        return self._get_child_attr(props, "w:u", "w:val") != "none"

    def _font_size(self, props: Optional[ET.Element]) -> Optional[float]:
        half_points = self._get_int(self._get_child_attr(props, "w:sz", "w:val"))
        if half_points is None:
            return None
        return half_points / 2

    def _get_child_attr(self, element: Optional[ET.Element], child_name: str, attr_name: str) -> Optional[str]:
        if element is None:
            return None
        return self._get_attr(element.find(child_name, Namespaces.WORD), attr_name)

    def _get_attr(self, element: Optional[ET.Element], attr_name: str) -> Optional[str]:
        if element is None:
            return None
        return element.attrib.get(qualify(attr_name))

    def _get_int(self, value: Optional[str]) -> Optional[int]:
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

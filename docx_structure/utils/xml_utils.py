"""Helper functions to work with XML namespaces and parsing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict
from xml.etree import ElementTree as ET


@dataclass(frozen=True)
class Namespaces:
    """Common OpenXML namespace prefixes used across parsers."""

    WORD: Dict[str, str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:  # pragma: no cover
        raise RuntimeError("Namespaces should not be instantiated")


Namespaces.WORD = {  # type: ignore[attr-defined]
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
}


def parse_xml(data: bytes) -> ET.ElementTree:
    """Parse XML from raw bytes with sane defaults."""
    return ET.ElementTree(ET.fromstring(data))


def strip_namespace(tag: str) -> str:
    """``{uri}local`` -> ``local``."""
    return tag.split("}", 1)[-1]


def qualify(attr_name: str) -> str:
    """``w:val`` -> ``{uri}val`` using the WordprocessingML namespace map."""
    prefix, local = attr_name.split(":", 1)
    return f"{{{Namespaces.WORD[prefix]}}}{local}"

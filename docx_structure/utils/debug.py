"""Helpers to persist reconstructed documents for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from docx_structure.model.document_model import Document


class DebugDumper:
    """Writes intermediate artifacts onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, document: Document) -> Path:
        """Persist the document as JSON for offline analysis."""
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / "document.json"
        payload = self._serialize(document)
        target.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        return target

    def _serialize(self, value: Any) -> Any:
        if is_dataclass(value):
            data = {"kind": type(value).__name__}
            data.update({f.name: self._serialize(getattr(value, f.name)) for f in fields(value)})
            return data
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value

"""Exceptions raised while loading documents."""


class DocxStructureError(Exception):
    """Base exception for the package."""
    pass


class DocumentLoadError(DocxStructureError):
    """The container could not be decoded; no partial document is produced."""
    pass

from __future__ import annotations
from typing import Optional


class CatalogError(Exception):
    """Base class for every failure the intake pipeline reports."""


class DirectoryAccessError(CatalogError):
    """Intake directory missing or unreadable. Fatal: aborts the run before the catalog is saved."""


class ExtractionFailure(CatalogError):
    """The text-conversion collaborator failed for one file."""

    def __init__(self, path: str, detail: str, returncode: Optional[int] = None):
        self.path = path
        self.detail = detail
        self.returncode = returncode
        super().__init__(f"text extraction failed for {path}: {detail}")


class MalformedFilename(CatalogError):
    """File stem is not of the form <identifier>_<key>."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid filename format or path: {path!r}")


class SerializationError(CatalogError):
    """Catalog document could not be read or written."""

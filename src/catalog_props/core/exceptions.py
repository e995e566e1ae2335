"""Custom exception hierarchy for the aggregation run."""

from __future__ import annotations

from pathlib import Path


class CatalogPropsError(Exception):
    """Base error for catalog property aggregation."""


class MissingFieldError(CatalogPropsError):
    """Raised when a required JSON field is absent or not of the expected kind."""

    def __init__(self, field: str, owner: str | None = None) -> None:
        self.field = field
        self.owner = owner
        location = f" in {owner}" if owner else ""
        super().__init__(f"Missing required field `{field}`{location}")


class UnknownElementTypeError(CatalogPropsError):
    """Raised when no extractor is registered for an element type."""

    def __init__(self, element_type: str) -> None:
        self.element_type = element_type
        super().__init__(f"No extractor registered for element type {element_type!r}")


class FileAccessError(CatalogPropsError):
    """Raised when a discovered file cannot be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


class DocumentParseError(CatalogPropsError):
    """Raised when file text is not a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid item document {path}: {reason}")

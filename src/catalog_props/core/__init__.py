"""Shared core utilities for the catalog property aggregation."""

from .config import Settings, get_settings
from .exceptions import (
    CatalogPropsError,
    DocumentParseError,
    FileAccessError,
    MissingFieldError,
    UnknownElementTypeError,
)
from .logging import configure_logging
from .models import Aggregate, ItemPropertyMap, ItemRecord, Prop

__all__ = [
    "Settings",
    "Aggregate",
    "ItemPropertyMap",
    "ItemRecord",
    "Prop",
    "CatalogPropsError",
    "MissingFieldError",
    "UnknownElementTypeError",
    "FileAccessError",
    "DocumentParseError",
    "get_settings",
    "configure_logging",
]

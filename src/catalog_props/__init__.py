"""Catalog item property aggregation."""

from .core import (
    Aggregate,
    CatalogPropsError,
    ItemPropertyMap,
    Prop,
    Settings,
    configure_logging,
    get_settings,
)
from .discovery import collect_item_files
from .extraction import process_document, resolve_text
from .workflow import aggregate_items, run_aggregation, serialize_aggregate

__all__ = [
    "Aggregate",
    "CatalogPropsError",
    "ItemPropertyMap",
    "Prop",
    "Settings",
    "aggregate_items",
    "collect_item_files",
    "configure_logging",
    "get_settings",
    "process_document",
    "resolve_text",
    "run_aggregation",
    "serialize_aggregate",
]

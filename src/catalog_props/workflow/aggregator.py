"""Aggregation of every item document under a root into one JSON object."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

from catalog_props.core.config import Settings, get_settings
from catalog_props.core.exceptions import CatalogPropsError, DocumentParseError, FileAccessError
from catalog_props.core.logging import get_logger
from catalog_props.core.models import Aggregate
from catalog_props.discovery import collect_item_files
from catalog_props.extraction.processor import process_document

LOGGER = get_logger(__name__)


def load_document(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(path, str(exc)) from exc
    try:
        payload = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(path, str(exc)) from exc
    if not isinstance(payload, dict):
        raise DocumentParseError(path, "top-level JSON value is not an object")
    return payload


def aggregate_items(root: Path, *, pattern: str = "*") -> Aggregate:
    """Process every file under ``root`` in name order into a single aggregate.

    A later file whose item name repeats an earlier one replaces it. Any
    failure aborts the whole run.
    """
    files = collect_item_files(root, pattern)
    aggregate: Aggregate = {}
    for path in files:
        LOGGER.info("aggregate.file_start", file=path.name)
        try:
            record = process_document(load_document(path), source=path)
        except CatalogPropsError as exc:
            exc.add_note(f"while processing {path}")
            raise
        if record.name in aggregate:
            LOGGER.warning("aggregate.duplicate_item", item=record.name, file=str(path))
        aggregate[record.name] = record.props
    LOGGER.info("aggregate.complete", file_count=len(files), item_count=len(aggregate))
    return aggregate


def serialize_aggregate(aggregate: Aggregate, *, indent: int | None = None) -> str:
    return json.dumps(aggregate, ensure_ascii=False, indent=indent)


def run_aggregation(settings: Settings | None = None) -> str:
    """Aggregate the configured root and return (and optionally store) the JSON text."""
    resolved = settings or get_settings()
    aggregate = aggregate_items(resolved.root_dir, pattern=resolved.file_pattern)
    output = serialize_aggregate(aggregate, indent=resolved.output_indent)
    if resolved.output_path is not None:
        resolved.output_path.parent.mkdir(parents=True, exist_ok=True)
        resolved.output_path.write_text(f"{output}\n", encoding="utf-8")
        LOGGER.info("aggregate.written", path=str(resolved.output_path))
    return output

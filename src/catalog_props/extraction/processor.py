"""Conversion of one item document into its merged property map."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from catalog_props.core.exceptions import CatalogPropsError, MissingFieldError
from catalog_props.core.logging import get_logger
from catalog_props.core.models import ItemRecord

from .extractors import extract_prop
from .merge import merge_prop
from .names import require_field, require_object, resolve_text

LOGGER = get_logger(__name__)


def process_document(document: Any, *, source: Path | None = None) -> ItemRecord:
    """Resolve the item name and fold every element of every info block into its props.

    Info blocks whose ``elements`` is absent or not an array are skipped.
    """
    payload = require_object(document, "document")
    name = resolve_text(require_field(payload, "name", owner="document"))
    info_blocks = require_field(payload, "infoBlocks", owner="document")
    if not isinstance(info_blocks, list):
        raise MissingFieldError("infoBlocks", "document")

    record = ItemRecord(name=name, source=source)
    source_name = source.name if source else None
    for block_index, info_block in enumerate(info_blocks):
        block = require_object(info_block, f"infoBlocks[{block_index}]")
        elements = block.get("elements")
        if not isinstance(elements, list):
            continue
        LOGGER.info(
            "processor.elements_found",
            file=source_name,
            block_index=block_index,
            element_count=len(elements),
        )
        for element_index, element in enumerate(elements):
            try:
                prop = extract_prop(element)
            except CatalogPropsError as exc:
                exc.add_note(f"at infoBlocks[{block_index}].elements[{element_index}]")
                raise
            merge_prop(record.props, prop)
    return record

"""Element extraction: name resolution, per-type extractors and property merging."""

from .extractors import EXTRACTORS, ElementType, PropExtractor, extract_prop, get_extractor
from .merge import merge_prop, merge_props
from .names import resolve_text
from .processor import process_document

__all__ = [
    "EXTRACTORS",
    "ElementType",
    "PropExtractor",
    "extract_prop",
    "get_extractor",
    "merge_prop",
    "merge_props",
    "process_document",
    "resolve_text",
]

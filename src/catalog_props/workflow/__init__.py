"""Workflow support utilities (aggregation and serialization)."""

from .aggregator import aggregate_items, load_document, run_aggregation, serialize_aggregate

__all__ = [
    "aggregate_items",
    "load_document",
    "run_aggregation",
    "serialize_aggregate",
]

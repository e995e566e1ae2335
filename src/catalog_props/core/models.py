"""Shared data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

ItemPropertyMap = dict[str, str]
Aggregate = dict[str, ItemPropertyMap]


@dataclass(slots=True, frozen=True)
class Prop:
    key: str
    value: str


@dataclass(slots=True)
class ItemRecord:
    name: str
    props: ItemPropertyMap = field(default_factory=dict)
    source: Path | None = None

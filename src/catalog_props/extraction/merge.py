"""Folding of extracted properties into an item's property map."""

from __future__ import annotations

from typing import Iterable

from catalog_props.core.constants import VALUE_SEPARATOR
from catalog_props.core.models import ItemPropertyMap, Prop


def merge_prop(props: ItemPropertyMap, prop: Prop) -> None:
    """Insert ``prop`` or append its value to the existing one.

    Repeated keys accumulate left to right, so the result depends on the
    order in which properties are merged.
    """
    existing = props.get(prop.key)
    if existing is None:
        props[prop.key] = prop.value
    else:
        props[prop.key] = f"{existing}{VALUE_SEPARATOR}{prop.value}"


def merge_props(props: ItemPropertyMap, new_props: Iterable[Prop]) -> ItemPropertyMap:
    for prop in new_props:
        merge_prop(props, prop)
    return props

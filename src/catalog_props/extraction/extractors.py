"""Per-element-type property extractors and their dispatch table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, ClassVar, Final, Literal, Mapping, Protocol

from catalog_props.core.constants import ITEM_PROP_KEY, RANGE_TEMPLATE, TEXT_PROP_KEY
from catalog_props.core.exceptions import UnknownElementTypeError
from catalog_props.core.models import Prop

from .names import require_field, require_object, resolve_text, scalar_text

ElementType = Literal["key-value", "numeric", "text", "item", "range"]


class PropExtractor(Protocol):
    """Turns one element of a known type into exactly one property."""

    tag: ClassVar[ElementType]

    def extract(self, element: Mapping[str, Any]) -> Prop: ...


class KeyValuePropExtractor:
    tag: ClassVar[ElementType] = "key-value"

    def extract(self, element: Mapping[str, Any]) -> Prop:
        owner = f"element {self.tag!r}"
        key = resolve_text(require_field(element, "key", owner=owner), field="key")
        value = resolve_text(require_field(element, "value", owner=owner), field="value")
        return Prop(key, value)


class NumericPropExtractor:
    tag: ClassVar[ElementType] = "numeric"

    def extract(self, element: Mapping[str, Any]) -> Prop:
        owner = f"element {self.tag!r}"
        key = resolve_text(require_field(element, "name", owner=owner))
        value = scalar_text(require_field(element, "value", owner=owner))
        return Prop(key, value)


class TextPropExtractor:
    tag: ClassVar[ElementType] = "text"

    def extract(self, element: Mapping[str, Any]) -> Prop:
        owner = f"element {self.tag!r}"
        value = resolve_text(require_field(element, "text", owner=owner), field="text")
        return Prop(TEXT_PROP_KEY, value)


class ItemPropExtractor:
    tag: ClassVar[ElementType] = "item"

    def extract(self, element: Mapping[str, Any]) -> Prop:
        owner = f"element {self.tag!r}"
        value = resolve_text(require_field(element, "name", owner=owner))
        return Prop(ITEM_PROP_KEY, value)


class RangePropExtractor:
    tag: ClassVar[ElementType] = "range"

    def extract(self, element: Mapping[str, Any]) -> Prop:
        owner = f"element {self.tag!r}"
        key = resolve_text(require_field(element, "name", owner=owner))
        upper = scalar_text(require_field(element, "max", owner=owner))
        lower = scalar_text(require_field(element, "min", owner=owner))
        return Prop(key, RANGE_TEMPLATE.format(min=lower, max=upper))


EXTRACTORS: Final[Mapping[str, PropExtractor]] = MappingProxyType(
    {
        extractor.tag: extractor
        for extractor in (
            KeyValuePropExtractor(),
            NumericPropExtractor(),
            TextPropExtractor(),
            ItemPropExtractor(),
            RangePropExtractor(),
        )
    }
)


def get_extractor(element_type: Any) -> PropExtractor:
    if not isinstance(element_type, str) or element_type not in EXTRACTORS:
        raise UnknownElementTypeError(scalar_text(element_type))
    return EXTRACTORS[element_type]


def extract_prop(element: Any) -> Prop:
    """Dispatch ``element`` on its ``type`` tag and return the extracted property."""
    block = require_object(element, "element")
    element_type = require_field(block, "type", owner="element")
    return get_extractor(element_type).extract(block)

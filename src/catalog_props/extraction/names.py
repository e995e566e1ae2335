"""Resolution of localized text objects into display strings."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Mapping

from catalog_props.core.constants import TRANSLATION_LANGUAGE, TRANSLATION_TYPE
from catalog_props.core.exceptions import MissingFieldError


def resolve_text(value: Any, *, field: str = "name") -> str:
    """Resolve a localized text object to a single string.

    ``{"type": "translation", "lines": {"ru": ...}}`` yields ``lines.ru``; any
    other object yields its ``text`` field.
    """
    block = require_object(value, field)
    if block.get("type") == TRANSLATION_TYPE:
        lines = require_object(block.get("lines"), f"{field}.lines")
        return scalar_text(require_field(lines, TRANSLATION_LANGUAGE, owner=f"{field}.lines"))
    return scalar_text(require_field(block, "text", owner=field))


def require_object(value: Any, field: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MissingFieldError(field)
    return value


def require_field(block: Mapping[str, Any], key: str, *, owner: str | None = None) -> Any:
    if key not in block:
        raise MissingFieldError(key, owner)
    return block[key]


def scalar_text(value: Any) -> str:
    """Render a JSON value the way it appears in JSON text, strings unquoted.

    Decimals keep the digits they were written with (``2.50`` stays ``2.50``).
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=_json_number)


def _json_number(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

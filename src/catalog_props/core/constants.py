"""Shared constant values used across the aggregation run."""

from __future__ import annotations

from typing import Final

TEXT_PROP_KEY: Final[str] = "Свойство"
ITEM_PROP_KEY: Final[str] = "Подходит для"

TRANSLATION_TYPE: Final[str] = "translation"
TRANSLATION_LANGUAGE: Final[str] = "ru"

VALUE_SEPARATOR: Final[str] = ", "
RANGE_TEMPLATE: Final[str] = "{min} to {max}"

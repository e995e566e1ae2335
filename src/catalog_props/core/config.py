"""Application configuration primitives."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = Path(".catalog/config.toml")


class Settings(BaseSettings):
    """Central configuration for the aggregation run."""

    root_dir: Path = Path("stalcraft")
    file_pattern: str = "*"
    output_path: Path | None = None
    output_indent: int | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(env_prefix="CATALOG_", env_file=(), extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    overrides = _load_settings_overrides()
    return Settings(**overrides)


def _load_settings_overrides(config_path: Path = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load configuration overrides from the TOML config file."""
    if not config_path.exists():
        return {}
    data = _read_toml(config_path)
    section = _extract_section(data, "catalog", "aggregation")
    if not section:
        return {}
    overrides = {key: value for key, value in section.items() if key in Settings.model_fields}
    return {key: value for key, value in overrides.items() if value is not None}


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _extract_section(data: dict[str, Any], *candidates: str) -> dict[str, Any] | None:
    for key in candidates:
        section = data.get(key)
        if isinstance(section, dict):
            return section
    return None

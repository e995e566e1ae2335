#!/usr/bin/env python
"""Aggregate catalog item documents into a single item -> properties JSON object."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable

from catalog_props.core import CatalogPropsError, Settings, configure_logging, get_settings
from catalog_props.core.logging import get_logger
from catalog_props.workflow import run_aggregation

LOGGER = get_logger("catalog_props.scripts.aggregate_items")


def _parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--root", type=Path, help="Directory to scan for item documents.")
    parser.add_argument("--pattern", help="File-name glob applied during discovery (default: every file).")
    parser.add_argument(
        "--output",
        type=Path,
        help="Where to store the aggregated JSON (default: standard output).",
    )
    parser.add_argument("--indent", type=int, help="Indentation for the JSON output.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _resolve_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "root_dir": args.root,
        "file_pattern": args.pattern,
        "output_path": args.output,
        "output_indent": args.indent,
        "log_level": args.log_level,
    }
    updates = {key: value for key, value in overrides.items() if value is not None}
    return get_settings().model_copy(update=updates)


def main(argv: Iterable[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = _resolve_settings(args)
    configure_logging(settings=settings)
    try:
        output = run_aggregation(settings)
    except CatalogPropsError as exc:
        notes = list(getattr(exc, "__notes__", []))
        LOGGER.error("aggregate.failed", error=str(exc), notes=notes)
        details = "; ".join([str(exc), *notes])
        print(f"Aggregation failed: {details}", file=sys.stderr)
        return 1
    if settings.output_path is None:
        print(output)
    else:
        print(f"Aggregated items written to {settings.output_path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())

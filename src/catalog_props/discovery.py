"""Recursive discovery of item documents under a root directory."""

from __future__ import annotations

from pathlib import Path

from catalog_props.core.logging import get_logger

LOGGER = get_logger(__name__)


def collect_item_files(root: Path, pattern: str = "*") -> list[Path]:
    """Return every leaf file under ``root`` sorted by file name.

    A missing root, or a root that is not a directory, yields an empty list.
    Files sharing a name across directories are ordered by their full path.
    """
    root = Path(root)
    if not root.is_dir():
        LOGGER.debug("discovery.root_missing", root=str(root))
        return []
    files = [path for path in root.rglob(pattern) if path.is_file()]
    files.sort(key=lambda path: (path.name, str(path)))
    LOGGER.debug("discovery.complete", root=str(root), file_count=len(files))
    return files

"""Template document discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from ..core.errors import DiscoveryTraversalError
from ..core.models import DEFAULT_EXTENSIONS, DEFAULT_VALUES_FILENAME

logger = logging.getLogger(__name__)


def is_candidate(name: str, extensions: Iterable[str], exclude_name: str) -> bool:
    """Return True when a file name qualifies as a template document."""
    if name == exclude_name:
        return False
    return any(name.endswith(ext) for ext in extensions)


def _report_traversal_error(exc: OSError) -> None:
    path = Path(exc.filename) if exc.filename else Path("?")
    error = DiscoveryTraversalError(path, exc.strerror or str(exc))
    logger.warning(f"Skipping subtree: {error}")


def discover_documents(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    exclude_name: str = DEFAULT_VALUES_FILENAME,
) -> list[Path]:
    """Recursively collect template documents under ``root``.

    Unreadable directories are logged and skipped. The values file is
    excluded by name at every depth.

    Args:
        root: Directory to walk
        extensions: Accepted file name suffixes
        exclude_name: File name never treated as a template

    Returns:
        Sorted list of template paths
    """
    extensions = tuple(extensions)
    found: list[Path] = []

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_report_traversal_error):
        base = Path(dirpath)
        for name in filenames:
            if not is_candidate(name, extensions, exclude_name):
                continue
            path = base / name
            if not path.is_file():
                continue
            found.append(path)

    found.sort()
    logger.info(f"Files to process: {[str(p) for p in found]}")
    return found

"""File I/O operations for rendering."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..core.errors import DocumentReadError
from ..core.models import CandidateDocument


def read_document(path: Path) -> CandidateDocument:
    """Read a template document as UTF-8 text.

    Args:
        path: Template file path

    Returns:
        Document holding the path and its content

    Raises:
        DocumentReadError: The file cannot be read or is not UTF-8 text
    """
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentReadError(path, f"not valid UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        raise DocumentReadError(path, exc.strerror or str(exc)) from exc
    return CandidateDocument(path=path, content=content)


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)

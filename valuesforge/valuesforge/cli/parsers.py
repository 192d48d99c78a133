"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from ..core.models import DEFAULT_EXTENSIONS, RenderConfig


def parse_extension(value: str) -> str:
    """Parse a template extension, adding the leading dot if missing."""
    ext = value.strip()
    if not ext or ext == ".":
        raise typer.BadParameter(f"Invalid extension: {value!r}")
    if any(sep in ext for sep in ("/", "\\")):
        raise typer.BadParameter(f"Extension must not contain a path separator: {value!r}")
    return ext if ext.startswith(".") else f".{ext}"


def build_config(root: Path, extensions: list[str], workers: int | None) -> RenderConfig:
    """Assemble a validated RenderConfig from CLI values."""
    try:
        return RenderConfig(
            root=root,
            extensions=tuple(extensions) if extensions else DEFAULT_EXTENSIONS,
            max_workers=workers,
        )
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e

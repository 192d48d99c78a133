"""Shared pytest fixtures for valuesforge tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

TreeBuilder = Callable[[dict[str, str]], Path]


@pytest.fixture
def make_root(tmp_path: Path) -> TreeBuilder:
    """Return a builder that writes ``{relative_path: text}`` under a fresh root."""

    def _build(files: dict[str, str]) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for rel, text in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _build

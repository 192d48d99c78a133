"""Domain models for render configuration, documents and outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import DocumentError

DEFAULT_VALUES_FILENAME = "values.yaml"
DEFAULT_EXTENSIONS = (".yaml", ".yml")
DOCUMENT_SEPARATOR = "\n---\n"
VALUES_ROOT_NAME = "Values"


class RenderConfig(BaseModel):
    """Options for a single pipeline run."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(..., description="Root directory holding values and templates")
    values_filename: str = Field(
        default=DEFAULT_VALUES_FILENAME, min_length=1, description="Values file name"
    )
    extensions: tuple[str, ...] = Field(
        default=DEFAULT_EXTENSIONS, min_length=1, description="Template file extensions"
    )
    separator: str = Field(default=DOCUMENT_SEPARATOR, description="Document separator")
    root_name: str = Field(
        default=VALUES_ROOT_NAME,
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Name the values tree is bound to in templates",
    )
    max_workers: int | None = Field(default=None, ge=1, description="Render threads")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized = []
        for ext in value:
            ext = ext.strip()
            if not ext or ext == ".":
                raise ValueError("extensions must be non-empty")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return tuple(dict.fromkeys(normalized))


class CandidateDocument(BaseModel):
    """A template document and its raw text, captured once."""

    model_config = ConfigDict(frozen=True)

    path: Path
    content: str


class RenderedFragment(BaseModel):
    """Text produced by expanding one document against the values tree."""

    model_config = ConfigDict(frozen=True)

    path: Path
    text: str


@dataclass(frozen=True)
class RenderFailure:
    path: Path
    error: DocumentError

    @property
    def kind(self) -> str:
        return self.error.kind


@dataclass(frozen=True)
class RenderOutcome:
    """The single message a render task sends to the collector."""

    path: Path
    fragment: RenderedFragment | None = None
    failure: RenderFailure | None = None

    @property
    def ok(self) -> bool:
        return self.fragment is not None

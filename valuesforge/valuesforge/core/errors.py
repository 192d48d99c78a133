"""Typed error kinds raised by the rendering pipeline."""

from __future__ import annotations

from pathlib import Path


class ValuesforgeError(Exception):
    """Base class for all valuesforge errors."""


class ConfigurationError(ValuesforgeError):
    """Raised when the values file cannot be loaded. Always fatal."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class ConfigurationNotFound(ConfigurationError):
    """Raised when the values file does not exist under the root."""


class ConfigurationReadError(ConfigurationError):
    """Raised when the values file exists but cannot be read."""


class ConfigurationParseError(ConfigurationError):
    """Raised when the values file is not a valid mapping document."""


class DiscoveryTraversalError(ValuesforgeError):
    """Raised (and logged, never propagated) when a subtree cannot be walked."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot traverse {path}: {reason}")
        self.path = path


class DocumentError(ValuesforgeError):
    """Per-document failure. The document is skipped, the run continues."""

    kind = "document"

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class DocumentReadError(DocumentError):
    """Raised when a template document cannot be read or decoded."""

    kind = "read"


class TemplateParseError(DocumentError):
    """Raised when a template document has invalid syntax."""

    kind = "parse"


class TemplateExecutionError(DocumentError):
    """Raised when expansion touches a missing or incompatible field."""

    kind = "execution"

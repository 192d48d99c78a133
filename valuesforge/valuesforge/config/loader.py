"""Values file loading."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ..core.errors import (
    ConfigurationNotFound,
    ConfigurationParseError,
    ConfigurationReadError,
)
from ..core.models import DEFAULT_VALUES_FILENAME
from ..core.tree import ConfigurationTree, UnsupportedValueError, freeze_tree

logger = logging.getLogger(__name__)


def values_path(root: Path, filename: str = DEFAULT_VALUES_FILENAME) -> Path:
    return root / filename


def load_values(
    root: Path, filename: str = DEFAULT_VALUES_FILENAME
) -> ConfigurationTree:
    """Load and freeze the values file found directly under ``root``.

    Args:
        root: Root directory of the run
        filename: Values file name

    Returns:
        Read-only configuration tree

    Raises:
        ConfigurationNotFound: The file does not exist
        ConfigurationReadError: The file cannot be read as UTF-8 text
        ConfigurationParseError: The content is not a YAML mapping
    """
    path = values_path(root, filename)
    if not path.exists():
        raise ConfigurationNotFound(path, f"{filename} not found")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationReadError(path, f"Unable to read {filename}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationParseError(path, f"Unable to parse {filename}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationParseError(
            path, f"{filename} must contain a mapping, got {type(data).__name__}"
        )

    try:
        tree = freeze_tree(data)
    except UnsupportedValueError as exc:
        raise ConfigurationParseError(path, str(exc)) from exc
    except RecursionError as exc:
        raise ConfigurationParseError(path, f"{filename} is nested too deeply") from exc

    logger.debug(f"Loaded {len(tree)} top-level value(s) from {path}")
    return tree

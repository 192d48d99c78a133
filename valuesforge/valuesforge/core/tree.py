"""Frozen configuration tree shared by every render task."""

from __future__ import annotations

import datetime as dt
from typing import Any, Iterator, Mapping, Union

Scalar = Union[None, bool, int, float, str]
ConfigValue = Union[Scalar, "FrozenList", "FrozenMapping"]
ConfigurationTree = Mapping[str, ConfigValue]


class UnsupportedValueError(TypeError):
    """Raised when a parsed value falls outside the configuration value types."""


class FrozenList(tuple):
    """Read-only sequence that renders like a YAML flow sequence."""

    def __getitem__(self, index):
        item = super().__getitem__(index)
        return FrozenList(item) if isinstance(index, slice) else item

    def __repr__(self) -> str:
        return repr(list(self))


class FrozenMapping(Mapping[str, Any]):
    """Read-only mapping that renders like a YAML flow mapping."""

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return repr(self._data)


def freeze(value: Any, _path: frozenset[int] = frozenset()) -> ConfigValue:
    """Convert parsed YAML data into read-only configuration values.

    Mappings become ``FrozenMapping`` with string keys and sequences
    become ``FrozenList``, so templates can look up, index and iterate the
    tree but never modify it.

    Args:
        value: Data produced by ``yaml.safe_load``

    Returns:
        Frozen value

    Raises:
        UnsupportedValueError: Unknown value type or a self-referencing alias
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (dt.datetime, dt.date)):
        return value.isoformat()
    if not isinstance(value, (dict, list, tuple)):
        raise UnsupportedValueError(
            f"Unsupported configuration value of type {type(value).__name__}"
        )

    if id(value) in _path:
        raise UnsupportedValueError("Recursive alias in configuration values")
    path = _path | {id(value)}

    if isinstance(value, dict):
        return FrozenMapping({_key(k): freeze(v, path) for k, v in value.items()})
    return FrozenList(freeze(item, path) for item in value)


def freeze_tree(data: Mapping[str, Any]) -> ConfigurationTree:
    """Freeze a mapping-rooted document."""
    return FrozenMapping(
        {_key(k): freeze(v, frozenset({id(data)})) for k, v in data.items()}
    )


def _key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return str(key).lower()
    if key is None:
        return "null"
    if isinstance(key, (dt.datetime, dt.date)):
        return key.isoformat()
    if isinstance(key, (int, float)):
        return str(key)
    raise UnsupportedValueError(
        f"Unsupported mapping key of type {type(key).__name__}"
    )

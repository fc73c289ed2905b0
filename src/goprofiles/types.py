"""Value tree types: leaves returned by path resolution and frozen mappings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

__all__ = [
    "LeafKind",
    "Leaf",
    "freeze",
    "thaw",
]


class LeafKind(str, Enum):
    """Distinguishes the two terminal node shapes."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class Leaf:
    """A terminal, non-mapping value reached by a query path."""

    kind: LeafKind
    value: Any

    @property
    def is_sequence(self) -> bool:
        return self.kind is LeafKind.SEQUENCE


def freeze(value: Any) -> Any:
    """Return a read-only copy of a decoded value tree.

    Mappings become ``MappingProxyType`` views keyed by ``str`` and
    sequences become tuples. Scalars are returned as-is. Raises
    ``ValueError`` if two keys of one mapping stringify alike.
    """
    if isinstance(value, Mapping):
        frozen: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key in frozen:
                raise ValueError(f"duplicate key '{key}' after stringification")
            frozen[key] = freeze(v)
        return MappingProxyType(frozen)
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of :func:`freeze`: plain dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value

"""Dot-path resolution over a merged mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from goprofiles.errors import KeyNotFoundError, TrailingSegmentsError
from goprofiles.types import Leaf, LeafKind

__all__ = ["SEPARATOR", "resolve"]

SEPARATOR = "."


def resolve(values: Mapping[str, Any], path: str, strict: bool = True) -> Leaf:
    """Walk ``values`` along the dot-separated ``path`` and return the leaf.

    A mapping is never a valid result: a path that ends on a mapping
    raises KeyNotFoundError. When a scalar or sequence is reached before
    the last segment, ``strict`` decides between raising
    TrailingSegmentsError and returning that leaf.
    """
    segments = path.split(SEPARATOR)
    current: Mapping[str, Any] = values

    for index, segment in enumerate(segments):
        if segment not in current:
            raise KeyNotFoundError(path=path)

        value = current[segment]
        if isinstance(value, Mapping):
            current = value
            continue

        remaining = segments[index + 1 :]
        if remaining and strict:
            raise TrailingSegmentsError(path=path, remaining=remaining)

        if isinstance(value, (list, tuple)):
            return Leaf(kind=LeafKind.SEQUENCE, value=value)
        return Leaf(kind=LeafKind.SCALAR, value=value)

    raise KeyNotFoundError(path=path)

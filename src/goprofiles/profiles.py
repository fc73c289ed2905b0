"""Profiles: the read-only configuration handle and its typed accessors."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from goprofiles.errors import QueryError, TypeMismatchError
from goprofiles.loader import load
from goprofiles.options import Option, default_options
from goprofiles.query import resolve
from goprofiles.types import Leaf, LeafKind, freeze, thaw

__all__ = ["Profiles", "new"]

logger = logging.getLogger(__name__)

_ADAPTERS: dict[type, TypeAdapter[Any]] = {t: TypeAdapter(t) for t in (str, int, bool, float)}
_LIST_ADAPTERS: dict[type, TypeAdapter[Any]] = {t: TypeAdapter(list[t]) for t in (str, int, bool, float)}


def _type_name(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return "sequence"
    if isinstance(value, Mapping):
        return "mapping"
    return type(value).__name__


class Profiles:
    """Merged view over one or more profiles of a profiles file.

    Built once from functional options; the merged values are frozen and
    never change for the lifetime of the handle, so a single instance may
    be shared between threads.

    Example::

        p = Profiles(with_file("config/profiles.yaml"), with_profile("common", "dev"))
        p.get_int("nested.some_int")
    """

    def __init__(self, *opts: Option) -> None:
        options = default_options()
        for opt in opts:
            opt(options)
        self._options = options
        self._strict = options.strict_paths
        self._values: Mapping[str, Any] = freeze(load(options.file, options.profiles))
        logger.info(
            "Loaded %d keys from %s for profiles %s",
            len(self._values),
            options.file,
            options.profiles,
        )

    @property
    def file(self) -> str:
        return self._options.file

    @property
    def profiles(self) -> tuple[str, ...]:
        return tuple(self._options.profiles)

    @property
    def values(self) -> Mapping[str, Any]:
        """The frozen merged mapping."""
        return self._values

    def resolve(self, path: str) -> Leaf:
        """Resolve ``path`` to a scalar or sequence leaf."""
        return resolve(self._values, path, strict=self._strict)

    def get(self, path: str, default: Any = None) -> Any:
        """Return the leaf value at ``path``, or ``default`` if it does not resolve."""
        try:
            leaf = self.resolve(path)
        except QueryError:
            return default
        return thaw(leaf.value)

    def has(self, path: str) -> bool:
        try:
            self.resolve(path)
        except QueryError:
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable deep copy of the merged values."""
        return thaw(self._values)

    # -- scalar accessors --

    def get_string(self, path: str) -> str:
        return self._scalar(path, str)

    def get_int(self, path: str) -> int:
        return self._scalar(path, int)

    def get_bool(self, path: str) -> bool:
        return self._scalar(path, bool)

    def get_float(self, path: str) -> float:
        return float(self._scalar(path, float))

    # -- sequence accessors --

    def get_string_list(self, path: str) -> list[str]:
        return self._sequence(path, str)

    def get_int_list(self, path: str) -> list[int]:
        return self._sequence(path, int)

    def get_bool_list(self, path: str) -> list[bool]:
        return self._sequence(path, bool)

    def get_float_list(self, path: str) -> list[float]:
        return [float(v) for v in self._sequence(path, float)]

    def _scalar(self, path: str, expected: type) -> Any:
        leaf = self.resolve(path)
        if leaf.kind is not LeafKind.SCALAR:
            raise TypeMismatchError(path=path, expected=expected.__name__, actual="sequence")
        try:
            return _ADAPTERS[expected].validate_python(leaf.value, strict=True)
        except PydanticValidationError as e:
            raise TypeMismatchError(
                path=path,
                expected=expected.__name__,
                actual=_type_name(leaf.value),
                cause=e,
            ) from e

    def _sequence(self, path: str, expected: type) -> list[Any]:
        leaf = self.resolve(path)
        expected_name = f"list[{expected.__name__}]"
        if leaf.kind is not LeafKind.SEQUENCE:
            raise TypeMismatchError(path=path, expected=expected_name, actual=_type_name(leaf.value))
        try:
            return _LIST_ADAPTERS[expected].validate_python(list(leaf.value), strict=True)
        except PydanticValidationError as e:
            first = e.errors()[0]
            raise TypeMismatchError(
                path=path,
                expected=expected_name,
                actual=f"sequence containing {_type_name(first.get('input'))}",
                cause=e,
            ) from e

    def __repr__(self) -> str:
        return f"Profiles(file={self.file!r}, profiles={list(self.profiles)!r})"


def new(*opts: Option) -> Profiles:
    """Build a Profiles handle from functional options."""
    return Profiles(*opts)

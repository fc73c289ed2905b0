"""Profile loading: read a profiles file and merge the selected profiles."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from goprofiles.decoders import get_decoder
from goprofiles.errors import (
    DecodeError,
    KeyConflictError,
    NoFileSpecifiedError,
    ProfileFileNotFoundError,
    ProfileNotFoundError,
    UnsupportedFileTypeError,
)

__all__ = ["NAMESPACE", "load", "merge_profiles"]

logger = logging.getLogger(__name__)

NAMESPACE = "goprofiles"


def load(file_path: str, profiles: Iterable[str] = ()) -> dict[str, Any]:
    """Read ``file_path`` and merge the key/value sets of ``profiles``.

    Profiles are merged in the given order. Order only decides which
    error is reported first; two profiles sharing a top-level key always
    fail with KeyConflictError.

    Keys are stringified. YAML 1.1 rules apply when decoding, so unquoted
    ``on``/``off``/``yes``/``no`` keys load as booleans and are stored as
    ``"True"``/``"False"``; quote such keys to query them by name.

    Raises:
        NoFileSpecifiedError: ``file_path`` is empty.
        UnsupportedFileTypeError: no decoder is registered for the extension.
        ProfileFileNotFoundError: the file is missing or unreadable.
        DecodeError: the file cannot be decoded, has the wrong shape, or
            holds two keys in one mapping that stringify alike.
        ProfileNotFoundError: a requested profile is absent.
        KeyConflictError: two profiles define the same key.
    """
    if not file_path:
        raise NoFileSpecifiedError()

    decoder = get_decoder(file_path)
    if decoder is None:
        raise UnsupportedFileTypeError(file_path=file_path, extension=Path(file_path).suffix)

    try:
        content = Path(file_path).read_bytes()
    except OSError as e:
        raise ProfileFileNotFoundError(file_path=file_path, cause=e) from e

    logger.debug("Read %d bytes from %s", len(content), file_path)

    try:
        document = decoder(content)
    except ValueError as e:
        raise DecodeError(file_path=file_path, reason=str(e), cause=e) from e

    return merge_profiles(_namespace(document, file_path), profiles, file_path=file_path)


def _namespace(document: Any, file_path: str) -> Mapping[Any, Any]:
    if document is None:
        return {}
    if not isinstance(document, Mapping):
        raise DecodeError(file_path=file_path, reason="document is not a mapping")
    section = document.get(NAMESPACE)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise DecodeError(file_path=file_path, reason=f"'{NAMESPACE}' must be a mapping of profiles")
    return section


def merge_profiles(
    available: Mapping[Any, Any],
    profiles: Iterable[str],
    file_path: str = "<memory>",
) -> dict[str, Any]:
    """Merge the bodies of ``profiles`` taken from ``available``.

    Returns a new dict; ``available`` is never modified.
    """
    merged: dict[str, Any] = {}
    origin: dict[str, str] = {}

    for name in profiles:
        if name not in available:
            raise ProfileNotFoundError(profile=name)

        body = available[name]
        if body is None:
            logger.warning("Profile '%s' in %s is empty", name, file_path)
            continue
        if not isinstance(body, Mapping):
            raise DecodeError(file_path=file_path, reason=f"profile '{name}' is not a mapping")

        body = _stringify_keys(body, name, file_path)
        for key, value in body.items():
            if key in merged:
                logger.debug("Key '%s' defined by both '%s' and '%s'", key, origin[key], name)
                raise KeyConflictError(key=key, profile=name)
            merged[key] = value
            origin[key] = name

        logger.debug("Merged profile '%s' (%d keys)", name, len(body))

    return merged


def _stringify_keys(value: Any, profile: str, file_path: str) -> Any:
    """Copy ``value`` with every mapping key turned into ``str``.

    Two keys of one mapping that stringify alike (``1`` and ``'1'``) raise
    DecodeError instead of one silently replacing the other.
    """
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, child in value.items():
            skey = str(key)
            if skey in result:
                raise DecodeError(
                    file_path=file_path,
                    reason=f"duplicate key '{skey}' after stringification in profile '{profile}'",
                )
            result[skey] = _stringify_keys(child, profile, file_path)
        return result
    if isinstance(value, (list, tuple)):
        return [_stringify_keys(v, profile, file_path) for v in value]
    return value

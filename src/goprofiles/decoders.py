"""Extension-keyed registry of structured-data decoders."""

from __future__ import annotations

import logging
from typing import Any, Callable

import yaml

__all__ = [
    "Decoder",
    "register_decoder",
    "get_decoder",
    "supported_extensions",
    "decode_yaml",
]

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes], Any]
"""Turns raw file bytes into a nested mapping. Raises ``ValueError`` on malformed input."""

_DECODERS: dict[str, Decoder] = {}


def _normalize(extension: str) -> str:
    extension = extension.lower()
    return extension if extension.startswith(".") else f".{extension}"


def register_decoder(extension: str, decoder: Decoder) -> None:
    """Register ``decoder`` for files ending in ``extension``.

    A later registration for the same extension replaces the earlier one.
    """
    ext = _normalize(extension)
    if ext in _DECODERS:
        logger.debug("Replacing decoder for '%s'", ext)
    _DECODERS[ext] = decoder


def get_decoder(file_path: str) -> Decoder | None:
    """Return the decoder whose extension ends ``file_path``, or None.

    Matching is on the raw path suffix, so a file named just ``.yaml``
    is accepted. The longest matching extension wins.
    """
    lowered = file_path.lower()
    for ext in sorted(_DECODERS, key=len, reverse=True):
        if lowered.endswith(ext):
            return _DECODERS[ext]
    return None


def supported_extensions() -> list[str]:
    return sorted(_DECODERS)


def decode_yaml(content: bytes) -> Any:
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e


register_decoder(".yaml", decode_yaml)
register_decoder(".yml", decode_yaml)

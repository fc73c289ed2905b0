"""Construction options for Profiles and their functional builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

__all__ = [
    "DEFAULT_FILE",
    "Options",
    "Option",
    "default_options",
    "with_file",
    "with_profile",
    "with_lenient_paths",
]

DEFAULT_FILE = "profiles.yaml"


@dataclass
class Options:
    """Resolved options used to build a Profiles handle."""

    file: str = DEFAULT_FILE
    profiles: list[str] = field(default_factory=list)
    strict_paths: bool = True


Option = Callable[[Options], None]


def default_options() -> Options:
    return Options()


def with_file(file: str) -> Option:
    """Override the profiles file path."""

    def apply(options: Options) -> None:
        options.file = file

    return apply


def with_profile(*profiles: str) -> Option:
    """Append profile names to merge. Repeated calls accumulate in order."""

    def apply(options: Options) -> None:
        options.profiles.extend(profiles)

    return apply


def with_lenient_paths() -> Option:
    """Ignore path segments left over after a leaf instead of raising."""

    def apply(options: Options) -> None:
        options.strict_paths = False

    return apply

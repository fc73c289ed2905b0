"""goprofiles - profile-based settings loaded from YAML with typed dot-path queries."""

from __future__ import annotations

# Handle
from goprofiles.profiles import Profiles, new

# Options
from goprofiles.options import (
    DEFAULT_FILE,
    Options,
    default_options,
    with_file,
    with_lenient_paths,
    with_profile,
)

# Loading and querying
from goprofiles.decoders import register_decoder, supported_extensions
from goprofiles.loader import NAMESPACE, load, merge_profiles
from goprofiles.query import resolve
from goprofiles.types import Leaf, LeafKind

# Errors
from goprofiles.errors import (
    DecodeError,
    ErrorCodes,
    KeyConflictError,
    KeyNotFoundError,
    LoadError,
    NoFileSpecifiedError,
    ProfileFileNotFoundError,
    ProfileNotFoundError,
    ProfilesError,
    QueryError,
    TrailingSegmentsError,
    TypeMismatchError,
    UnsupportedFileTypeError,
)

__version__ = "0.1.0"

__all__ = [
    # Handle
    "Profiles",
    "new",
    # Options
    "Options",
    "DEFAULT_FILE",
    "default_options",
    "with_file",
    "with_profile",
    "with_lenient_paths",
    # Loading and querying
    "NAMESPACE",
    "load",
    "merge_profiles",
    "resolve",
    "register_decoder",
    "supported_extensions",
    "Leaf",
    "LeafKind",
    # Errors
    "ErrorCodes",
    "ProfilesError",
    "LoadError",
    "QueryError",
    "NoFileSpecifiedError",
    "UnsupportedFileTypeError",
    "ProfileFileNotFoundError",
    "DecodeError",
    "ProfileNotFoundError",
    "KeyConflictError",
    "KeyNotFoundError",
    "TrailingSegmentsError",
    "TypeMismatchError",
]

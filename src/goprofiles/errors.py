"""Error hierarchy for goprofiles."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
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
    "ErrorCodes",
]


class ProfilesError(Exception):
    """Base error for all goprofiles errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class LoadError(ProfilesError):
    """Raised while reading, decoding, or merging a profiles file."""


class QueryError(ProfilesError):
    """Raised while resolving a dot-path against a merged mapping."""


class NoFileSpecifiedError(LoadError):
    """Raised when an empty file path is given."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(code="NO_FILE_SPECIFIED", message="No file specified", **kwargs)


class UnsupportedFileTypeError(LoadError):
    """Raised when no decoder is registered for the file extension."""

    def __init__(self, file_path: str, extension: str, **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_FILE_TYPE",
            message=f"Unsupported file type '{extension}': {file_path}",
            details={"file_path": file_path, "extension": extension},
            **kwargs,
        )

    @property
    def extension(self) -> str:
        """The rejected file extension."""
        return self.details["extension"]


class ProfileFileNotFoundError(LoadError):
    """Raised when the profiles file is missing or unreadable."""

    def __init__(self, file_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="FILE_NOT_FOUND",
            message=f"Profiles file not found: {file_path}",
            details={"file_path": file_path},
            **kwargs,
        )

    @property
    def file_path(self) -> str:
        """The path that could not be read."""
        return self.details["file_path"]


class DecodeError(LoadError):
    """Raised when a profiles file cannot be decoded or has the wrong shape."""

    def __init__(self, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DECODE_ERROR",
            message=f"Cannot decode '{file_path}': {reason}",
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )


class ProfileNotFoundError(LoadError):
    """Raised when a requested profile is absent from the document."""

    def __init__(self, profile: str, **kwargs: Any) -> None:
        super().__init__(
            code="PROFILE_NOT_FOUND",
            message=f"Profile not found: {profile}",
            details={"profile": profile},
            **kwargs,
        )

    @property
    def profile(self) -> str:
        """The missing profile name."""
        return self.details["profile"]


class KeyConflictError(LoadError):
    """Raised when two merged profiles define the same key."""

    def __init__(self, key: str, profile: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="KEY_CONFLICT",
            message=f"Value conflict found for key: {key}",
            details={"key": key, "profile": profile},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The key defined by more than one profile."""
        return self.details["key"]


class KeyNotFoundError(QueryError):
    """Raised when a dot-path does not resolve to a leaf."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="KEY_NOT_FOUND",
            message=f"No value found for key: {path}",
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The query path that failed to resolve."""
        return self.details["path"]


class TrailingSegmentsError(QueryError):
    """Raised when a dot-path continues past a scalar or sequence leaf."""

    def __init__(self, path: str, remaining: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="TRAILING_SEGMENTS",
            message=f"Path '{path}' continues past a leaf: {'.'.join(remaining)}",
            details={"path": path, "remaining": remaining},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The query path."""
        return self.details["path"]

    @property
    def remaining(self) -> list[str]:
        """Segments left unconsumed after the leaf."""
        return self.details["remaining"]


class TypeMismatchError(QueryError):
    """Raised when a resolved leaf does not have the requested type."""

    def __init__(self, path: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="TYPE_MISMATCH",
            message=f"Value at '{path}' is {actual}, expected {expected}",
            details={"path": path, "expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def expected(self) -> str:
        """Name of the requested type."""
        return self.details["expected"]

    @property
    def actual(self) -> str:
        """Name of the type actually found."""
        return self.details["actual"]


class ErrorCodes:
    """All goprofiles error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_CONFLICT:
            handle_conflict()
    """

    NO_FILE_SPECIFIED = "NO_FILE_SPECIFIED"
    UNSUPPORTED_FILE_TYPE = "UNSUPPORTED_FILE_TYPE"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    DECODE_ERROR = "DECODE_ERROR"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    KEY_CONFLICT = "KEY_CONFLICT"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    TRAILING_SEGMENTS = "TRAILING_SEGMENTS"
    TYPE_MISMATCH = "TYPE_MISMATCH"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")

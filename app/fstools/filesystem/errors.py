"""Filesystem failure taxonomy.

Every failure carries a classified kind, the translation key it was
raised with, the offending path (when known) and a human-readable
message composed by the Translator at the raise site.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a filesystem failure.

    Attributes:
        PRECONDITION_VIOLATION: Target of the wrong kind, missing source,
            or existing destination. Raised before any mutation.
        IO_FAILURE: The delegated filesystem call failed.
    """

    PRECONDITION_VIOLATION = "precondition_violation"
    IO_FAILURE = "io_failure"


class FilesystemError(Exception):
    """Base exception for filesystem operation failures.

    Args:
        key: Translation key identifying the failure.
        message: Localized message; falls back to the key.
        path: Offending path, if known.
    """

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, key: str, message: str | None = None, *, path: str | None = None) -> None:
        self.key = key.upper()
        self.message = message or self.key
        self.path = path
        super().__init__(self.message)


class PreconditionViolation(FilesystemError):
    """Raised when an operation's preconditions do not hold."""

    kind = ErrorKind.PRECONDITION_VIOLATION


class NotADirectory(PreconditionViolation):
    """Raised when a directory was required but the path is not one."""


class SourceNotFound(PreconditionViolation):
    """Raised when the source of a copy or move does not exist."""


class DestinationExists(PreconditionViolation):
    """Raised when a destination exists and overwriting was not requested."""


class UnderlyingIOFailure(FilesystemError):
    """Raised when a delegated filesystem call fails.

    The underlying OSError is chained as ``__cause__``.
    """

    kind = ErrorKind.IO_FAILURE

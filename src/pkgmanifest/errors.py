"""Failure taxonomy for manifest loading and dependency resolution.

Every failure is terminal for the operation that raised it. Nothing in
this package retries or falls back; callers decide what to do.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class FileIoAction(StrEnum):
    """What was being attempted when a file operation failed."""

    OPEN = "open"
    READ = "read"
    PARSE = "parse"


class FileKind(StrEnum):
    FILE = "file"
    DIRECTORY = "directory"


class PackageError(Exception):
    """Base class for all pkgmanifest failures."""


class FileIoError(PackageError):
    """A file could not be read, or its content did not match the schema.

    Attributes:
        action: The operation that failed (``read``, ``parse``, ...).
        kind: Whether the target was a file or a directory.
        path: The offending path.
        err: Human-readable underlying cause, if any.
    """

    def __init__(
        self,
        *,
        action: FileIoAction,
        kind: FileKind,
        path: Path,
        err: str | None = None,
    ) -> None:
        self.action = action
        self.kind = kind
        self.path = Path(path)
        self.err = err
        msg = f"An error occurred while trying to {action} this {kind}: {self.path}"
        if err:
            msg = f"{msg}\n\n{err}"
        super().__init__(msg)


class DuplicateDependencyError(PackageError):
    """The same package is declared in both dependency tables."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"The package {name!r} is specified in both the dependencies "
            "and dev-dependencies sections"
        )


class InvalidVersionError(ValueError):
    """A string is not a valid semantic version."""


class InvalidRangeError(ValueError):
    """A string is not a valid version requirement."""

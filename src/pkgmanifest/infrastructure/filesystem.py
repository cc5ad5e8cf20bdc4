"""File readers used to load manifests.

Manifest loading never touches the disk directly; it asks a
:class:`FileSystemReader` for text. ``ProjectIO`` reads from the real
filesystem, ``InMemoryFileSystem`` serves fixed content (tests, tooling
that already holds the bytes).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from pkgmanifest.errors import FileIoAction, FileIoError, FileKind

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSystemReader(Protocol):
    """Anything that can return the text content of a path."""

    def read(self, path: Path) -> str:
        """Return the UTF-8 text at *path* or raise :class:`FileIoError`."""
        ...


class ProjectIO:
    """Read files from the local filesystem."""

    def read(self, path: Path) -> str:
        path = Path(path)
        logger.debug("Reading %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FileIoError(
                action=FileIoAction.READ,
                kind=FileKind.FILE,
                path=path,
                err=str(exc),
            ) from exc
        except UnicodeDecodeError as exc:
            raise FileIoError(
                action=FileIoAction.READ,
                kind=FileKind.FILE,
                path=path,
                err=f"File is not valid UTF-8: {exc}",
            ) from exc


class InMemoryFileSystem:
    """Paths mapped to text held in memory."""

    def __init__(self, files: dict[Path | str, str] | None = None) -> None:
        self._files: dict[Path, str] = {Path(p): text for p, text in (files or {}).items()}

    def add(self, path: Path | str, text: str) -> None:
        self._files[Path(path)] = text

    def read(self, path: Path) -> str:
        path = Path(path)
        try:
            return self._files[path]
        except KeyError:
            raise FileIoError(
                action=FileIoAction.READ,
                kind=FileKind.FILE,
                path=path,
                err="No such file",
            ) from None

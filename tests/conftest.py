"""Shared pytest fixtures and test helpers for pkgmanifest tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from pkgmanifest.config.discovery import MANIFEST_FILENAME

MINIMAL_MANIFEST = 'name = "my_package"\n'

FULL_MANIFEST = """\
name = "widgets"
version = "1.2.3"
licences = ["Apache-2.0", "MIT"]
description = "Widgets for everyone"
links = [{ title = "Home", href = "https://widgets.example" }]

[docs]
pages = [{ title = "Guide", path = "guide.html", source = "docs/guide.md" }]

[repository]
type = "github"
user = "acme"
repo = "widgets"

[dependencies]
stdlib = "~> 0.18"
json = ">= 1.0.0 and < 2.0.0"

[dev-dependencies]
unit_test = "~> 1.0"

[erlang]
otp-application-start-module = "widgets_app"
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str], Path]:
    """Write manifest text to ``tmp_path/package.toml`` and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / MANIFEST_FILENAME
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _no_manifest_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PKGMANIFEST_* environment out of the tests."""
    for var in ("PKGMANIFEST_MANIFEST", "PKGMANIFEST_MODE", "PKGMANIFEST_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def full_manifest_text() -> str:
    return FULL_MANIFEST


@pytest.fixture
def full_manifest(write_manifest: Callable[[str], Path]) -> Path:
    """A manifest on disk exercising every section."""
    return write_manifest(FULL_MANIFEST)


@pytest.fixture
def minimal_manifest(write_manifest: Callable[[str], Path]) -> Path:
    return write_manifest(MINIMAL_MANIFEST)


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Generator[None]:
    """The CLI reconfigures logging on every invocation; undo it per test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)

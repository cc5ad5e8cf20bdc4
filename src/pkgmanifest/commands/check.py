"""Command: validate the manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgmanifest.commands._base import PkgCommand

if TYPE_CHECKING:
    from pkgmanifest.commands._context import AppContext


@click.command(
    cls=PkgCommand,
    examples="""\
  pkgmanifest check
  pkgmanifest --json check
  pkgmanifest -m path/to/package.toml check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Validate package.toml and summarise it."""
    app.emit(app.service.check(app.settings.manifest_path))

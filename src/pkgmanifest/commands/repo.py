"""Command: print the repository URL."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgmanifest.commands._base import PkgCommand

if TYPE_CHECKING:
    from pkgmanifest.commands._context import AppContext


@click.command(
    cls=PkgCommand,
    examples="""\
  pkgmanifest repo
  pkgmanifest -q repo""",
)
@click.pass_obj
def repo(app: AppContext) -> None:
    """Show the declared source repository."""
    app.emit(app.service.repository(app.settings.manifest_path))

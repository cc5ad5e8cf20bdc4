"""Command: print the dependency set for a build mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgmanifest.commands._base import PkgCommand
from pkgmanifest.domain.build import Mode

if TYPE_CHECKING:
    from pkgmanifest.commands._context import AppContext


@click.command(
    cls=PkgCommand,
    examples="""\
  pkgmanifest deps
  pkgmanifest deps --mode prod
  pkgmanifest -q deps --mode prod""",
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in Mode]),
    default=None,
    help="Build mode (default: dev, or PKGMANIFEST_MODE).",
)
@click.pass_obj
def deps(app: AppContext, mode: str | None) -> None:
    """Resolve the dependencies needed to build in MODE."""
    resolved = Mode(mode) if mode else app.settings.mode
    app.emit(app.service.dependencies(app.settings.manifest_path, resolved))

"""Subcommand modules for pkgmanifest.

Provides register_commands() which uses deferred imports to keep
``pkgmanifest --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pkgmanifest.commands.check import check
    from pkgmanifest.commands.deps import deps
    from pkgmanifest.commands.repo import repo

    cli.add_command(check)
    cli.add_command(deps)
    cli.add_command(repo)

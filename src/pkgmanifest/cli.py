"""Root CLI group for pkgmanifest with global flags and command registration."""

from __future__ import annotations

import click

from pkgmanifest import __version__
from pkgmanifest.commands import register_commands
from pkgmanifest.commands._context import AppContext
from pkgmanifest.config.settings import ToolSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pkgmanifest")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-m", "--manifest", "manifest_path", default=None, help="Path to package.toml."
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    manifest_path: str | None,
) -> None:
    """pkgmanifest — inspect package.toml manifests."""
    settings = ToolSettings.from_cli(
        manifest_path=manifest_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich text) or machines
(``--json``). ``--quiet`` reduces human output to the bare payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from pkgmanifest.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from pkgmanifest.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags relevant to formatting."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _render_value(console: Console, key: str, value: Any, indent: int = 2) -> None:
    pad = " " * indent
    if isinstance(value, dict):
        if not value:
            console.print(Text(f"{pad}{key}: ", style="pkg.key"), Text("{}"), sep="")
            return
        console.print(Text(f"{pad}{key}:", style="pkg.key"))
        width = max(len(str(k)) for k in value)
        for name, item in value.items():
            console.print(
                Text(f"{pad}  {str(name).ljust(width)}  ", style="pkg.name"),
                Text(str(item), style="pkg.range"),
                sep="",
            )
        return
    if isinstance(value, list):
        rendered = ", ".join(
            " ".join(str(v) for v in item.values()) if isinstance(item, dict) else str(item)
            for item in value
        )
        console.print(Text(f"{pad}{key}: ", style="pkg.key"), Text(rendered or "-"), sep="")
        return
    shown = "-" if value is None else str(value)
    console.print(Text(f"{pad}{key}: ", style="pkg.key"), Text(shown), sep="")


def _render_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="pkg.ok"), Text(f"  {result.op}", style="pkg.op"), sep="")
        for key, value in result.data.items():
            _render_value(console, key, value)
    else:
        msg = result.error.message if result.error else "Unknown error"
        console.print(Text("ERROR", style="pkg.error"), Text(f"  {result.op}", style="pkg.op"), sep="")
        console.print(Text(f"  {msg}"))
        if settings.verbose and result.error and result.error.detail:
            for key, value in result.error.detail.items():
                _render_value(console, key, value, indent=4)
    return get_output(console).rstrip("\n")


def _render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    deps = result.data.get("dependencies")
    if result.op == "dependencies" and isinstance(deps, dict):
        return "\n".join(f"{name} {requirement}" for name, requirement in deps.items())
    if result.op == "repository":
        return result.data.get("url") or ""
    return f"OK: {result.op}"


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags. Takes precedence over *json_output*.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _render_quiet(result)
    return _render_human(result, settings)

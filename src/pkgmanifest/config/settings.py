"""Tool settings merged from CLI flags, env vars, and code defaults.

Priority chain (highest to lowest):
  1. Init kwargs (CLI flags passed by Click)
  2. Env vars with the ``PKGMANIFEST_`` prefix
  3. Code defaults

The manifest itself is not a settings source; it is project data loaded
through :class:`pkgmanifest.domain.package.PackageConfig`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from pkgmanifest.config.discovery import MANIFEST_FILENAME, find_manifest
from pkgmanifest.domain.build import Mode


class ToolSettings(BaseSettings):
    """Settings for a single pkgmanifest invocation.

    Attributes:
        project_root: Directory holding the manifest (parent of
            ``package.toml``, or CWD if none was found).
        manifest_path: The manifest to load. Points at
            ``project_root / package.toml`` when discovery found nothing,
            so the eventual read error names a concrete path.
        mode: Build mode used when resolving dependencies.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PKGMANIFEST_",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    manifest_path: Path = Field(default_factory=lambda: Path.cwd() / MANIFEST_FILENAME)

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    mode: Mode = Mode.DEV

    @classmethod
    def from_cli(
        cls,
        *,
        manifest_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> ToolSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *manifest_path* when given, otherwise discovers
        ``package.toml`` by walking up from *project_root* (or CWD).
        """
        if manifest_path:
            path: Path | None = Path(manifest_path)
        else:
            path = find_manifest(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = path.parent if path else Path.cwd()
        if path is None:
            path = resolved_root / MANIFEST_FILENAME

        return cls(project_root=resolved_root, manifest_path=path, **cli_flags)

"""Manifest discovery.

Walk-up finder locates package.toml, similar to how git finds .git/.
Supports the PKGMANIFEST_MANIFEST env var and --manifest CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

MANIFEST_FILENAME = "package.toml"
MANIFEST_ENV_VAR = "PKGMANIFEST_MANIFEST"


def find_manifest(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for package.toml.

    Returns the path to the manifest, or None if not found.
    PKGMANIFEST_MANIFEST, when set, is returned as given even if the
    file is missing, so the later read error names that path.
    """
    env_path = os.environ.get(MANIFEST_ENV_VAR)
    if env_path:
        return Path(env_path)

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / MANIFEST_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None

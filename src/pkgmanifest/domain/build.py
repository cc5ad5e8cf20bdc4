"""Build modes."""

from __future__ import annotations

from enum import StrEnum


class Mode(StrEnum):
    """Whether a build includes development-only dependencies."""

    DEV = "dev"
    PROD = "prod"

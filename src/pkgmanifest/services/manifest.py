"""ManifestService: load a manifest and report on it.

Translates :class:`~pkgmanifest.errors.PackageError` failures into
``ServiceResult(ok=False)`` so the CLI can render them uniformly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pkgmanifest.domain.build import Mode
from pkgmanifest.domain.package import Dependencies, PackageConfig
from pkgmanifest.errors import DuplicateDependencyError, FileIoError, PackageError
from pkgmanifest.infrastructure.filesystem import ProjectIO
from pkgmanifest.services.result import ServiceResult

if TYPE_CHECKING:
    from pkgmanifest.infrastructure.filesystem import FileSystemReader

logger = logging.getLogger(__name__)


def _render_dependencies(deps: Dependencies) -> dict[str, str]:
    return {name: str(requirement) for name, requirement in sorted(deps.items())}


def _error_result(op: str, exc: PackageError) -> ServiceResult:
    if isinstance(exc, FileIoError):
        return ServiceResult.failure(
            op,
            "FILE_IO",
            str(exc),
            detail={
                "action": str(exc.action),
                "kind": str(exc.kind),
                "path": str(exc.path),
                "err": exc.err,
            },
        )
    if isinstance(exc, DuplicateDependencyError):
        return ServiceResult.failure(
            op, "DUPLICATE_DEPENDENCY", str(exc), detail={"name": exc.name}
        )
    return ServiceResult.failure(op, "ERROR", str(exc))


class ManifestService:
    """Read-only operations over a ``package.toml`` manifest."""

    def __init__(self, fs: FileSystemReader | None = None) -> None:
        self._fs = fs if fs is not None else ProjectIO()

    def load(self, path: Path) -> PackageConfig:
        return PackageConfig.read(path, self._fs)

    def check(self, path: Path) -> ServiceResult:
        """Validate the manifest and summarise its contents.

        A name declared in both dependency tables is reported as a
        warning: the manifest parses, but dev builds will fail.
        """
        op = "check"
        try:
            config = self.load(path)
        except PackageError as exc:
            return _error_result(op, exc)

        warnings: list[str] = []
        try:
            config.all_dependencies()
        except DuplicateDependencyError as exc:
            warnings.append(str(exc))

        data: dict[str, Any] = {
            "name": config.name,
            "version": str(config.version),
            "licences": list(config.licences),
            "repository_url": config.repository_url,
            "dependencies": _render_dependencies(config.dependencies),
            "dev_dependencies": _render_dependencies(config.dev_dependencies),
            "docs_pages": [page.path for page in config.docs.pages],
            "links": [link.model_dump() for link in config.links],
        }
        if config.description:
            data["description"] = config.description
        if config.erlang.otp_start_module:
            data["otp_start_module"] = config.erlang.otp_start_module
        return ServiceResult.success(op, data, warnings)

    def dependencies(self, path: Path, mode: Mode) -> ServiceResult:
        """Resolve the dependency set a build in *mode* needs."""
        op = "dependencies"
        try:
            deps = self.load(path).dependencies_for(mode)
        except PackageError as exc:
            logger.debug("Dependency resolution failed for %s", path, exc_info=True)
            return _error_result(op, exc)
        return ServiceResult.success(
            op, {"mode": str(mode), "dependencies": _render_dependencies(deps)}
        )

    def repository(self, path: Path) -> ServiceResult:
        """Report the declared repository and its URL."""
        op = "repository"
        try:
            config = self.load(path)
        except PackageError as exc:
            return _error_result(op, exc)
        return ServiceResult.success(
            op, {"type": config.repository.type, "url": config.repository_url}
        )

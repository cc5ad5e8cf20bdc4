"""The ``package.toml`` manifest model.

Sparse TOML contract: only ``name`` is required, every other key has a
default baked in here. Parsing either yields a complete, frozen
:class:`PackageConfig` or raises a single :class:`FileIoError`.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, BaseModel, Field, ValidationError, model_validator

from pkgmanifest.domain.build import Mode
from pkgmanifest.domain.repository import NoRepository, Repository
from pkgmanifest.domain.repository import repository_url as _repository_url
from pkgmanifest.domain.versions import Range, VersionField, default_version
from pkgmanifest.errors import DuplicateDependencyError, FileIoAction, FileIoError, FileKind

if TYPE_CHECKING:
    from pkgmanifest.infrastructure.filesystem import FileSystemReader

logger = logging.getLogger(__name__)

Dependencies = dict[str, Range]
"""Dependency name to acceptable version range."""

LICENCE_KEYS = ("licences", "licenses")


class ErlangConfig(BaseModel):
    """[erlang] section."""

    model_config = {"frozen": True}

    otp_start_module: str | None = Field(default=None, alias="otp-application-start-module")


class DocsPage(BaseModel):
    model_config = {"frozen": True}

    title: str
    path: str
    source: Path


class Docs(BaseModel):
    """[docs] section."""

    model_config = {"frozen": True}

    pages: list[DocsPage] = Field(default_factory=list)


class Link(BaseModel):
    model_config = {"frozen": True}

    title: str
    href: str


class PackageConfig(BaseModel):
    """Root manifest model, one per project."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1, pattern=r"^\S+$")
    version: VersionField = Field(default_factory=default_version)
    licences: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices(*LICENCE_KEYS),
    )
    description: str = ""
    docs: Docs = Field(default_factory=Docs)
    dependencies: Dependencies = Field(default_factory=dict)
    dev_dependencies: Dependencies = Field(default_factory=dict, alias="dev-dependencies")
    repository: Repository = Field(default_factory=NoRepository)
    links: list[Link] = Field(default_factory=list)
    erlang: ErlangConfig = Field(default_factory=ErlangConfig)

    @model_validator(mode="before")
    @classmethod
    def _single_licence_spelling(cls, data: Any) -> Any:
        if isinstance(data, dict) and all(key in data for key in LICENCE_KEYS):
            msg = "only one of 'licences' and 'licenses' may be given"
            raise ValueError(msg)
        return data

    @property
    def repository_url(self) -> str | None:
        return _repository_url(self.repository)

    def dependencies_for(self, mode: Mode) -> Dependencies:
        """Return the dependencies a build in *mode* needs.

        Dev builds get runtime and dev dependencies merged (and may raise
        :class:`DuplicateDependencyError`); prod builds get a copy of the
        runtime dependencies only.
        """
        match mode:
            case Mode.DEV:
                return self.all_dependencies()
            case Mode.PROD:
                return dict(self.dependencies)

    def all_dependencies(self) -> Dependencies:
        """Merge runtime and dev dependencies into a fresh mapping.

        Runtime dependencies are inserted first, so a name declared in
        both tables is reported while inserting the dev entry.
        """
        deps: Dependencies = {}
        for table in (self.dependencies, self.dev_dependencies):
            for name, requirement in table.items():
                if name in deps:
                    raise DuplicateDependencyError(name)
                deps[name] = requirement
        logger.debug("Resolved %d dependencies for %s", len(deps), self.name)
        return deps

    @classmethod
    def parse(cls, text: str, path: Path) -> PackageConfig:
        """Parse manifest *text*; *path* is only used for error reporting."""
        try:
            data = tomllib.loads(text)
            return cls.model_validate(data)
        except (tomllib.TOMLDecodeError, ValidationError) as exc:
            raise FileIoError(
                action=FileIoAction.PARSE,
                kind=FileKind.FILE,
                path=path,
                err=str(exc),
            ) from exc

    @classmethod
    def read(cls, path: Path | str, fs: FileSystemReader) -> PackageConfig:
        """Read and parse the manifest at *path* through *fs*.

        Errors raised by *fs* propagate unchanged.
        """
        path = Path(path)
        text = fs.read(path)
        config = cls.parse(text, path)
        logger.debug("Parsed manifest %s for %s %s", path, config.name, config.version)
        return config

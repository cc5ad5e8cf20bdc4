"""Semantic versions and version requirements.

Versions are :class:`semver.Version` values. Requirements use the Hex
grammar found in ``package.toml`` dependency tables::

    "~> 1.0"                      # >= 1.0.0 and < 2.0.0
    "~> 1.2.3"                    # >= 1.2.3 and < 1.3.0
    ">= 1.0.0 and < 2.0.0"
    "1.4.0 or >= 2.0.0"           # bare version means ==

``and`` binds tighter than ``or``. Trailing components may be omitted
(``1.0`` is ``1.0.0``) except that ``~>`` needs at least ``major.minor``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, PlainSerializer, PlainValidator
from pydantic_core import core_schema
from semver import Version

from pkgmanifest.errors import InvalidRangeError, InvalidVersionError

DEFAULT_VERSION = "0.1.0"

_CLAUSE_RE = re.compile(r"^(==|!=|>=|<=|~>|>|<)?\s*(\S+)$")
_OR_RE = re.compile(r"\s+or\s+")
_AND_RE = re.compile(r"\s+and\s+")


def parse_version(text: str) -> Version:
    """Parse a full ``major.minor.patch[-pre][+build]`` version."""
    try:
        return Version.parse(text.strip())
    except (TypeError, ValueError) as exc:
        msg = f"Invalid version {text!r}: {exc}"
        raise InvalidVersionError(msg) from exc


def default_version() -> Version:
    return Version.parse(DEFAULT_VERSION)


def _validate_version(value: Any) -> Version:
    if isinstance(value, Version):
        return value
    if not isinstance(value, str):
        msg = f"expected a version string, got {type(value).__name__}"
        raise ValueError(msg)
    return parse_version(value)


VersionField = Annotated[
    Version,
    PlainValidator(_validate_version),
    PlainSerializer(str, return_type=str),
]
"""Pydantic field type accepting a version string."""


@dataclass(frozen=True)
class Clause:
    """A single ``OP VERSION`` comparison.

    ``upper`` is the exclusive bound of a ``~>`` clause; it is None for
    every other operator.
    """

    op: str
    version: Version
    upper: Version | None = None

    def allows(self, version: Version) -> bool:
        match self.op:
            case "==":
                return version == self.version
            case "!=":
                return version != self.version
            case ">":
                return version > self.version
            case ">=":
                return version >= self.version
            case "<":
                return version < self.version
            case "<=":
                return version <= self.version
            case "~>":
                assert self.upper is not None
                return self.version <= version < self.upper
        raise AssertionError(self.op)

    def admits_prerelease_of(self, version: Version) -> bool:
        """Whether this clause opts in to pre-releases of *version*'s release."""
        if self.op == "==":
            return True
        return self.version.prerelease is not None and (
            self.version.major,
            self.version.minor,
            self.version.patch,
        ) == (version.major, version.minor, version.patch)


def _pessimistic_upper(version: Version, components: int) -> Version:
    if components == 2:
        return Version(version.major + 1, 0, 0)
    return Version(version.major, version.minor + 1, 0)


def _parse_clause(text: str, source: str) -> Clause:
    match = _CLAUSE_RE.match(text.strip())
    if match is None:
        msg = f"Invalid version requirement {source!r}: cannot parse {text!r}"
        raise InvalidRangeError(msg)
    op = match.group(1) or "=="
    raw = match.group(2)
    core = re.split(r"[-+]", raw, maxsplit=1)[0]
    components = core.count(".") + 1
    if op == "~>" and components < 2:
        msg = f"Invalid version requirement {source!r}: '~>' needs at least major.minor"
        raise InvalidRangeError(msg)
    try:
        version = Version.parse(raw, optional_minor_and_patch=True)
    except (TypeError, ValueError) as exc:
        msg = f"Invalid version requirement {source!r}: {exc}"
        raise InvalidRangeError(msg) from exc
    upper = None
    if op == "~>":
        upper = _pessimistic_upper(version, components)
    return Clause(op=op, version=version, upper=upper)


class Range:
    """A set of acceptable versions, expressed as a Hex requirement.

    Two ranges compare equal when they contain the same clauses, so
    ``Range.parse("~>1.0") == Range.parse("~> 1.0")`` and
    ``Range.parse(">= 1.0") == Range.parse(">= 1.0.0")``.
    """

    __slots__ = ("_alternatives", "_text")

    def __init__(self, alternatives: tuple[tuple[Clause, ...], ...], text: str) -> None:
        self._alternatives = alternatives
        self._text = text

    @classmethod
    def parse(cls, text: str) -> Range:
        source = " ".join(text.split())
        if not source:
            msg = "Invalid version requirement: empty string"
            raise InvalidRangeError(msg)
        alternatives: list[tuple[Clause, ...]] = []
        for group in _OR_RE.split(source):
            clauses = tuple(_parse_clause(part, source) for part in _AND_RE.split(group))
            alternatives.append(clauses)
        return cls(tuple(alternatives), source)

    def allows(self, version: Version | str) -> bool:
        """Return True when *version* satisfies this requirement."""
        if isinstance(version, str):
            version = parse_version(version)
        for clauses in self._alternatives:
            if version.prerelease is not None and not any(
                c.admits_prerelease_of(version) for c in clauses
            ):
                continue
            if all(c.allows(version) for c in clauses):
                return True
        return False

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, (Version, str)):
            return False
        return self.allows(version)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self._alternatives == other._alternatives

    def __hash__(self) -> int:
        return hash(self._alternatives)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Range({self._text!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_range,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


def _validate_range(value: Any) -> Range:
    if isinstance(value, Range):
        return value
    if not isinstance(value, str):
        msg = f"expected a version requirement string, got {type(value).__name__}"
        raise ValueError(msg)
    return Range.parse(value)

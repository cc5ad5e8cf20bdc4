"""Tests for the PackageConfig manifest model."""

from pathlib import Path

import pytest
from semver import Version

from pkgmanifest.domain.build import Mode
from pkgmanifest.domain.package import Docs, DocsPage, ErlangConfig, Link, PackageConfig
from pkgmanifest.domain.repository import GitHub, NoRepository
from pkgmanifest.domain.versions import Range
from pkgmanifest.errors import (
    DuplicateDependencyError,
    FileIoAction,
    FileIoError,
    FileKind,
)
from pkgmanifest.infrastructure.filesystem import InMemoryFileSystem

PATH = Path("/project/package.toml")


def _read(text: str) -> PackageConfig:
    return PackageConfig.read(PATH, InMemoryFileSystem({PATH: text}))


def _ranges(deps: dict[str, Range]) -> dict[str, str]:
    return {name: str(r) for name, r in deps.items()}


class TestDefaults:
    def test_minimal_manifest(self) -> None:
        config = _read('name = "my_package"\n')
        assert config.name == "my_package"
        assert config.version == Version(0, 1, 0)
        assert config.licences == []
        assert config.description == ""
        assert config.docs == Docs()
        assert config.dependencies == {}
        assert config.dev_dependencies == {}
        assert config.repository == NoRepository()
        assert config.links == []
        assert config.erlang == ErlangConfig()
        assert config.erlang.otp_start_module is None

    def test_missing_version_defaults(self) -> None:
        config = _read('name = "a"\ndescription = "no version here"\n')
        assert str(config.version) == "0.1.0"

    def test_explicit_version(self) -> None:
        assert _read('name = "a"\nversion = "2.3.4-rc.1"\n').version == Version.parse("2.3.4-rc.1")


class TestFullManifest:
    def test_every_section(self, full_manifest_text: str) -> None:
        config = _read(full_manifest_text)
        assert config.name == "widgets"
        assert config.version == Version(1, 2, 3)
        assert config.licences == ["Apache-2.0", "MIT"]
        assert config.description == "Widgets for everyone"
        assert config.docs.pages == [
            DocsPage(title="Guide", path="guide.html", source=Path("docs/guide.md"))
        ]
        assert config.links == [Link(title="Home", href="https://widgets.example")]
        assert config.repository == GitHub(user="acme", repo="widgets")
        assert config.repository_url == "https://github.com/acme/widgets"
        assert _ranges(config.dependencies) == {
            "stdlib": "~> 0.18",
            "json": ">= 1.0.0 and < 2.0.0",
        }
        assert _ranges(config.dev_dependencies) == {"unit_test": "~> 1.0"}
        assert config.erlang.otp_start_module == "widgets_app"

    def test_unknown_keys_ignored(self) -> None:
        config = _read('name = "a"\ntarget = "erlang"\n[extra]\nx = 1\n')
        assert config.name == "a"

    def test_snake_case_erlang_key_ignored(self) -> None:
        config = _read('name = "a"\n[erlang]\notp_start_module = "my_app"\n')
        assert config.erlang.otp_start_module is None

    def test_frozen(self) -> None:
        config = _read('name = "a"\n')
        with pytest.raises(Exception):
            config.name = "b"  # type: ignore[misc]


class TestLicenceAlias:
    def test_british_spelling(self) -> None:
        assert _read('name = "a"\nlicences = ["MIT"]\n').licences == ["MIT"]

    def test_american_spelling(self) -> None:
        assert _read('name = "a"\nlicenses = ["MIT"]\n').licences == ["MIT"]

    def test_spellings_equivalent(self) -> None:
        british = _read('name = "a"\nlicences = ["MIT", "Apache-2.0"]\n')
        american = _read('name = "a"\nlicenses = ["MIT", "Apache-2.0"]\n')
        assert british == american

    def test_both_spellings_rejected(self) -> None:
        with pytest.raises(FileIoError, match="licences"):
            _read('name = "a"\nlicences = ["MIT"]\nlicenses = ["MIT"]\n')

    def test_construct_by_field_name(self) -> None:
        config = PackageConfig(name="a", licences=["MIT"])
        assert config.licences == ["MIT"]


class TestParseFailures:
    def _assert_parse_error(self, text: str) -> FileIoError:
        with pytest.raises(FileIoError) as excinfo:
            _read(text)
        err = excinfo.value
        assert err.action is FileIoAction.PARSE
        assert err.kind is FileKind.FILE
        assert err.path == PATH
        assert err.err
        return err

    def test_invalid_version(self) -> None:
        err = self._assert_parse_error('name = "a"\nversion = "not-a-version"\n')
        assert "not-a-version" in (err.err or "")
        assert str(PATH) in str(err)

    def test_missing_name(self) -> None:
        err = self._assert_parse_error('version = "1.0.0"\n')
        assert "name" in (err.err or "")

    def test_empty_name(self) -> None:
        self._assert_parse_error('name = ""\n')

    @pytest.mark.parametrize("name", ["   ", "my package", "a\\tb"])
    def test_name_with_whitespace(self, name: str) -> None:
        err = self._assert_parse_error(f'name = "{name}"\n')
        assert "name" in (err.err or "")

    def test_empty_document(self) -> None:
        self._assert_parse_error("")

    def test_invalid_toml(self) -> None:
        self._assert_parse_error('name = "a\n')

    def test_wrong_shape(self) -> None:
        self._assert_parse_error('name = "a"\nlicences = "MIT"\n')

    def test_invalid_range(self) -> None:
        err = self._assert_parse_error('name = "a"\n[dependencies]\nb = "~> 1"\n')
        assert "dependencies" in (err.err or "")

    def test_unknown_repository_type(self) -> None:
        self._assert_parse_error('name = "a"\n[repository]\ntype = "svn"\nurl = "x"\n')

    def test_duplicate_key_in_table(self) -> None:
        self._assert_parse_error('name = "a"\n[dependencies]\nb = "~> 1.0"\nb = "~> 2.0"\n')

    def test_docs_page_missing_source(self) -> None:
        self._assert_parse_error('name = "a"\n[docs]\npages = [{ title = "T", path = "p" }]\n')


class TestRead:
    def test_reader_errors_propagate_unchanged(self) -> None:
        original = FileIoError(
            action=FileIoAction.READ, kind=FileKind.FILE, path=PATH, err="disk on fire"
        )

        class BrokenReader:
            def read(self, path: Path) -> str:
                raise original

        with pytest.raises(FileIoError) as excinfo:
            PackageConfig.read(PATH, BrokenReader())
        assert excinfo.value is original

    def test_missing_file(self) -> None:
        with pytest.raises(FileIoError) as excinfo:
            PackageConfig.read(PATH, InMemoryFileSystem())
        assert excinfo.value.action is FileIoAction.READ

    def test_accepts_string_path(self) -> None:
        fs = InMemoryFileSystem({PATH: 'name = "a"\n'})
        assert PackageConfig.read(str(PATH), fs).name == "a"


class TestDependencies:
    MANIFEST = 'name = "a"\n[dependencies]\na = "~> 1.0"\n[dev-dependencies]\nb = "~> 2.0"\n'
    CLASHING = 'name = "a"\n[dependencies]\nx = "~> 1.0"\n[dev-dependencies]\nx = "~> 2.0"\n'

    def test_dev_mode_merges(self) -> None:
        deps = _read(self.MANIFEST).dependencies_for(Mode.DEV)
        assert deps == {"a": Range.parse("~>1.0"), "b": Range.parse("~>2.0")}

    def test_prod_mode_runtime_only(self) -> None:
        deps = _read(self.MANIFEST).dependencies_for(Mode.PROD)
        assert deps == {"a": Range.parse("~>1.0")}

    def test_prod_mode_returns_copy(self) -> None:
        config = _read(self.MANIFEST)
        deps = config.dependencies_for(Mode.PROD)
        deps["injected"] = Range.parse("~> 9.0")
        assert "injected" not in config.dependencies

    def test_collision_fails_all_dependencies(self) -> None:
        config = _read(self.CLASHING)
        with pytest.raises(DuplicateDependencyError) as excinfo:
            config.all_dependencies()
        assert excinfo.value.name == "x"
        assert "'x'" in str(excinfo.value)

    def test_collision_fails_dev_mode(self) -> None:
        with pytest.raises(DuplicateDependencyError):
            _read(self.CLASHING).dependencies_for(Mode.DEV)

    def test_collision_invisible_in_prod_mode(self) -> None:
        deps = _read(self.CLASHING).dependencies_for(Mode.PROD)
        assert deps == {"x": Range.parse("~> 1.0")}

    def test_collision_with_identical_range(self) -> None:
        config = PackageConfig.model_validate(
            {
                "name": "a",
                "dependencies": {"x": Range.parse("~> 1.0")},
                "dev-dependencies": {"x": Range.parse("~> 1.0")},
            }
        )
        with pytest.raises(DuplicateDependencyError):
            config.all_dependencies()

    def test_all_dependencies_idempotent(self) -> None:
        config = _read(self.MANIFEST)
        first = config.all_dependencies()
        second = config.all_dependencies()
        assert first == second
        assert first is not second
        assert config.dependencies == {"a": Range.parse("~> 1.0")}

    def test_empty(self) -> None:
        assert _read('name = "a"\n').all_dependencies() == {}

    def test_dev_dependencies_by_alias(self) -> None:
        config = PackageConfig.model_validate({"name": "a", "dev-dependencies": {"b": "~> 2.0"}})
        assert config.dev_dependencies == {"b": Range.parse("~> 2.0")}

    def test_snake_case_dev_table_ignored(self) -> None:
        config = _read('name = "a"\n[dev_dependencies]\nb = "~> 2.0"\n')
        assert config.dev_dependencies == {}

    def test_only_hyphenated_dev_table_used(self) -> None:
        config = _read(
            'name = "a"\n'
            '[dev-dependencies]\nb = "~> 2.0"\n'
            '[dev_dependencies]\nc = "~> 3.0"\n'
        )
        assert config.dev_dependencies == {"b": Range.parse("~> 2.0")}


class TestBuildMode:
    def test_values(self) -> None:
        assert Mode("dev") is Mode.DEV
        assert Mode("prod") is Mode.PROD

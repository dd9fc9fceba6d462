"""Tests for manifest-based version resolution.

Covers installation-root detection (direct and ``bin/`` launchers,
symlinks), pre-release suffix handling, and tolerance of missing or
corrupt manifests.
"""

from __future__ import annotations

import os
from pathlib import Path

from idelinux.discovery.manifest import (
    installation_root,
    parse_manifest_version,
    resolve_manifest_version,
    resolve_real_path,
)
from idelinux.discovery.models import Version

from tests.discovery.helpers import create_install, create_symlinked_install, write_manifest

MANIFEST = "resources/app/package.json"


class TestParseManifestVersion:

    def test_plain_version(self) -> None:
        assert parse_manifest_version("1.96.0") == Version(1, 96, 0)

    def test_prerelease_suffix_dropped(self) -> None:
        assert parse_manifest_version("1.2.3-insider") == Version(1, 2, 3)

    def test_garbage_is_none(self) -> None:
        assert parse_manifest_version("nightly") is None


class TestResolveRealPath:

    def test_regular_file_unchanged(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor")
        assert resolve_real_path(str(exe)) == str(exe)

    def test_missing_path_unchanged(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "nope")
        assert resolve_real_path(missing) == missing

    def test_follows_absolute_link(self, tmp_path: Path) -> None:
        link = create_symlinked_install(tmp_path / "bin", tmp_path / "opt" / "cursor", "cursor")
        assert resolve_real_path(str(link)) == str(tmp_path / "opt" / "cursor" / "bin" / "cursor")

    def test_follows_relative_link(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "opt" / "cursor", "cursor")
        link_dir = tmp_path / "links"
        link_dir.mkdir()
        os.symlink(os.path.join("..", "opt", "cursor", "cursor"), link_dir / "cursor")
        assert resolve_real_path(str(link_dir / "cursor")) == str(exe)


class TestInstallationRoot:

    def test_launcher_in_root(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor")
        assert installation_root(str(exe)) == tmp_path / "cursor"

    def test_launcher_in_bin_skips_one_level(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "code-insiders", "code-insiders", in_bin=True)
        assert installation_root(str(exe)) == tmp_path / "code-insiders"


class TestResolveManifestVersion:

    def test_reads_version(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor", version="0.42.3")
        result = resolve_manifest_version(str(exe), MANIFEST)
        assert result.found
        assert result.version == Version(0, 42, 3)
        assert result.manifest_path == tmp_path / "cursor" / MANIFEST

    def test_insider_suffix(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "ci", "code-insiders", version="1.2.3-insider", in_bin=True)
        result = resolve_manifest_version(str(exe), MANIFEST)
        assert result.version == Version(1, 2, 3)

    def test_through_symlink(self, tmp_path: Path) -> None:
        link = create_symlinked_install(
            tmp_path / "usr" / "bin", tmp_path / "usr" / "share" / "cursor", "cursor", "2.0.1",
        )
        assert resolve_manifest_version(str(link), MANIFEST).version == Version(2, 0, 1)

    def test_missing_manifest(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor", version=None)
        result = resolve_manifest_version(str(exe), MANIFEST)
        assert not result.found
        assert result.version is None

    def test_corrupt_manifest(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor", version=None)
        manifest = tmp_path / "cursor" / MANIFEST
        manifest.parent.mkdir(parents=True)
        manifest.write_text("{ not json")
        assert not resolve_manifest_version(str(exe), MANIFEST).found

    def test_manifest_without_version(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor", version=None)
        manifest = tmp_path / "cursor" / MANIFEST
        manifest.parent.mkdir(parents=True)
        manifest.write_text('{"name": "cursor"}')
        assert not resolve_manifest_version(str(exe), MANIFEST).found

    def test_non_string_version(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor", version=None)
        write_manifest(tmp_path / "cursor", 123)
        assert not resolve_manifest_version(str(exe), MANIFEST).found

    def test_top_level_array(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor", version=None)
        manifest = tmp_path / "cursor" / MANIFEST
        manifest.parent.mkdir(parents=True)
        manifest.write_text("[1, 2, 3]")
        assert not resolve_manifest_version(str(exe), MANIFEST).found

    def test_unparseable_version_string(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor", version="latest")
        assert not resolve_manifest_version(str(exe), MANIFEST).found

    def test_manifest_is_directory(self, tmp_path: Path) -> None:
        exe = create_install(tmp_path / "cursor", "cursor", version=None)
        (tmp_path / "cursor" / MANIFEST).mkdir(parents=True)
        assert not resolve_manifest_version(str(exe), MANIFEST).found

    def test_relative_bare_name(self) -> None:
        assert not resolve_manifest_version("cursor", MANIFEST).found

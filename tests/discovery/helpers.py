"""Shared test helpers for creating fake editor installations.

Each helper creates a minimal but realistic directory layout that
simulates how VS Code-engine editors are installed on Linux: an
installation root holding ``resources/app/package.json`` and a
launcher either directly in the root or in a ``bin/`` subdirectory.
"""

from __future__ import annotations

import dataclasses
import json
import os
from pathlib import Path

from idelinux.discovery.families import CURSOR, VSCODE_INSIDERS, EditorFamily, FamilyRegistry


def write_manifest(root: Path, version: object) -> Path:
    """Write ``resources/app/package.json`` under an installation root."""
    manifest = root / "resources" / "app" / "package.json"
    manifest.parent.mkdir(parents=True, exist_ok=True)
    manifest.write_text(json.dumps({"name": "editor", "version": version}))
    return manifest


def create_install(
    root: Path,
    executable: str,
    version: object | None = "1.0.0",
    in_bin: bool = False,
) -> Path:
    """Create an installation and return its launcher path."""
    exe_dir = root / "bin" if in_bin else root
    exe_dir.mkdir(parents=True, exist_ok=True)
    exe = exe_dir / executable
    exe.write_text("#!/bin/sh\n")
    exe.chmod(0o755)
    if version is not None:
        write_manifest(root, version)
    return exe


def create_symlinked_install(
    link_dir: Path,
    root: Path,
    executable: str,
    version: str = "1.0.0",
) -> Path:
    """Create an install under *root* and a launcher symlink in *link_dir*."""
    target = create_install(root, executable, version=version, in_bin=True)
    link_dir.mkdir(parents=True, exist_ok=True)
    link = link_dir / executable
    os.symlink(target, link)
    return link


def create_desktop_entry(data_dir: Path, filename: str, exec_line: str) -> Path:
    """Create ``<data_dir>/applications/<filename>`` with an Exec= key."""
    apps = data_dir / "applications"
    apps.mkdir(parents=True, exist_ok=True)
    entry = apps / filename
    entry.write_text(
        "[Desktop Entry]\n"
        "Name=Editor\n"
        "Type=Application\n"
        f"Exec={exec_line}\n"
        "Icon=editor\n"
    )
    return entry


def isolated_family(base: EditorFamily, *well_known: Path) -> EditorFamily:
    """Copy *base* with well-known paths replaced by test paths."""
    return dataclasses.replace(base, well_known_paths=tuple(str(p) for p in well_known))


def isolated_registry(
    cursor_paths: tuple[Path, ...] = (),
    insiders_paths: tuple[Path, ...] = (),
) -> FamilyRegistry:
    """Registry of the built-in families with host paths swapped out."""
    registry = FamilyRegistry()
    registry.register(isolated_family(VSCODE_INSIDERS, *insiders_paths))
    registry.register(isolated_family(CURSOR, *cursor_paths))
    return registry


def isolated_env(tmp_path: Path) -> dict[str, str]:
    """Environment whose XDG_DATA_DIRS points at an empty test directory."""
    xdg = tmp_path / "xdg"
    xdg.mkdir(exist_ok=True)
    return {"XDG_DATA_DIRS": str(xdg)}

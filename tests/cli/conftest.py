"""Shared fixtures for CLI tests.

Commands build their own ``InstallationSelector``; these fixtures patch
it so that only installs under ``tmp_path`` are ever discovered.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from idelinux.discovery.selector import InstallationSelector

from tests.discovery.helpers import create_install, isolated_env, isolated_registry


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def cursor_exe(tmp_path: Path) -> Path:
    """A Cursor 0.42.3 install outside any well-known location."""
    return create_install(tmp_path / "opt" / "cursor", "cursor", "0.42.3")


@pytest.fixture
def isolate_selector(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, home: Path):
    """Patch CLI modules to discover only the given well-known paths."""

    def _isolate(*cursor_paths: Path) -> None:
        def factory(*args, **kwargs) -> InstallationSelector:
            return InstallationSelector(
                registry=isolated_registry(cursor_paths=cursor_paths),
                home=home,
                environ=isolated_env(tmp_path),
            )

        monkeypatch.setattr("idelinux.cli.detect_cmd.InstallationSelector", factory)
        monkeypatch.setattr("idelinux.cli.open_cmd.InstallationSelector", factory)

    return _isolate

"""Shared fixtures for idelinux tests."""

import pathlib

import pytest


@pytest.fixture
def home(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty temporary home directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def project_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty temporary project directory."""
    project = tmp_path / "MyGame"
    project.mkdir()
    return project

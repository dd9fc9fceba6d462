"""Tests for ``idelinux configure``."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from idelinux.cli.main import cli


class TestConfigure:

    def test_creates_documents(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(
            cli, ["configure", str(project_dir), "--solution", "MyGame.sln", "--json"],
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "launch.json": "created",
            "settings.json": "created",
            "extensions.json": "created",
        }
        settings = json.loads((project_dir / ".vscode" / "settings.json").read_text())
        assert settings["dotnet.defaultSolution"] == "MyGame.sln"

    def test_solution_path_reduced_to_name(self, runner: CliRunner, project_dir: Path) -> None:
        runner.invoke(
            cli, ["configure", str(project_dir), "--solution", str(project_dir / "MyGame.sln")],
        )
        settings = json.loads((project_dir / ".vscode" / "settings.json").read_text())
        assert settings["dotnet.defaultSolution"] == "MyGame.sln"

    def test_second_run_unchanged(self, runner: CliRunner, project_dir: Path) -> None:
        args = ["configure", str(project_dir), "--solution", "MyGame.sln"]
        runner.invoke(cli, args)
        result = runner.invoke(cli, args + ["--json"])
        assert set(json.loads(result.output).values()) == {"unchanged"}

    def test_text_output(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(cli, ["configure", str(project_dir), "-s", "MyGame.sln"])
        assert result.exit_code == 0
        assert "launch.json" in result.output
        assert "created" in result.output

    def test_no_patch(self, runner: CliRunner, project_dir: Path) -> None:
        vscode = project_dir / ".vscode"
        vscode.mkdir()
        (vscode / "extensions.json").write_text('{"recommendations": []}')
        result = runner.invoke(
            cli, ["configure", str(project_dir), "-s", "MyGame.sln", "--no-patch", "--json"],
        )
        assert json.loads(result.output)["extensions.json"] == "unchanged"
        assert (vscode / "extensions.json").read_text() == '{"recommendations": []}'

    def test_solution_required(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(cli, ["configure", str(project_dir)])
        assert result.exit_code == 2
        assert "Missing option" in result.output

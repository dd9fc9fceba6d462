"""``idelinux configure <project>`` -- Create or patch .vscode documents.

Exit Codes:
    0 -- Always; per-document problems are reported, not fatal.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from idelinux.cli.output import print_patch_outcomes
from idelinux.workspace import WorkspacePatcher


@click.command("configure")
@click.argument(
    "project_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--solution", "-s",
    required=True,
    help="Solution file name written to settings.json (e.g. MyGame.sln).",
)
@click.option(
    "--no-patch",
    is_flag=True,
    help="Only create missing documents; leave existing ones untouched.",
)
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of text.")
def configure_command(
    project_dir: Path, solution: str, no_patch: bool, as_json: bool,
) -> None:
    """Create or patch launch.json, settings.json and extensions.json.

    Existing documents are only extended with the entries idelinux
    needs; unparseable or unmanaged documents are left as they are.
    """
    patcher = WorkspacePatcher(Path(solution).name)
    outcomes = patcher.create_extra_files(project_dir, enable_patch=not no_patch)

    if as_json:
        click.echo(json.dumps({name: o.value for name, o in outcomes.items()}, indent=2))
    else:
        print_patch_outcomes(outcomes)

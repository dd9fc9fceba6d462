"""``idelinux open <path>`` -- Open an editor at a file position.

Exit Codes:
    0 -- The editor process was started.
    1 -- The editor process could not be started.
    2 -- No editor installation found.
"""

from __future__ import annotations

import sys

import click

from idelinux.discovery import InstallationSelector
from idelinux.exceptions import LaunchError
from idelinux.launch import open_file


@click.command("open")
@click.argument("path", default="", required=False)
@click.option("--line", "-l", type=int, default=1, show_default=True)
@click.option("--column", "-c", type=int, default=0, show_default=True)
@click.option(
    "--solution", "-s",
    required=True,
    type=click.Path(dir_okay=False),
    help="Solution file; its directory is opened as the project.",
)
@click.option(
    "--editor", "-e",
    default=None,
    help="Editor executable to use instead of the best discovered one.",
)
def open_command(
    path: str, line: int, column: int, solution: str, editor: str | None,
) -> None:
    """Open PATH at LINE:COLUMN in the project that owns SOLUTION."""
    selector = InstallationSelector()
    installation = (
        selector.find_installation(editor) if editor else selector.best()
    )
    if installation is None:
        where = f" at {editor}" if editor else ""
        click.echo(f"No editor installation found{where}.", err=True)
        sys.exit(2)

    try:
        open_file(installation.path, path, line, column, solution)
    except LaunchError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Opened with {installation.name}")

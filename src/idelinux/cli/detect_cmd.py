"""``idelinux detect`` -- List editor installations.

Exit Codes:
    0 -- At least one installation was found.
    2 -- No installation found.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from idelinux.cli.output import installation_to_dict, print_installations
from idelinux.discovery import InstallationSelector


@click.command("detect")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table.")
@click.option(
    "--home",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Home directory to search (default: the current user's).",
)
def detect_command(as_json: bool, home: Path | None) -> None:
    """List VS Code-engine editor installations, best last."""
    installations = InstallationSelector(home=home).discover()

    if as_json:
        click.echo(json.dumps({
            "installations": [installation_to_dict(i) for i in installations],
            "selected": installations[-1].path if installations else None,
        }, indent=2))
    else:
        print_installations(installations)

    sys.exit(0 if installations else 2)

"""idelinux CLI -- Discover, configure, and launch VS Code-engine editors.

Entry point for the ``idelinux`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    detect     -- List editor installations, best last.
    configure  -- Create or patch a project's .vscode documents.
    open       -- Open the best (or a given) editor at a file position.

Usage::

    idelinux detect
    idelinux detect --json
    idelinux configure ./MyGame --solution MyGame.sln
    idelinux open Assets/Player.cs --line 42 --solution ./MyGame/MyGame.sln
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from idelinux import __version__
from idelinux.cli.configure_cmd import configure_command
from idelinux.cli.detect_cmd import detect_command
from idelinux.cli.open_cmd import open_command


def configure_logging(verbose: bool) -> None:
    """Route idelinux logging through Rich on stderr; DEBUG when *verbose*."""
    logger = logging.getLogger("idelinux")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """idelinux: VS Code-engine editor integration for Linux.

    Finds installed VS Code Insiders and Cursor builds, keeps a project's
    .vscode launch, settings, and extension recommendations in shape,
    and opens files in the chosen editor.
    """
    configure_logging(verbose)


# Register all subcommands
cli.add_command(detect_command)
cli.add_command(configure_command)
cli.add_command(open_command)

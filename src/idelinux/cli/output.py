"""Rich output formatting helpers for the idelinux CLI."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from idelinux.discovery.models import Installation
from idelinux.workspace.patcher import PatchOutcome

_OUTCOME_STYLES: dict[PatchOutcome, str] = {
    PatchOutcome.CREATED: "bold green",
    PatchOutcome.PATCHED: "cyan",
    PatchOutcome.UNCHANGED: "dim",
    PatchOutcome.SKIPPED: "yellow",
    PatchOutcome.FAILED: "bold red",
}

console = Console()


def installation_to_dict(installation: Installation) -> dict[str, Any]:
    return {
        "name": installation.name,
        "path": installation.path,
        "family": installation.family.key,
        "version": str(installation.version),
        "is_prerelease": installation.is_prerelease,
        "supports_analyzers": installation.supports_analyzers,
        "latest_language_version": str(installation.latest_language_version),
    }


def print_installations(installations: list[Installation]) -> None:
    """Print ranked installations; the last row is the one that is used.

    Args:
        installations: Output of ``rank()``, least preferred first.
    """
    if not installations:
        console.print("[dim]No editor installations found.[/dim]")
        return

    table = Table(title="Editor Installations", show_header=True, header_style="bold")
    table.add_column("Name", style="bold")
    table.add_column("Version")
    table.add_column("Channel", justify="center")
    table.add_column("Path", overflow="fold")

    best = installations[-1]
    for installation in installations:
        channel = (
            Text("prerelease", style="yellow")
            if installation.is_prerelease
            else Text("stable", style="green")
        )
        version = "unknown" if installation.version.is_unknown else str(installation.version)
        marker = " *" if installation is best else ""
        table.add_row(installation.name + marker, version, channel, installation.path)

    console.print(table)
    console.print(f"[bold]{len(installations)}[/bold] installation(s); * = selected")


def print_patch_outcomes(outcomes: dict[str, PatchOutcome]) -> None:
    """Print one line per managed document with its patch outcome."""
    for name, outcome in outcomes.items():
        style = _OUTCOME_STYLES.get(outcome, "white")
        console.print(Text.assemble((f"{name:<16}", "bold"), (outcome.value, style)))

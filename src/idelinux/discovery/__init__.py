"""Discovery of VS Code-engine editor installations on Linux.

Finds installed editors (VS Code Insiders, Cursor) from well-known
paths, home-relative paths, and XDG desktop entries, validates them,
reads their versions, and ranks them.

Public API::

    from idelinux.discovery import InstallationSelector

    selector = InstallationSelector()
    for installation in selector.discover():
        print(f"{installation.name}: {installation.path}")
    best = selector.best()
"""

from __future__ import annotations

from idelinux.discovery.families import (
    CURSOR,
    VSCODE_INSIDERS,
    EditorFamily,
    FamilyRegistry,
    default_registry,
)
from idelinux.discovery.models import (
    CandidateSource,
    Installation,
    InstallationCandidate,
    Version,
)
from idelinux.discovery.selector import (
    InstallationSelector,
    discover_installations,
    rank,
    select_best,
    try_discover_installation,
)

__all__ = [
    "CURSOR",
    "CandidateSource",
    "EditorFamily",
    "FamilyRegistry",
    "Installation",
    "InstallationCandidate",
    "InstallationSelector",
    "VSCODE_INSIDERS",
    "Version",
    "default_registry",
    "discover_installations",
    "rank",
    "select_best",
    "try_discover_installation",
]

"""Boundary with the project-file generator.

Generating solution and project files is outside this package. The
sync flow only needs a solution file name and a way to trigger a full
regeneration.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from idelinux.discovery.models import Installation


class ProjectGenerator(Protocol):
    """What the sync flow requires from a project generator."""

    def solution_file(self) -> str:
        """Absolute path of the solution file the generator writes."""
        ...

    def sync_all(self) -> None:
        """Regenerate every project and solution file."""
        ...


# Builds a generator bound to a selected installation.
GeneratorFactory = Callable[[Installation], ProjectGenerator]

"""Host integration: editor context and solution generation flow."""

from __future__ import annotations

from idelinux.integration.context import EditorContext
from idelinux.integration.generator import GeneratorFactory, ProjectGenerator
from idelinux.integration.sync import (
    generate_solution,
    generate_solution_with,
    installation_details,
)

__all__ = [
    "EditorContext",
    "GeneratorFactory",
    "ProjectGenerator",
    "generate_solution",
    "generate_solution_with",
    "installation_details",
]

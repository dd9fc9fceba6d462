"""Solution generation with automatic editor selection.

Mirrors what a host does when asked to regenerate project files from
the command line:

1. If the context already names an editor, generate with it.
2. Otherwise discover and rank every installation, log each one, pick
   the best, make it current for the duration of the generation, and
   restore the previous editor afterwards.

Discovery problems never propagate: they are logged and reported as
"no installation found". Generator failures are logged the same way.
After a successful generation the ``.vscode`` documents are created or
patched for the solution's project directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from idelinux.discovery.families import FamilyRegistry
from idelinux.discovery.models import Installation
from idelinux.discovery.selector import InstallationSelector
from idelinux.integration.context import EditorContext
from idelinux.integration.generator import GeneratorFactory
from idelinux.workspace.patcher import WorkspacePatcher

logger = logging.getLogger(__name__)


def installation_details(installation: Installation) -> str:
    """One-line description used in detection and sync log lines."""
    return (
        f"{installation.name} Path:{installation.path}, "
        f"LanguageVersionSupport:{installation.latest_language_version} "
        f"AnalyzersSupport:{installation.supports_analyzers}"
    )


def generate_solution_with(
    selector: InstallationSelector,
    installation_path: str | None,
    generator_factory: GeneratorFactory,
    lookup_discovered: bool = True,
) -> Installation | None:
    """Generate project files using the editor at *installation_path*.

    Returns:
        The installation used, or None if the path is not a known editor
        or generation failed.
    """
    installation = selector.find_installation(
        installation_path, lookup_discovered=lookup_discovered,
    )
    if installation is None:
        logger.warning("No IDE installation found in %s!", installation_path)
        return None

    logger.info("Using %s", installation_details(installation))
    try:
        generator = generator_factory(installation)
        generator.sync_all()
        solution_file = Path(generator.solution_file())
    except Exception:
        logger.warning("Project generation failed for %s", installation.path, exc_info=True)
        return None

    WorkspacePatcher(solution_file.name).create_extra_files(solution_file.parent)
    return installation


def generate_solution(
    context: EditorContext,
    generator_factory: GeneratorFactory,
    registry: FamilyRegistry | None = None,
    selector: InstallationSelector | None = None,
) -> Installation | None:
    """Generate project files with the current or best available editor.

    Args:
        context: Host editor state; restored before returning.
        generator_factory: Builds the project generator for an editor.
        registry: Editor families to discover (defaults to built-ins).
        selector: Preconfigured selector (overrides *registry*).

    Returns:
        The installation used, or None when nothing was generated.
    """
    selector = selector or InstallationSelector(registry=registry)

    if context.current_installation:
        logger.info("Using default editor settings for IDE installation")
        return generate_solution_with(
            selector, context.current_installation, generator_factory,
        )

    logger.info("IDE is not set as your default editor, looking for installations")
    try:
        installations = selector.discover()
    except Exception:
        logger.error("Error detecting IDE installations", exc_info=True)
        return None

    for installation in installations:
        logger.info("Detected %s", installation_details(installation))

    if not installations:
        logger.info("No IDE installation found!")
        return None

    best = installations[-1]
    with context.use_installation(best.path):
        return generate_solution_with(selector, best.path, generator_factory)

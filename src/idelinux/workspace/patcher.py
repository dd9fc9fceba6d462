"""Idempotent creation and patching of ``.vscode`` workspace documents.

Three documents are managed, each independently:

- ``launch.json``: must contain a configuration whose ``type`` is the
  Unity debugger type.
- ``settings.json``: ``dotnet.defaultSolution`` must name the project's
  solution file. Files without a ``files.exclude`` section are treated
  as user-owned and left alone.
- ``extensions.json``: ``recommendations`` must list the Unity extension.

Per-document state machine::

    absent  -> write default content                     (CREATED)
    present -> parse fails / not managed                 (SKIPPED)
            -> required entry present                    (UNCHANGED)
            -> required entry missing -> add and rewrite (PATCHED)

An unchanged file is never rewritten, so its timestamp is preserved.
Patching only appends or updates the required entry; every other key
keeps its value and position. I/O and encoding errors are logged and
reported as ``FAILED``; no exception reaches the caller, and a failure on one
document never prevents patching the others.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

from idelinux.discovery.families import UNITY_EXTENSION_ID
from idelinux.workspace.documents import (
    DEBUGGER_TYPE,
    EXTENSIONS_FILE,
    LAUNCH_FILE,
    MANAGED_SETTINGS_MARKER,
    SETTINGS_FILE,
    SOLUTION_SETTING,
    VSCODE_DIR,
    attach_configuration,
    default_extensions,
    default_launch,
    default_settings,
    render_document,
)

logger = logging.getLogger(__name__)


class PatchOutcome(Enum):
    """What a patch attempt did to one document."""

    CREATED = "created"
    PATCHED = "patched"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    FAILED = "failed"


def patch_launch(data: dict[str, Any]) -> PatchOutcome:
    """Ensure a debugger attach configuration is present."""
    configurations = data.get("configurations")
    if not isinstance(configurations, list):
        return PatchOutcome.SKIPPED
    if any(
        isinstance(entry, dict) and entry.get("type") == DEBUGGER_TYPE
        for entry in configurations
    ):
        return PatchOutcome.UNCHANGED
    configurations.append(attach_configuration())
    return PatchOutcome.PATCHED


def patch_settings(data: dict[str, Any], solution_file_name: str) -> PatchOutcome:
    """Ensure the default solution setting names *solution_file_name*."""
    if MANAGED_SETTINGS_MARKER not in data:
        return PatchOutcome.SKIPPED
    if data.get(SOLUTION_SETTING) == solution_file_name:
        return PatchOutcome.UNCHANGED
    data[SOLUTION_SETTING] = solution_file_name
    return PatchOutcome.PATCHED


def patch_extensions(data: dict[str, Any]) -> PatchOutcome:
    """Ensure the Unity extension is recommended."""
    recommendations = data.get("recommendations")
    if not isinstance(recommendations, list):
        return PatchOutcome.SKIPPED
    if UNITY_EXTENSION_ID in recommendations:
        return PatchOutcome.UNCHANGED
    recommendations.append(UNITY_EXTENSION_ID)
    return PatchOutcome.PATCHED


def _unique_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    # A rewrite would keep only the last of any repeated key.
    data: dict[str, Any] = {}
    for key, value in pairs:
        if key in data:
            raise ValueError(f"Duplicate key {key!r}")
        data[key] = value
    return data


def read_document(path: Path) -> dict[str, Any] | None:
    """Parse a JSON object from *path*, or return None if it is not one.

    Documents that cannot be rewritten faithfully are treated as
    unparseable: invalid JSON or encoding, repeated keys, integers past
    the interpreter's conversion limit, and nesting deeper than the
    recursion limit.

    Raises:
        OSError: If the file cannot be read.
    """
    try:
        data = json.loads(
            path.read_text(encoding="utf-8-sig"), object_pairs_hook=_unique_keys,
        )
    except (ValueError, RecursionError) as exc:
        logger.debug("Not patching unparseable %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.debug("Not patching %s: top level is not an object", path)
        return None
    return data


def write_document(path: Path, data: Any) -> None:
    """Replace *path* with the rendered *data*.

    The content is encoded before anything touches the disk. An existing
    file is replaced through a sibling temporary file renamed over it,
    keeping its permission bits, so a failure at any point leaves the
    original intact.

    Raises:
        ValueError: If *data* cannot be encoded as UTF-8.
        OSError: If the file cannot be written.
    """
    payload = render_document(data).encode("utf-8")
    if not path.exists():
        path.write_bytes(payload)
        return

    fd, temp_path = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        shutil.copymode(path, temp_path)
        os.replace(temp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(temp_path)
        raise


def apply_patch(
    path: Path,
    default: Callable[[], dict[str, Any]],
    patch: Callable[[dict[str, Any]], PatchOutcome],
    enable_patch: bool = True,
) -> PatchOutcome:
    """Create *path* from *default* or patch it in place.

    Args:
        path: Document to create or patch.
        default: Builds the content written when the file is absent.
        patch: Mutates a parsed document and reports what it did.
        enable_patch: When False, existing files are left untouched.

    Returns:
        The ``PatchOutcome`` for this document. Never raises.
    """
    try:
        if not path.exists():
            write_document(path, default())
            logger.info("Created %s", path)
            return PatchOutcome.CREATED
        if not enable_patch:
            return PatchOutcome.UNCHANGED

        data = read_document(path)
        if data is None:
            return PatchOutcome.SKIPPED

        outcome = patch(data)
        if outcome is PatchOutcome.PATCHED:
            write_document(path, data)
            logger.info("Patched %s", path)
        return outcome
    except (OSError, ValueError):
        logger.warning("Failed to update %s", path, exc_info=True)
        return PatchOutcome.FAILED


class WorkspacePatcher:
    """Creates or patches the ``.vscode`` documents of a project.

    Usage::

        patcher = WorkspacePatcher("MyGame.sln")
        outcomes = patcher.create_extra_files(Path("~/MyGame").expanduser())
        # {"launch.json": PatchOutcome.CREATED, ...}

    Attributes:
        solution_file_name: File name (not path) of the project's solution.
    """

    def __init__(self, solution_file_name: str) -> None:
        self.solution_file_name = solution_file_name

    def create_extra_files(
        self,
        project_directory: Path,
        enable_patch: bool = True,
    ) -> dict[str, PatchOutcome]:
        """Create or patch all managed documents under *project_directory*.

        Returns:
            Outcome per document file name.
        """
        vscode_dir = Path(project_directory) / VSCODE_DIR
        try:
            vscode_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.warning("Cannot create %s", vscode_dir, exc_info=True)
            return {
                name: PatchOutcome.FAILED
                for name in (LAUNCH_FILE, SETTINGS_FILE, EXTENSIONS_FILE)
            }

        return {
            LAUNCH_FILE: self.create_launch_file(vscode_dir, enable_patch),
            SETTINGS_FILE: self.create_settings_file(vscode_dir, enable_patch),
            EXTENSIONS_FILE: self.create_recommended_extensions_file(
                vscode_dir, enable_patch,
            ),
        }

    def create_launch_file(self, vscode_dir: Path, enable_patch: bool = True) -> PatchOutcome:
        return apply_patch(
            vscode_dir / LAUNCH_FILE, default_launch, patch_launch, enable_patch,
        )

    def create_settings_file(self, vscode_dir: Path, enable_patch: bool = True) -> PatchOutcome:
        return apply_patch(
            vscode_dir / SETTINGS_FILE,
            lambda: default_settings(self.solution_file_name),
            lambda data: patch_settings(data, self.solution_file_name),
            enable_patch,
        )

    def create_recommended_extensions_file(
        self, vscode_dir: Path, enable_patch: bool = True,
    ) -> PatchOutcome:
        return apply_patch(
            vscode_dir / EXTENSIONS_FILE, default_extensions, patch_extensions, enable_patch,
        )

"""Open an editor at a file position.

The target handed to the editor is the solution file's directory, or
the single ``*.code-workspace`` file in that directory when there is
exactly one. Zero or several workspace files fall back to the bare
directory rather than guessing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from idelinux.launch.process_runner import (
    ProcessStartInfo,
    process_start_info_for,
    start_process,
)

logger = logging.getLogger(__name__)

WORKSPACE_SUFFIX = ".code-workspace"


def clamp_position(line: int, column: int) -> tuple[int, int]:
    """Lines are 1-based and columns 0-based; clamp anything below."""
    return max(1, line), max(0, column)


def find_workspace(directory: Path) -> Path | None:
    """Return the only ``*.code-workspace`` file in *directory*, if unique."""
    try:
        files = [
            p for p in directory.glob(f"*{WORKSPACE_SUFFIX}") if p.is_file()
        ]
    except OSError:
        logger.debug("Cannot list %s", directory)
        return None
    if len(files) != 1:
        return None
    return files[0]


def build_open_arguments(
    target: str,
    path: str | None,
    line: int,
    column: int,
) -> list[str]:
    """Editor arguments: the target, then ``-g path:line:column`` if any."""
    if not path:
        return [target]
    return [target, "-g", f"{path}:{line}:{column}"]


def open_file(
    editor_path: str,
    path: str | None,
    line: int,
    column: int,
    solution_file: str,
    runner: Callable[[ProcessStartInfo], Any] = start_process,
) -> bool:
    """Open *editor_path* positioned at *path*:*line*:*column*.

    Args:
        editor_path: Editor executable.
        path: File to open; empty to just open the project.
        line: 1-based line; lower values are clamped to 1.
        column: 0-based column; negative values are clamped to 0.
        solution_file: Solution file whose directory is the project root.
        runner: Process-spawn primitive.

    Returns:
        True once the process has been requested to start.

    Raises:
        LaunchError: If the editor process cannot be started.
    """
    line, column = clamp_position(line, column)

    directory = Path(solution_file).parent
    workspace = find_workspace(directory)
    target = str(workspace if workspace is not None else directory)

    arguments = build_open_arguments(target, path, line, column)
    runner(process_start_info_for(editor_path, arguments, redirect=False))
    logger.info("Opened %s with %s", target, editor_path)
    return True

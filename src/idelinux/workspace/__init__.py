"""Idempotent management of a project's ``.vscode`` configuration.

Public API::

    from idelinux.workspace import WorkspacePatcher

    outcomes = WorkspacePatcher("MyGame.sln").create_extra_files(project_dir)
"""

from __future__ import annotations

from idelinux.workspace.patcher import PatchOutcome, WorkspacePatcher

__all__ = ["PatchOutcome", "WorkspacePatcher"]

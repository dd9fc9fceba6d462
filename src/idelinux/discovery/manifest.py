"""Manifest-based version extraction for editor installations.

VS Code-engine editors ship a ``package.json`` under
``resources/app/`` of their installation root. Its ``version`` field is
the only reliable version source on Linux, since launchers are usually
shell scripts or symlinks.

Resolution never raises: a missing, unreadable, or malformed manifest
yields a ``ManifestResult`` with ``found=False`` and the installation is
reported with an unknown version instead.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from idelinux.discovery.models import Version

logger = logging.getLogger(__name__)

# Launchers are often ``<root>/bin/<exe>``; skip that directory level.
_BIN_DIR_NAME = "bin"


@dataclass(frozen=True)
class ManifestResult:
    """Outcome of a manifest lookup.

    Attributes:
        found: True when a version was read and parsed.
        version: The parsed version, or None.
        manifest_path: Where the manifest was looked for, if the
            installation root could be determined.
    """

    found: bool
    version: Version | None = None
    manifest_path: Path | None = None


def resolve_real_path(path: str) -> str:
    """Follow one level of symbolic link, like ``readlink(2)``.

    Relative link targets are resolved against the link's directory.
    Returns *path* unchanged when it is not a link or cannot be read.
    """
    try:
        target = os.readlink(path)
    except (OSError, ValueError):
        return path
    if not os.path.isabs(target):
        target = os.path.normpath(os.path.join(os.path.dirname(path), target))
    return target


def installation_root(path: str) -> Path | None:
    """Return the installation root for an executable path.

    The root is the executable's directory, or that directory's parent
    when the executable lives in a ``bin`` subdirectory.
    """
    parent = Path(resolve_real_path(path)).parent
    if parent.name == _BIN_DIR_NAME:
        return parent.parent
    return parent if parent.name else None


def parse_manifest_version(raw: str) -> Version | None:
    """Parse the leading dotted-numeric part of a manifest version.

    Pre-release suffixes are dropped: ``"1.2.3-insider"`` parses as
    ``1.2.3``.
    """
    return Version.try_parse(raw.split("-", 1)[0])


def resolve_manifest_version(path: str, manifest_rel_path: str) -> ManifestResult:
    """Read the installation version for the executable at *path*.

    Args:
        path: Candidate executable path.
        manifest_rel_path: Manifest location relative to the root.

    Returns:
        A ``ManifestResult``; ``found`` is False on any failure.
    """
    root = installation_root(path)
    if root is None:
        return ManifestResult(found=False)

    manifest_path = root / manifest_rel_path
    try:
        if not manifest_path.is_file():
            return ManifestResult(found=False, manifest_path=manifest_path)
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
        raw = data["version"]
        if not isinstance(raw, str):
            raise TypeError(f"version is {type(raw).__name__}, not str")
    except (OSError, UnicodeDecodeError, json.JSONDecodeError,
            KeyError, TypeError) as exc:
        logger.debug("Unreadable manifest %s: %s", manifest_path, exc)
        return ManifestResult(found=False, manifest_path=manifest_path)

    version = parse_manifest_version(raw)
    if version is None:
        logger.debug("Unparseable version %r in %s", raw, manifest_path)
        return ManifestResult(found=False, manifest_path=manifest_path)
    return ManifestResult(found=True, version=version, manifest_path=manifest_path)

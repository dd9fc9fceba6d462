"""Turn raw candidate paths into ``Installation`` records.

A candidate is accepted when it is a non-empty path to an existing
regular file whose name passes the family's identity check. The version
comes from the installation manifest; failing to read it is not a
rejection, the installation is reported with ``Version()`` instead.
"""

from __future__ import annotations

import logging
import os

from idelinux.discovery.families import EditorFamily
from idelinux.discovery.manifest import resolve_manifest_version
from idelinux.discovery.models import Installation, Version

logger = logging.getLogger(__name__)


def is_candidate_for_discovery(path: str, family: EditorFamily) -> bool:
    """Check that *path* is an existing file belonging to *family*."""
    try:
        return os.path.isfile(path) and family.matches(path)
    except (ValueError, OSError):
        return False


def installation_name(family: EditorFamily, version: Version | None) -> str:
    """Build the display name, e.g. ``"Cursor [0.42.3]"``."""
    if version is None:
        return family.display_name
    return f"{family.display_name} [{version}]"


def validate(path: str | None, family: EditorFamily) -> Installation | None:
    """Validate a candidate path against an editor family.

    Args:
        path: Candidate executable path (may be empty or None).
        family: The family whose identity check and capabilities apply.

    Returns:
        The ``Installation``, or None if the candidate is rejected.
    """
    if not path:
        return None
    if not is_candidate_for_discovery(path, family):
        return None

    manifest = resolve_manifest_version(path, family.manifest_rel_path)
    version = manifest.version if manifest.found else None
    if version is None:
        logger.debug("No version for %s candidate %s", family.display_name, path)

    return Installation(
        path=os.path.abspath(path),
        name=installation_name(family, version),
        version=version or Version(),
        is_prerelease=family.is_prerelease,
        supports_analyzers=family.supports_analyzers,
        latest_language_version=family.latest_language_version,
        family=family,
    )

"""Candidate enumeration for editor executables.

Produces every filesystem path that might be an executable of a given
editor family. Nothing here checks that a path exists; that is the
validator's job. Sources are concatenated in a fixed order and
deduplicated on the exact path string, first occurrence winning, so
the sequence is stable for a given filesystem and environment.

Sources:
    1. Well-known absolute paths from package-manager installs.
    2. Paths relative to the user's home directory.
    3. ``Exec=`` targets of XDG desktop entries, searched in each
       ``$XDG_DATA_DIRS`` entry and then in ``~/.local/share``.

A failing source (unreadable directory, malformed desktop entry) yields
nothing and never aborts enumeration.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator, Mapping
from pathlib import Path

from idelinux.discovery.families import EditorFamily
from idelinux.discovery.models import CandidateSource, InstallationCandidate

logger = logging.getLogger(__name__)

XDG_DATA_DIRS_VAR = "XDG_DATA_DIRS"
DEFAULT_XDG_DATA_DIRS = "/usr/local/share:/usr/share"
USER_DATA_DIR = ".local/share"

_DESKTOP_EXEC_RE = re.compile(r"Exec=(\S+)")


def resolve_home(home: Path | None = None) -> Path | None:
    """Return *home*, or the current user's home directory if it can be found."""
    if home is not None:
        return home
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        logger.debug("No home directory for the current user")
        return None


def xdg_data_dirs(
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[Path]:
    """Return the XDG data directories to search, user directory last."""
    env = os.environ if environ is None else environ
    raw = env.get(XDG_DATA_DIRS_VAR) or DEFAULT_XDG_DATA_DIRS
    dirs = [Path(d) for d in raw.split(":") if d]
    home_dir = resolve_home(home)
    if home_dir is not None:
        dirs.append(home_dir / USER_DATA_DIR)
    return dirs


def parse_desktop_exec(content: str) -> str | None:
    """Return the executable token of the first ``Exec=`` key, if any."""
    m = _DESKTOP_EXEC_RE.search(content)
    if m is None:
        return None
    return m.group(1) or None


def _well_known(family: EditorFamily) -> Iterator[InstallationCandidate]:
    for path in family.well_known_paths:
        yield InstallationCandidate(path, CandidateSource.WELL_KNOWN)


def _user_profile(
    family: EditorFamily, home: Path | None,
) -> Iterator[InstallationCandidate]:
    if home is None:
        return
    for rel in family.home_relative_paths:
        yield InstallationCandidate(str(home / rel), CandidateSource.USER_PROFILE)


def _desktop_entries(
    family: EditorFamily,
    home: Path | None,
    environ: Mapping[str, str] | None,
) -> Iterator[InstallationCandidate]:
    for data_dir in xdg_data_dirs(home=home, environ=environ):
        desktop_file = data_dir / "applications" / family.desktop_entry
        try:
            if not desktop_file.is_file():
                continue
            content = desktop_file.read_text(encoding="utf-8", errors="replace")
        except (PermissionError, OSError):
            logger.debug("Cannot read desktop entry %s", desktop_file)
            continue

        exec_path = parse_desktop_exec(content)
        if exec_path is None:
            logger.debug("No Exec= key in %s", desktop_file)
            continue
        yield InstallationCandidate(exec_path, CandidateSource.DESKTOP_ENTRY)


def enumerate_candidates(
    family: EditorFamily,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Iterator[InstallationCandidate]:
    """Yield deduplicated candidate paths for *family*.

    The iterator is lazy and each call re-probes the filesystem.

    Args:
        family: The editor family to enumerate.
        home: Override the home directory (for testing).
        environ: Override the process environment (for testing).
    """
    home_dir = resolve_home(home)
    seen: set[str] = set()
    sources = (
        _well_known(family),
        _user_profile(family, home_dir),
        _desktop_entries(family, home_dir, environ),
    )
    for source in sources:
        for candidate in source:
            if candidate.path in seen:
                continue
            seen.add(candidate.path)
            yield candidate

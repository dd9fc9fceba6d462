"""Data models for the discovery module.

Contains the value types produced and consumed by discovery: the
three-component ``Version``, the ephemeral ``InstallationCandidate``
yielded by the enumerator, and the immutable ``Installation`` record
produced by validation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from idelinux.discovery.families import EditorFamily

_VERSION_RE = re.compile(r"^([0-9]+)\.([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?$")


@dataclass(frozen=True, order=True)
class Version:
    """A (major, minor, patch) version, totally ordered.

    ``Version()`` is the zero value ``0.0.0``, used as "unknown" when an
    installation manifest could not be read.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a dotted-numeric string with 2 to 4 components.

        A fourth (revision) component is accepted and dropped.

        Raises:
            ValueError: If *text* is not a dotted-numeric version.
        """
        m = _VERSION_RE.match(text.strip())
        if not m:
            raise ValueError(f"Invalid version: {text!r}")
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3) or 0))

    @classmethod
    def try_parse(cls, text: str) -> Version | None:
        """Like ``parse`` but returns None instead of raising."""
        try:
            return cls.parse(text)
        except ValueError:
            return None

    @property
    def is_unknown(self) -> bool:
        return self == Version()

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class CandidateSource(Enum):
    """Where the enumerator found a candidate path."""

    WELL_KNOWN = "well-known"
    USER_PROFILE = "user-profile"
    DESKTOP_ENTRY = "desktop-entry"


@dataclass(frozen=True)
class InstallationCandidate:
    """A path that might be an editor executable.

    Attributes:
        path: The raw candidate path, exactly as enumerated.
        source: The enumeration source that produced it.
    """

    path: str
    source: CandidateSource


@dataclass(frozen=True)
class Installation:
    """A validated editor installation.

    Attributes:
        path: Path to the editor executable (an existing regular file at
            validation time).
        name: Display name, suffixed with ``[x.y.z]`` when the version
            is known.
        version: Version read from the installation manifest, or
            ``Version()`` when unknown.
        is_prerelease: True for preview channels such as Insiders.
        supports_analyzers: Fixed per editor family.
        latest_language_version: Highest language version the family's
            tooling supports.
        family: The ``EditorFamily`` descriptor that accepted the path.
    """

    path: str
    name: str
    version: Version
    is_prerelease: bool
    supports_analyzers: bool
    latest_language_version: Version
    family: EditorFamily

    def analyzers(self, home: Path | None = None) -> list[Path]:
        """Analyzer assemblies shipped by the family's extension, if installed."""
        return self.family.find_analyzers(home=home)

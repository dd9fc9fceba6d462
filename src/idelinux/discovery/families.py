"""Registry of known VS Code-engine editor families.

Each ``EditorFamily`` describes where one editor family installs its
executable on Linux, how to recognise that executable, where its
installation manifest lives, and which fixed capabilities it has. The
registry lets discovery and validation stay generic: supporting another
editor means registering a descriptor, not writing a new code path.

Platform Notes:
    Package-manager installs land under ``/usr/bin`` or ``/usr/share``.
    Tarball and AppImage installs usually end up under ``/opt``,
    ``~/.local/bin`` or ``~/Applications``. Every family ships a
    ``<name>.desktop`` entry that points at the real launcher.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from idelinux.discovery.models import Version
from idelinux.exceptions import DiscoveryError

logger = logging.getLogger(__name__)

# Publisher-qualified id of the Unity debugger extension, shared by all
# VS Code-engine editors.
UNITY_EXTENSION_ID = "visualstudiotoolsforunity.vstuc"

# Relative to the installation root, which is the executable's directory
# (or its parent when the executable sits in ``bin/``).
DEFAULT_MANIFEST_REL_PATH = "resources/app/package.json"


@dataclass(frozen=True)
class EditorFamily:
    """Describes one VS Code-engine editor family.

    Attributes:
        key: Machine identifier (e.g., "cursor").
        display_name: Human-readable name used in installation names.
        executable_suffix: Case-insensitive suffix a candidate path must
            end with to belong to this family.
        desktop_entry: Desktop-entry filename looked up under each XDG
            ``applications`` directory.
        well_known_paths: Absolute paths used by package-manager installs.
        home_relative_paths: Paths relative to the user's home directory.
        manifest_rel_path: Manifest location under the installation root.
        extensions_dir: Extensions root, relative to the home directory.
        extension_id: Prefix of the extension directory holding analyzers.
        is_prerelease: Whether every build of this family is a preview.
        supports_analyzers: Whether the family can load Roslyn analyzers.
        latest_language_version: Highest supported language version.
    """

    key: str
    display_name: str
    executable_suffix: str
    desktop_entry: str
    well_known_paths: tuple[str, ...] = ()
    home_relative_paths: tuple[str, ...] = ()
    manifest_rel_path: str = DEFAULT_MANIFEST_REL_PATH
    extensions_dir: str = ""
    extension_id: str = UNITY_EXTENSION_ID
    is_prerelease: bool = False
    supports_analyzers: bool = True
    latest_language_version: Version = Version(13, 0)

    def matches(self, path: str) -> bool:
        """Identity check: does *path* name this family's executable?"""
        return path.lower().endswith(self.executable_suffix.lower())

    def extension_path(self, home: Path | None = None) -> Path | None:
        """Return the newest installed directory of ``extension_id``.

        Directory names are ``<publisher>.<extension>-<version>``, so the
        last name in sorted order is the newest install.
        """
        if not self.extensions_dir:
            return None
        try:
            root = (home if home is not None else Path.home()) / self.extensions_dir
            matches = sorted(
                (p for p in root.glob(f"{self.extension_id}*") if p.is_dir()),
                key=lambda p: p.name,
                reverse=True,
            )
        except (RuntimeError, OSError):
            return None
        return matches[0] if matches else None

    def find_analyzers(self, home: Path | None = None) -> list[Path]:
        """List ``*Analyzers.dll`` files shipped by the family's extension.

        Returns an empty list when the extension (or its ``Analyzers``
        directory) is not installed.
        """
        extension = self.extension_path(home=home)
        if extension is None:
            return []
        analyzers_dir = extension / "Analyzers"
        try:
            if not analyzers_dir.is_dir():
                return []
            return sorted(analyzers_dir.rglob("*Analyzers.dll"))
        except (PermissionError, OSError):
            logger.debug("Cannot list analyzers in %s", analyzers_dir)
            return []


VSCODE_INSIDERS = EditorFamily(
    key="code-insiders",
    display_name="Visual Studio Code Insiders",
    executable_suffix="code-insiders",
    desktop_entry="code-insiders.desktop",
    well_known_paths=(
        "/usr/bin/code-insiders",
        "/bin/code-insiders",
        "/usr/local/bin/code-insiders",
        "/usr/share/code-insiders/bin/code-insiders",
        "/snap/bin/code-insiders",
        "/opt/visual-studio-code-insiders/bin/code-insiders",
    ),
    home_relative_paths=(
        ".local/bin/code-insiders",
        "Applications/code-insiders",
    ),
    extensions_dir=".vscode-insiders/extensions",
    is_prerelease=True,
)

CURSOR = EditorFamily(
    key="cursor",
    display_name="Cursor",
    executable_suffix="cursor",
    desktop_entry="cursor.desktop",
    well_known_paths=(
        "/usr/bin/cursor",
        "/bin/cursor",
        "/usr/local/bin/cursor",
        "/opt/cursor/cursor",
    ),
    home_relative_paths=(
        ".local/bin/cursor",
        "Applications/cursor",
        "Applications/cursor.AppImage",
        "Applications/Cursor.AppImage",
    ),
    extensions_dir=".cursor/extensions",
)


class FamilyRegistry:
    """Ordered registry of ``EditorFamily`` descriptors.

    Families are probed in registration order when validating a single
    explicit path, so the first family whose identity check accepts the
    path wins.

    Attributes:
        families: Registered descriptors, in registration order.
    """

    def __init__(self) -> None:
        self.families: list[EditorFamily] = []

    def register(self, family: EditorFamily) -> None:
        """Add a family descriptor.

        Raises:
            DiscoveryError: If a family with the same key is registered.
        """
        if any(f.key == family.key for f in self.families):
            raise DiscoveryError(f"Editor family already registered: {family.key!r}")
        self.families.append(family)

    def get(self, key: str) -> EditorFamily:
        """Look up a registered family by key.

        Raises:
            DiscoveryError: If no family has that key.
        """
        for family in self.families:
            if family.key == key:
                return family
        raise DiscoveryError(f"Unknown editor family: {key!r}")

    def __iter__(self):
        return iter(self.families)

    def __len__(self) -> int:
        return len(self.families)


def default_registry() -> FamilyRegistry:
    """Create a FamilyRegistry with the built-in families.

    1. ``VSCODE_INSIDERS`` -- Visual Studio Code Insiders
    2. ``CURSOR`` -- Cursor
    """
    registry = FamilyRegistry()
    registry.register(VSCODE_INSIDERS)
    registry.register(CURSOR)
    return registry

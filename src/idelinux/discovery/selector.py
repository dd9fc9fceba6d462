"""Discovery, ranking, and selection of editor installations.

Discovery Algorithm:
    1. For each registered ``EditorFamily``, enumerate candidate paths.
    2. Validate each candidate; rejected candidates are dropped.
    3. Rank the union: stable releases before prereleases, then
       ascending version, then path. The last element is the best.

Ranking is a pure function of the installation set, so the chosen
installation never depends on the order in which sources were probed.
Nothing is cached: every call re-probes the filesystem.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from idelinux.discovery.candidates import enumerate_candidates
from idelinux.discovery.families import FamilyRegistry, default_registry
from idelinux.discovery.models import Installation, Version
from idelinux.discovery.validator import validate

logger = logging.getLogger(__name__)


def _rank_key(installation: Installation) -> tuple[bool, Version, str]:
    return (installation.is_prerelease is False, installation.version, installation.path)


def rank(installations: Iterable[Installation]) -> list[Installation]:
    """Order installations from least to most preferred.

    Prereleases sort before stable releases so that any stable
    installation outranks every prerelease; within a tier, versions
    ascend. The path breaks remaining ties.
    """
    return sorted(installations, key=_rank_key)


def select_best(installations: Iterable[Installation]) -> Installation | None:
    """Return the most preferred installation, or None if there are none."""
    ranked = rank(installations)
    return ranked[-1] if ranked else None


def discover_installations(
    registry: FamilyRegistry | None = None,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Iterator[Installation]:
    """Lazily yield every valid installation of every registered family.

    Args:
        registry: Families to probe (defaults to ``default_registry()``).
        home: Override the home directory (for testing).
        environ: Override the process environment (for testing).
    """
    families = registry if registry is not None else default_registry()
    for family in families:
        for candidate in enumerate_candidates(family, home=home, environ=environ):
            installation = validate(candidate.path, family)
            if installation is not None:
                logger.debug(
                    "Found %s via %s", installation.name, candidate.source.value,
                )
                yield installation


def try_discover_installation(
    path: str | None,
    registry: FamilyRegistry | None = None,
) -> Installation | None:
    """Probe a single explicit path against every registered family.

    Families are tried in registration order; the first one that accepts
    the path wins.
    """
    families = registry if registry is not None else default_registry()
    try:
        for family in families:
            installation = validate(path, family)
            if installation is not None:
                return installation
    except OSError:
        logger.warning("Cannot probe editor path %s", path, exc_info=True)
    return None


class InstallationSelector:
    """Resolves the installation to use for an explicit or implicit choice.

    Usage::

        selector = InstallationSelector()
        best = selector.best()
        chosen = selector.find_installation("/usr/bin/cursor")
    """

    def __init__(
        self,
        registry: FamilyRegistry | None = None,
        home: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.home = home
        self.environ = environ

    def discover(self) -> list[Installation]:
        """Run a full discovery pass and return the ranked installations."""
        return rank(discover_installations(self.registry, self.home, self.environ))

    def best(self) -> Installation | None:
        """Run a full discovery pass and return the preferred installation."""
        return select_best(discover_installations(self.registry, self.home, self.environ))

    def find_installation(
        self,
        path: str | None,
        lookup_discovered: bool = True,
    ) -> Installation | None:
        """Resolve an explicit editor path to an ``Installation``.

        When *lookup_discovered* is set, the path is first matched against
        a fresh discovery pass; otherwise (or when not found there) the
        path is probed on its own, so a prior full scan is never needed.
        """
        if not path:
            return None
        if lookup_discovered:
            wanted = os.path.abspath(path)
            for installation in discover_installations(
                self.registry, self.home, self.environ,
            ):
                if installation.path == wanted:
                    return installation
        return try_discover_installation(path, self.registry)

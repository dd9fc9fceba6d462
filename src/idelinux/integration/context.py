"""Explicit "current editor" state for the host integration.

The host owns which editor is current. Rather than a module-level
global, callers pass an ``EditorContext`` around; ``use_installation``
swaps the current editor for the duration of a ``with`` block and
always restores the previous value, even if the block raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class EditorContext:
    """Holds the path of the editor the host currently uses.

    Attributes:
        current_installation: Editor executable path, or None when the
            host has no VS Code-engine editor selected.
    """

    current_installation: str | None = None

    @contextmanager
    def use_installation(self, path: str) -> Iterator[EditorContext]:
        """Temporarily make *path* the current editor."""
        previous = self.current_installation
        self.current_installation = path
        logger.debug("Current editor set to %s", path)
        try:
            yield self
        finally:
            self.current_installation = previous
            logger.debug("Current editor restored to %s", previous)

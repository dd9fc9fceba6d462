"""idelinux: Discover, configure, and launch VS Code-engine editors on Linux."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

"""Fire-and-forget process spawning.

The launch coordinator only needs to request that a process start; it
never waits for it, reads its output, or checks its exit code.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field

from idelinux.exceptions import LaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessStartInfo:
    """Everything needed to start one process.

    Attributes:
        executable: Path of the program to run.
        arguments: Arguments passed after the executable, unquoted.
        redirect_output: Capture stdout/stderr instead of inheriting them.
    """

    executable: str
    arguments: tuple[str, ...] = field(default_factory=tuple)
    redirect_output: bool = False

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.arguments]


def process_start_info_for(
    executable: str,
    arguments: list[str] | tuple[str, ...],
    redirect: bool = False,
) -> ProcessStartInfo:
    return ProcessStartInfo(executable, tuple(arguments), redirect)


def start_process(info: ProcessStartInfo) -> subprocess.Popen:
    """Start *info* without waiting for it.

    Raises:
        LaunchError: If the executable cannot be started.
    """
    logger.debug("Starting %s", info.argv)
    stream = subprocess.PIPE if info.redirect_output else None
    try:
        return subprocess.Popen(
            info.argv,
            stdout=stream,
            stderr=stream,
            stdin=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise LaunchError(f"Cannot start {info.executable}: {exc}") from exc

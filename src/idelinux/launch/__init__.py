"""Launching an editor at a file position."""

from __future__ import annotations

from idelinux.launch.coordinator import open_file
from idelinux.launch.process_runner import ProcessStartInfo, start_process

__all__ = ["ProcessStartInfo", "open_file", "start_process"]

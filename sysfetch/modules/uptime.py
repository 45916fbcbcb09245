#!/usr/bin/env python3
"""
System uptime module.
"""

import os
import re
import time
from typing import Dict

from .base import FactModule, FactError, format_data

UPTIME_ICON = "\uf64f"
PROC_UPTIME = "/proc/uptime"

BOOTTIME_PATTERN = re.compile(r"\bsec\s*=\s*(\d+)")


def format_uptime(uptime_seconds: int) -> str:
    """Render an elapsed duration as days, hours and minutes, seconds dropped."""
    uptime_seconds = max(0, int(uptime_seconds))
    days = uptime_seconds // 86400
    hours = (uptime_seconds % 86400) // 3600
    minutes = (uptime_seconds % 3600) // 60

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    return format_data(UPTIME_ICON, " ".join(parts))


class UptimeModule(FactModule):
    """Module for the system uptime."""

    def __init__(self):
        super().__init__(
            "uptime",
            "System Uptime"
        )

    def read_proc_uptime(self) -> int:
        content = self.read_file(PROC_UPTIME)
        try:
            return int(float(content.split()[0]))
        except (IndexError, ValueError) as e:
            raise FactError(f"Malformed {PROC_UPTIME}: {content!r}") from e

    def read_boottime(self) -> int:
        # Output looks like "{ sec = 1697000000, usec = 0 } Wed Oct 11 ..."
        output = self.run_command(["sysctl", "-n", "kern.boottime"])
        match = BOOTTIME_PATTERN.search(output)
        if not match:
            raise FactError(f"Malformed kern.boottime: {output!r}")
        # Wall clock can trail the boot stamp after an NTP step back
        return max(0, int(time.time()) - int(match.group(1)))

    def get_uptime_seconds(self) -> int:
        if os.uname().sysname == "Darwin":
            return self.read_boottime()
        return self.read_proc_uptime()

    def run(self) -> Dict[str, str]:
        return {"uptime": format_uptime(self.get_uptime_seconds())}

#!/usr/bin/env python3
"""
Operating system identification module.
"""

import os
import logging
from typing import Dict

from .base import FactModule, FactError, format_data

logger = logging.getLogger("sysfetch.modules")

APPLE_ICON = "\ue711"
LINUX_ICON = "\ue712"

OS_RELEASE_PATHS = ["/etc/os-release", "/usr/lib/os-release"]

MACOS_NICKNAMES = {
    "11": "Big Sur",
    "12": "Monterey",
    "13": "Ventura",
}


def macos_nickname(version: str) -> str:
    """
    Map a macOS product version to its release nickname.

    Unknown major versions map to an empty string. A version without a
    dot is rejected.
    """
    major, sep, _ = version.strip().partition(".")
    if not sep:
        raise FactError("unrecognised macOS version")
    return MACOS_NICKNAMES.get(major, "")


def parse_os_release(text: str) -> str:
    """Extract the PRETTY_NAME value from os-release content, quotes removed."""
    for line in text.splitlines():
        if line.startswith("PRETTY_NAME="):
            return line.split("=", 1)[1].replace('"', "")
    raise FactError("unrecognised linux distro")


class OperatingSystemModule(FactModule):
    """Module for the operating system name."""

    def __init__(self):
        super().__init__(
            "os",
            "Operating System"
        )

    def read_mac_release(self) -> str:
        name = self.run_command(["sw_vers", "-productName"]).replace("\n", "")
        version = self.run_command(["sw_vers", "-productVersion"])
        nickname = macos_nickname(version)
        return f"{name} {nickname}" if nickname else name

    def read_lsb_release(self) -> str:
        description = self.run_command(["lsb_release", "-sd"]).strip().strip('"')
        if not description:
            raise FactError("lsb_release printed no description")
        return description

    def read_os_release(self) -> str:
        for path in OS_RELEASE_PATHS:
            try:
                content = self.read_file(path)
            except FactError as e:
                logger.debug(str(e))
                continue
            return parse_os_release(content)
        raise FactError("unrecognised linux distro")

    def run(self) -> Dict[str, str]:
        sysname = os.uname().sysname

        if sysname == "Darwin":
            return {"os": format_data(APPLE_ICON, self.read_mac_release())}

        if sysname == "Linux":
            try:
                description = self.read_lsb_release()
            except FactError as e:
                logger.debug(f"Falling back to os-release: {e}")
                description = self.read_os_release()
            return {"os": format_data(LINUX_ICON, description)}

        raise FactError("unrecognised os")

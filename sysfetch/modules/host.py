#!/usr/bin/env python3
"""
User and host name module.
"""

import os
import logging
from typing import Dict

from .base import FactModule, FactError, COLOUR, RESET

logger = logging.getLogger("sysfetch.modules")


class HostnameModule(FactModule):
    """Module for the user@host line."""

    def __init__(self):
        super().__init__(
            "hostname",
            "User and Host Name"
        )

    def get_host(self) -> str:
        """Resolve the host name from $HOSTNAME, the hostname command or uname."""
        host = os.environ.get("HOSTNAME")
        if host is not None:
            return host

        try:
            host = self.run_command(["hostname"]).replace("\n", "")
        except FactError as e:
            logger.debug(f"hostname command unavailable: {e}")
            host = ""

        # Kernel node name as the last resort
        return host or os.uname().nodename

    def run(self) -> Dict[str, str]:
        user = self.getenv("USER")
        host = self.get_host()
        return {"hostname": f"{COLOUR}{user}{RESET}@{COLOUR}{host}{RESET}"}

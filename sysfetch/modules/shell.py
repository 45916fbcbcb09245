#!/usr/bin/env python3
"""
Login shell module.
"""

from typing import Dict

from .base import FactModule, FactError, format_data

SHELL_ICON = "\uf489"
SHELL_PREFIX = "/bin/"


class ShellModule(FactModule):
    """Module for the login shell name."""

    def __init__(self):
        super().__init__(
            "shell",
            "Login Shell"
        )

    def run(self) -> Dict[str, str]:
        path = self.getenv("SHELL")
        if not path.startswith(SHELL_PREFIX):
            raise FactError(f"unrecognised shell path: {path}")
        return {"shell": format_data(SHELL_ICON, path[len(SHELL_PREFIX):])}

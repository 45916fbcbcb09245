#!/usr/bin/env python3
"""
Base module for all fact modules.
"""

import os
import subprocess
from typing import Dict, List

COLOUR = "\x1b[36m"
RESET = "\x1b[0m"


class FactError(Exception):
    """Raised when a fact cannot be resolved."""


def format_data(key: str, value: str) -> str:
    """Render a labelled fact line."""
    return f" {COLOUR}{key}{RESET} {value}"


class FactModule:
    """Base class for all fact modules."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description

    def run(self) -> Dict[str, str]:
        """Resolve the fact and return its output lines keyed by section."""
        raise NotImplementedError("Subclasses must implement this method")

    def run_command(self, command: List[str]) -> str:
        """
        Run a command and return its standard output.

        Args:
            command: Command to run as a list of strings

        Returns:
            Command output decoded as UTF-8

        Raises:
            FactError: if the command is missing, fails to start, exits
                non-zero or prints something that is not UTF-8
        """
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                check=False
            )
        except OSError as e:
            raise FactError(f"Failed to run command {' '.join(command)}: {e}") from e

        if result.returncode != 0:
            raise FactError(f"Command {' '.join(command)} exited with status {result.returncode}")

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FactError(f"Command {' '.join(command)} printed invalid UTF-8") from e

    def read_file(self, file_path: str) -> str:
        """
        Read a text file.

        Raises:
            FactError: if the file cannot be opened or decoded
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as e:
            raise FactError(f"File not found: {file_path}") from e
        except PermissionError as e:
            raise FactError(f"Permission denied: {file_path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise FactError(f"Failed to read file {file_path}: {e}") from e

    def getenv(self, name: str) -> str:
        """Return an environment variable, raising FactError when it is unset."""
        value = os.environ.get(name)
        if value is None:
            raise FactError(f"Environment variable {name} is not set")
        return value

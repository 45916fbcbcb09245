#!/usr/bin/env python3
"""
Static ASCII-art banner.
"""

from functools import lru_cache
from typing import Tuple

BANNER_TABLE = (
    b"    .--.\n"
    b"   |o_o |\n"
    b"   |:_/ |\n"
    b"  //   \\ \\\n"
    b" (|     | )\n"
    b"/'\\_   _/`\\\n"
    b"\\___)=(___/\n"
)


@lru_cache(maxsize=None)
def banner_lines() -> Tuple[str, ...]:
    """Decode the banner table into display lines."""
    return tuple(BANNER_TABLE.decode("utf-8").splitlines())


def banner_width() -> int:
    return max((len(line) for line in banner_lines()), default=0)

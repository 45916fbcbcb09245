#!/usr/bin/env python3
"""
Terminal colour swatch module.
"""

from typing import Dict, Iterable

from .base import FactModule

GLYPH = "\u2b23"

NORMAL_CODES = range(30, 38)
BRIGHT_CODES = range(90, 98)


def swatch_row(codes: Iterable[int]) -> str:
    """One glyph per ANSI foreground code, space separated."""
    return " ".join(f"\x1b[{code}m{GLYPH}" for code in codes)


class ColourModule(FactModule):
    """Module for the two-row colour palette."""

    def __init__(self):
        super().__init__(
            "colours",
            "Terminal Colours"
        )

    def run(self) -> Dict[str, str]:
        return {
            "normal": swatch_row(NORMAL_CODES),
            "bright": " " + swatch_row(BRIGHT_CODES),
        }

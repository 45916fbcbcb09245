#!/usr/bin/env python3
"""
Report generator for sysfetch.
"""

import logging
from itertools import zip_longest
from typing import List

from ..modules.base import FactModule, COLOUR, RESET
from .banner import banner_lines, banner_width

logger = logging.getLogger("sysfetch.report")

BANNER_LAYOUTS = ("none", "above", "beside")
BANNER_GAP = "  "


class FetchReport:
    """Runs the fact modules and lays out their lines."""

    def __init__(self, modules: List[FactModule], banner: str = "none"):
        if banner not in BANNER_LAYOUTS:
            raise ValueError(f"Unknown banner layout: {banner}")
        self.modules = modules
        self.banner = banner

    def collect(self) -> List[str]:
        """Run each module in order, leaving out the lines of any that fail."""
        lines = []
        for module in self.modules:
            try:
                results = module.run()
            except Exception as e:
                logger.debug(f"Skipping {module.name} ({module.description}): {e}")
                continue
            lines.extend(results.values())
        return lines

    def generate(self) -> str:
        """Generate the report text, without the trailing blank line."""
        facts = self.collect()

        if self.banner == "above":
            art = [f"{COLOUR}{line}{RESET}" for line in banner_lines()]
            return "\n".join(art + facts)

        if self.banner == "beside":
            return "\n".join(self.side_by_side(facts))

        return "\n".join(facts)

    @staticmethod
    def side_by_side(facts: List[str]) -> List[str]:
        """Pair banner line i with fact line i."""
        width = banner_width()
        rows = []
        for art, fact in zip_longest(banner_lines(), facts, fillvalue=""):
            if not fact:
                rows.append(f"{COLOUR}{art}{RESET}")
                continue
            rows.append(f"{COLOUR}{art.ljust(width)}{RESET}{BANNER_GAP}{fact}")
        return rows

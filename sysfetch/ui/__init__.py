#!/usr/bin/env python3
"""
UI module initialization for sysfetch.
"""

from .banner import banner_lines
from .report import FetchReport, BANNER_LAYOUTS

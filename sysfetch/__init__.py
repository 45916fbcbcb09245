#!/usr/bin/env python3
"""
sysfetch

A minimal system fetch tool that prints a short, colourized summary of the
running machine followed by a terminal colour swatch.
"""

__version__ = "1.0.0"

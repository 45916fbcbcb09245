#!/usr/bin/env python3
"""
Allow running sysfetch with ``python -m sysfetch``.
"""

from .main import main

main()

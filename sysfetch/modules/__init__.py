#!/usr/bin/env python3
"""
Module initialization - imports all fact modules and provides a function to get all module instances.
"""

from .base import FactModule, FactError, format_data

from .host import HostnameModule
from .os_info import OperatingSystemModule
from .shell import ShellModule
from .uptime import UptimeModule
from .colours import ColourModule


def get_all_modules():
    """Return a list of all module instances in output order."""
    return [
        HostnameModule(),
        OperatingSystemModule(),
        ShellModule(),
        UptimeModule(),
        ColourModule()
    ]

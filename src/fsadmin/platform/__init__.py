"""
fsadmin Platform Layer.

Runs the external filesystem tools and parses their output.
"""

from __future__ import annotations

import os
import platform

from fsadmin.platform.base import CommandResult, CommandRunner


def get_platform_name() -> str:
    """Get the current platform name."""
    return platform.system().lower()


def is_linux() -> bool:
    """Check if running on Linux."""
    return get_platform_name() == "linux"


def is_admin() -> bool:
    """Check if running with root privileges."""
    return is_linux() and os.geteuid() == 0


__all__ = [
    "CommandResult",
    "CommandRunner",
    "get_platform_name",
    "is_linux",
    "is_admin",
]

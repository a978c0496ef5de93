"""
Bootstrap module for platpick's runtime environment.

This module handles:
- Local platform detection (OS + CPU + libc)
- The platpick home directory (~/.platpick/)
"""

from platpick.bootstrap.platform import get_local_platform
from platpick.bootstrap.paths import get_platpick_home, PlatpickPaths

__all__ = [
    "get_local_platform",
    "get_platpick_home",
    "PlatpickPaths",
]

"""Platform value type and compatibility predicate."""

from platpick.platforms.platform import (
    JAVA,
    MSWIN,
    MSWIN64,
    PORTABLE,
    UNIVERSAL_MINGW,
    WINDOWS,
    Platform,
    platforms_match,
)

__all__ = [
    "JAVA",
    "MSWIN",
    "MSWIN64",
    "PORTABLE",
    "UNIVERSAL_MINGW",
    "WINDOWS",
    "Platform",
    "platforms_match",
]

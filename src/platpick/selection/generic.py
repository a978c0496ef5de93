"""Reduction of specific platforms to generic platform buckets.

Every platform generalizes to one of a fixed set of buckets: the java
runtime, one of the windows markers, or the portable platform. The mapping
is memoized in a process-wide cache.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from platpick.bootstrap.platform import get_local_platform
from platpick.core.logging import get_logger
from platpick.platforms import JAVA, PORTABLE, WINDOWS, Platform

LOGGER = get_logger(__name__)

PlatformProvider = Callable[[], Platform]


def _matches_marker(candidate: Platform, marker: Platform) -> bool:
    return candidate.matches(marker)


@dataclass(frozen=True)
class GenericMarker:
    """One row of the generic dispatch table.

    Attributes:
        platform: The generic bucket returned on a match.
        test: Predicate ``test(candidate, marker)`` deciding the match.
    """

    platform: Platform
    test: Callable[[Platform, Platform], bool] = _matches_marker

    def accepts(self, candidate: Platform) -> bool:
        return self.test(candidate, self.platform)


# Order matters: the first accepting marker wins.
GENERIC_MARKERS: Tuple[GenericMarker, ...] = (
    GenericMarker(JAVA),
    *(GenericMarker(marker) for marker in WINDOWS),
)


class GenericPlatformCache:
    """Memoized platform -> generic bucket mapping.

    One instance (``GENERIC_CACHE``) lives for the whole process and is
    never invalidated; platforms are immutable and the marker table is
    fixed. Reads are lock-free. Inserts are serialized so concurrent first
    lookups of the same platform all observe the first stored value.
    """

    def __init__(self, markers: Iterable[GenericMarker] = GENERIC_MARKERS) -> None:
        self._markers = tuple(markers)
        self._lock = threading.Lock()
        self._entries: Dict[Platform, Platform] = {PORTABLE: PORTABLE}

    @property
    def markers(self) -> Tuple[GenericMarker, ...]:
        return self._markers

    def generalize(self, platform: Platform) -> Platform:
        """Return the generic bucket for ``platform``."""
        cached = self._entries.get(platform)
        if cached is not None:
            return cached

        generic = self._lookup(platform)
        with self._lock:
            return self._entries.setdefault(platform, generic)

    def _lookup(self, platform: Platform) -> Platform:
        for marker in self._markers:
            if marker.accepts(platform):
                LOGGER.debug(f"Platform {platform} generalizes to {marker.platform}")
                return marker.platform
        return PORTABLE

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, platform: object) -> bool:
        return platform in self._entries


GENERIC_CACHE = GenericPlatformCache()


def generalize(platform: Optional[Platform]) -> Platform:
    """Return the generic bucket for ``platform`` (None counts as portable)."""
    if platform is None:
        return PORTABLE
    return GENERIC_CACHE.generalize(platform)


def is_portable(platform: Optional[Platform]) -> bool:
    """Return True if ``platform`` is the portable bucket itself."""
    return platform == PORTABLE


def generic_local_platform(provider: PlatformProvider = get_local_platform) -> Platform:
    """Generic bucket of the local platform."""
    return generalize(provider())


def generic_local_platform_is_portable(provider: PlatformProvider = get_local_platform) -> bool:
    """Return True if the local platform has no more specific bucket than portable."""
    return is_portable(generic_local_platform(provider))

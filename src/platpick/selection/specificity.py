"""Specificity distance between a declared and a target platform.

Lower scores are better. An exact match scores ``EXACT_MATCH``; portable
or undeclared platforms score ``WILDCARD_SCORE``. Anything else is a
weighted sum where version mismatches dominate CPU mismatches, which in
turn dominate OS mismatches.
"""

from __future__ import annotations

from typing import Optional, Union

from platpick.platforms import PORTABLE, Platform

EXACT_MATCH = -1
WILDCARD_SCORE = 1_000_000

OS_WEIGHT = 1
CPU_WEIGHT = 10
VERSION_WEIGHT = 100


def specificity_score(declared: Optional[Platform], target: Optional[Platform]) -> int:
    """Score how specifically ``declared`` fits ``target``.

    Args:
        declared: Platform the variant was built for.
        target: Platform being installed to.

    Returns:
        -1 for an exact match, 1_000_000 when either side is absent or
        portable, otherwise ``os + cpu * 10 + version * 100``.
    """
    # Exact match is checked first, so PORTABLE vs PORTABLE is -1.
    if declared == target:
        return EXACT_MATCH
    if declared is None or target is None or declared == PORTABLE or target == PORTABLE:
        return WILDCARD_SCORE

    return (
        os_match(declared, target) * OS_WEIGHT
        + cpu_match(declared, target) * CPU_WEIGHT
        + version_match(declared, target) * VERSION_WEIGHT
    )


def os_match(declared: Platform, target: Platform) -> int:
    if declared.os == target.os:
        return 0
    return 1


def cpu_match(declared: Platform, target: Platform) -> int:
    if declared.cpu == target.cpu:
        return 0
    # arm builds run on every arm sub-architecture
    if declared.cpu == "arm" and (target.cpu or "").startswith("arm"):
        return 0
    if declared.cpu is None or declared.cpu == "universal":
        return 1
    return 2


def version_match(declared: Platform, target: Platform) -> int:
    if declared.version == target.version:
        return 0
    if declared.version is None:
        return 1
    return 2


def platform_specificity_match(declared: Union[Platform, str, None], target: Platform) -> int:
    """Score a declared platform given as a string or Platform."""
    return specificity_score(Platform.parse(declared), target)

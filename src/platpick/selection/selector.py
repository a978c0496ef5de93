"""Selection of the best platform variant(s) for a target platform.

The pipeline is:

1. ``select_all_compatible`` keeps the variants whose platform is usable on
   the target (optionally forcing portable builds and preferring locked
   variants).
2. ``filter_to_best`` keeps exact-platform matches if there are any,
   otherwise the leading run of equally specific, dependency-equivalent
   variants.

More than one variant in the final result is an ambiguity the caller has
to resolve; nothing here picks between equally good variants.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from platpick.bootstrap.platform import get_local_platform
from platpick.core.logging import get_logger
from platpick.core.models import Variant
from platpick.platforms import PORTABLE, Platform, platforms_match
from platpick.selection.specificity import specificity_score

LOGGER = get_logger(__name__)

PlatformMatcher = Callable[[Optional[Platform], Platform], bool]


def select_all_compatible(
    variants: Sequence[Variant],
    platform: Platform,
    force_generic: bool = False,
    prefer_locked: bool = False,
    matcher: PlatformMatcher = platforms_match,
) -> List[Variant]:
    """Return every variant usable on ``platform``, in input order.

    Args:
        variants: Candidate variants.
        platform: Target platform.
        force_generic: Keep only portable-compatible variants and mark them
            for installation as portable builds. Variants that refuse to be
            forced are dropped.
        prefer_locked: If any compatible variant is locked, return only the
            locked ones.
        matcher: Compatibility predicate ``matcher(declared, target)``.

    Returns:
        Compatible variants. Forced variants are new objects; the inputs are
        left untouched.
    """
    matching: List[Variant] = []
    if force_generic:
        for variant in variants:
            if not matcher(variant.platform, PORTABLE):
                continue
            forced = variant.force_generic()
            if forced is None:
                LOGGER.debug(f"Variant {variant.full_name} cannot be forced to a portable build")
                continue
            matching.append(forced)
    else:
        matching = [variant for variant in variants if matcher(variant.platform, platform)]

    if prefer_locked:
        locked = [variant for variant in matching if variant.is_locked]
        if locked:
            return locked

    return matching


def select_best_overall(
    variants: Sequence[Variant],
    platform: Platform,
    force_generic: bool = False,
    prefer_locked: bool = False,
    matcher: PlatformMatcher = platforms_match,
) -> List[Variant]:
    """Return the best compatible variant(s) for ``platform``.

    A single-element result is an unambiguous choice; several elements are
    equally good variants the caller has to disambiguate.
    """
    matching = select_all_compatible(
        variants,
        platform,
        force_generic=force_generic,
        prefer_locked=prefer_locked,
        matcher=matcher,
    )
    best = filter_to_best(matching, platform)
    if len(best) > 1:
        LOGGER.debug(
            f"{len(best)} equally specific variants for {platform}: "
            f"{', '.join(variant.full_name for variant in best)}"
        )
    return best


def select_best_for_local_platform(
    variants: Sequence[Variant],
    force_generic: bool = False,
    local_platform: Optional[Platform] = None,
    matcher: PlatformMatcher = platforms_match,
) -> List[Variant]:
    """Return installable compatible variants for the local platform, best first.

    Variants that cannot be materialized for installation are skipped.
    Unlike ``select_best_overall`` the whole sorted list is returned.

    Args:
        variants: Candidate variants.
        force_generic: See ``select_all_compatible``.
        local_platform: Platform to select for; detected when omitted.
        matcher: Compatibility predicate.
    """
    if local_platform is None:
        local_platform = get_local_platform()

    matching = select_all_compatible(
        variants,
        local_platform,
        force_generic=force_generic,
        matcher=matcher,
    )

    installable: List[Variant] = []
    for variant in matching:
        materialized = variant.materialize_for_installation()
        if materialized is None:
            LOGGER.debug(f"Skipping {variant.full_name}: not installable here")
            continue
        installable.append(materialized)

    return sort_by_specificity(installable, local_platform)


def filter_to_best(matching: Sequence[Variant], platform: Platform) -> List[Variant]:
    """Reduce compatible variants to the best one(s) for ``platform``.

    1. A single variant is returned as is.
    2. All exact-platform matches are returned if there are any.
    3. Otherwise the variants are sorted by specificity and the leading run
       with the same score and the same dependencies as the best one is
       returned.
    """
    if len(matching) <= 1:
        return list(matching)

    exact = [variant for variant in matching if variant.platform == platform]
    if exact:
        return exact

    sorted_matching = sort_by_specificity(matching, platform)
    exemplar = sorted_matching[0]

    best: List[Variant] = []
    for variant in sorted_matching:
        if not (same_specificity(platform, variant, exemplar) and same_dependencies(variant, exemplar)):
            break
        best.append(variant)
    return best


def sort_by_specificity(matching: Sequence[Variant], platform: Platform) -> List[Variant]:
    """Sort variants by specificity score against ``platform``, best first.

    The sort is stable: equally scored variants keep their input order.
    """
    return sorted(matching, key=lambda variant: specificity_score(variant.platform, platform))


def same_specificity(platform: Platform, variant: Variant, exemplar: Variant) -> bool:
    return specificity_score(variant.platform, platform) == specificity_score(exemplar.platform, platform)


def same_dependencies(variant: Variant, exemplar: Variant) -> bool:
    """Return True if two variants would behave identically once installed.

    Compares the sorted runtime dependencies and the runtime and package
    manager version requirements.
    """
    same_runtime_deps = sorted(variant.dependencies) == sorted(exemplar.dependencies)
    same_metadata_deps = (
        variant.required_runtime_version == exemplar.required_runtime_version
        and variant.required_package_manager_version == exemplar.required_package_manager_version
    )
    return same_runtime_deps and same_metadata_deps

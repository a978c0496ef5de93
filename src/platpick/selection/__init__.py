"""Platform generalization, specificity scoring and variant selection."""

from platpick.selection.generic import (
    GENERIC_CACHE,
    GenericMarker,
    GenericPlatformCache,
    generalize,
    generic_local_platform,
    generic_local_platform_is_portable,
    is_portable,
)
from platpick.selection.selector import (
    filter_to_best,
    same_dependencies,
    same_specificity,
    select_all_compatible,
    select_best_for_local_platform,
    select_best_overall,
    sort_by_specificity,
)
from platpick.selection.specificity import (
    EXACT_MATCH,
    WILDCARD_SCORE,
    platform_specificity_match,
    specificity_score,
)

__all__ = [
    "GENERIC_CACHE",
    "GenericMarker",
    "GenericPlatformCache",
    "generalize",
    "generic_local_platform",
    "generic_local_platform_is_portable",
    "is_portable",
    "filter_to_best",
    "same_dependencies",
    "same_specificity",
    "select_all_compatible",
    "select_best_for_local_platform",
    "select_best_overall",
    "sort_by_specificity",
    "EXACT_MATCH",
    "WILDCARD_SCORE",
    "platform_specificity_match",
    "specificity_score",
]

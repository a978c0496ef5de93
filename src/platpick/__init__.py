"""platpick: platform-aware selection of pre-built package variants."""

from platpick.platforms import PORTABLE, Platform, platforms_match
from platpick.selection import (
    filter_to_best,
    generalize,
    is_portable,
    select_all_compatible,
    select_best_for_local_platform,
    select_best_overall,
    specificity_score,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "PORTABLE",
    "Platform",
    "platforms_match",
    "filter_to_best",
    "generalize",
    "is_portable",
    "select_all_compatible",
    "select_best_for_local_platform",
    "select_best_overall",
    "specificity_score",
]

"""Select command implementation.

Selects the best variant(s) for a platform from a YAML variant manifest.
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict, List, Optional

from platpick.cli.commands import Command
from platpick.cli.exit_codes import (
    EXIT_AMBIGUOUS,
    EXIT_INVALID_USAGE,
    EXIT_NO_MATCH,
    EXIT_SUCCESS,
)
from platpick.config.models import PlatpickConfig
from platpick.core.logging import get_logger
from platpick.core.manifest import ManifestError, load_manifest
from platpick.core.models import Variant
from platpick.platforms import Platform
from platpick.selection import (
    select_all_compatible,
    select_best_for_local_platform,
    select_best_overall,
    specificity_score,
)

LOGGER = get_logger(__name__)


class SelectCommand(Command):
    """Selects the best variant(s) from a manifest."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "select"

    def execute(self, args: Namespace, config: Optional[PlatpickConfig] = None) -> int:
        """Execute the select command.

        With a configured platform (or ``--platform``) the best-overall
        pipeline is used; otherwise installable variants are ranked for the
        detected local platform.

        Returns:
            Exit code: 0 = one variant, 1 = ambiguous, 2 = no compatible
            variant, 3 = invalid input.
        """
        config = config or PlatpickConfig()

        try:
            variants = load_manifest(Path(args.manifest))
            platform, explicit_target = self.target_platform(config)
        except (ManifestError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            if config.output.format == "json":
                print(json.dumps({"error": str(e), "variants": []}, indent=2))
            return EXIT_INVALID_USAGE

        if getattr(args, "all", False):
            selected = select_all_compatible(
                variants,
                platform,
                force_generic=config.force_generic,
                prefer_locked=config.prefer_locked,
            )
        elif explicit_target:
            selected = select_best_overall(
                variants,
                platform,
                force_generic=config.force_generic,
                prefer_locked=config.prefer_locked,
            )
        else:
            ranked = select_best_for_local_platform(
                variants,
                force_generic=config.force_generic,
                local_platform=platform,
            )
            selected = ranked[:1]

        LOGGER.info(f"Selected {len(selected)} of {len(variants)} variants for {platform}")
        if config.output.format == "json":
            self._print_json(selected, platform)
        else:
            self._print_table(selected, platform)

        if not selected:
            return EXIT_NO_MATCH
        if len(selected) > 1 and not getattr(args, "all", False):
            return EXIT_AMBIGUOUS
        return EXIT_SUCCESS

    def _print_table(self, selected: List[Variant], platform: Platform) -> None:
        print(f"Target platform: {platform}")
        if not selected:
            print("No compatible variant found.")
            return

        print(f"{'SCORE':>8}  {'VARIANT':<40} {'INSTALL AS'}")
        print("-" * 70)
        for variant in selected:
            score = specificity_score(variant.platform, platform)
            locked = " (locked)" if variant.is_locked else ""
            print(f"{score:>8}  {variant.full_name + locked:<40} {variant.install_platform}")

    def _print_json(self, selected: List[Variant], platform: Platform) -> None:
        output: Dict[str, Any] = {
            "platform": str(platform),
            "variants": [self._variant_to_dict(variant, platform) for variant in selected],
        }
        print(json.dumps(output, indent=2))

    def _variant_to_dict(self, variant: Variant, platform: Platform) -> Dict[str, Any]:
        return {
            "name": variant.name,
            "version": variant.version,
            "platform": str(variant.platform),
            "install_platform": str(variant.install_platform),
            "score": specificity_score(variant.platform, platform),
            "locked": variant.is_locked,
            "dependencies": [str(dependency) for dependency in variant.dependencies],
        }

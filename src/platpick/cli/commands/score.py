"""Score command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from platpick.config.models import PlatpickConfig

from platpick.cli.commands import Command
from platpick.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from platpick.platforms import Platform, platforms_match
from platpick.selection.specificity import (
    EXACT_MATCH,
    WILDCARD_SCORE,
    cpu_match,
    os_match,
    specificity_score,
    version_match,
)


class ScoreCommand(Command):
    """Prints the specificity score of a declared platform against a target."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "score"

    def execute(self, args: Namespace, config: "PlatpickConfig | None" = None) -> int:
        try:
            declared = Platform.parse(args.declared)
            target = Platform.parse(args.target)
        except ValueError as e:
            print(f"Invalid platform: {e}")
            return EXIT_INVALID_USAGE

        score = specificity_score(declared, target)
        print(f"Declared: {declared}")
        print(f"Target: {target}")
        print(f"Compatible: {'yes' if platforms_match(declared, target) else 'no'}")

        if score == EXACT_MATCH:
            print(f"Score: {score} (exact match)")
        elif score == WILDCARD_SCORE:
            print(f"Score: {score} (portable)")
        else:
            print(f"Score: {score}")
            print(f"  os: {os_match(declared, target)}")
            print(f"  cpu: {cpu_match(declared, target)}")
            print(f"  version: {version_match(declared, target)}")
        return EXIT_SUCCESS

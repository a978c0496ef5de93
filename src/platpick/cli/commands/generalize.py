"""Generalize command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from platpick.config.models import PlatpickConfig

from platpick.cli.commands import Command
from platpick.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from platpick.platforms import Platform
from platpick.selection import generalize


class GeneralizeCommand(Command):
    """Prints the generic bucket of each given platform."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "generalize"

    def execute(self, args: Namespace, config: "PlatpickConfig | None" = None) -> int:
        try:
            platforms = [Platform.parse(text) for text in args.platforms]
        except ValueError as e:
            print(f"Invalid platform: {e}")
            return EXIT_INVALID_USAGE

        width = max(len(str(platform)) for platform in platforms)
        for platform in platforms:
            print(f"{str(platform):<{width}}  ->  {generalize(platform)}")
        return EXIT_SUCCESS

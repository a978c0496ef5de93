"""Status command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from platpick.config.models import PlatpickConfig

from platpick.bootstrap.paths import get_platpick_home
from platpick.cli.commands import Command
from platpick.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from platpick.selection import generalize, is_portable


class StatusCommand(Command):
    """Shows the local platform and how it generalizes."""

    def __init__(self, version: str):
        """Initialize StatusCommand.

        Args:
            version: Current platpick version string.
        """
        self._version = version

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, config: "PlatpickConfig | None" = None) -> int:
        """Execute the status command.

        Returns:
            Exit code: 0, or 3 if the local platform cannot be determined.
        """
        print(f"platpick version: {self._version}")
        print(f"Home: {get_platpick_home()}")

        try:
            platform, configured = self.target_platform(config)
        except ValueError as e:
            print(f"Platform: unavailable ({e})")
            return EXIT_INVALID_USAGE

        generic = generalize(platform)
        suffix = " (configured)" if configured else ""
        print(f"Platform: {platform}{suffix}")
        print(f"Generic platform: {generic}")
        print(f"Portable only: {'yes' if is_portable(generic) else 'no'}")

        if config is not None:
            print(f"Force generic: {'yes' if config.force_generic else 'no'}")
            print(f"Prefer locked: {'yes' if config.prefer_locked else 'no'}")
            sources = ", ".join(config._config_sources) or "defaults"
            print(f"Config sources: {sources}")

        return EXIT_SUCCESS

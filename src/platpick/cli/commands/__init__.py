"""Subcommands of the platpick CLI.

Every command is registered with ``CLIRunner`` under its ``name``. Commands
print their results to stdout and report the outcome as an exit code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING, Optional, Tuple

from platpick.bootstrap.platform import get_local_platform
from platpick.platforms import Platform

if TYPE_CHECKING:
    from platpick.config.models import PlatpickConfig


class Command(ABC):
    """A platpick subcommand."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Subcommand name as typed on the command line."""

    @abstractmethod
    def execute(self, args: Namespace, config: "PlatpickConfig | None" = None) -> int:
        """Run the command.

        Args:
            args: Parsed command-line arguments.
            config: Layered configuration, for commands that load one.

        Returns:
            Exit code.
        """

    def target_platform(self, config: "Optional[PlatpickConfig]") -> Tuple[Platform, bool]:
        """Platform to act on, and whether it came from configuration.

        A configured ``platform`` (or ``--platform``) wins over detection.

        Raises:
            ValueError: If nothing is configured and the local platform
                cannot be detected.
        """
        override = config.platform_override if config is not None else None
        if override is not None:
            return override, True
        return get_local_platform(), False


__all__ = ["Command"]

"""CLI runner orchestration.

This module handles command dispatch and execution for the platpick CLI.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import Dict, Iterable, Optional

from importlib.metadata import version, PackageNotFoundError

from platpick.cli.arguments import build_parser
from platpick.cli.commands import Command
from platpick.cli.commands.generalize import GeneralizeCommand
from platpick.cli.commands.score import ScoreCommand
from platpick.cli.commands.select import SelectCommand
from platpick.cli.commands.status import StatusCommand
from platpick.cli.commands.validate import ValidateCommand
from platpick.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from platpick.config import PlatpickConfig, load_config
from platpick.config.loader import ConfigError
from platpick.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)

# Commands that read the layered configuration before running
_CONFIGURED_COMMANDS = frozenset({"status", "select"})


def get_version() -> str:
    """Get platpick version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("platpick")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from platpick import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        """Initialize CLIRunner with parser and commands."""
        self.parser = build_parser()
        self._version = get_version()
        self.commands: Dict[str, Command] = {
            command.name: command
            for command in (
                StatusCommand(version=self._version),
                GeneralizeCommand(),
                ScoreCommand(),
                SelectCommand(),
                ValidateCommand(),
            )
        }

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        # Handle --help specially to return 0
        if argv is not None:
            argv_list = list(argv)
            if argv_list in (["--help"], ["-h"]):
                self.parser.print_help()
                return EXIT_SUCCESS
        else:
            argv_list = None

        try:
            args = self.parser.parse_args(argv_list)
        except SystemExit as e:
            # argparse exits 0 for subcommand --help, 2 for usage errors
            return EXIT_SUCCESS if e.code == 0 else EXIT_INVALID_USAGE

        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command_name = getattr(args, "command", None)
        command = self.commands.get(command_name) if command_name else None
        if command is None:
            self.parser.print_help()
            return EXIT_SUCCESS

        config: Optional[PlatpickConfig] = None
        if command_name in _CONFIGURED_COMMANDS:
            try:
                config = self._load_config(args)
            except ConfigError as e:
                LOGGER.error(str(e))
                return EXIT_INVALID_USAGE

        return command.execute(args, config)

    def _load_config(self, args: Namespace) -> PlatpickConfig:
        """Load configuration for a command, applying CLI overrides."""
        config_path = getattr(args, "config", None)
        overrides = {}
        if getattr(args, "platform", None):
            overrides["platform"] = args.platform
        if getattr(args, "force_generic", None) is not None:
            overrides["force_generic"] = args.force_generic
        if getattr(args, "prefer_locked", None) is not None:
            overrides["prefer_locked"] = args.prefer_locked
        if getattr(args, "format", None):
            overrides["output"] = {"format": args.format}

        return load_config(
            project_root=Path.cwd(),
            cli_config_path=Path(config_path) if config_path else None,
            cli_overrides=overrides or None,
        )

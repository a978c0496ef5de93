"""Validate command implementation."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from platpick.config.models import PlatpickConfig

from platpick.cli.commands import Command
from platpick.cli.exit_codes import EXIT_INVALID_CONFIG, EXIT_INVALID_USAGE, EXIT_SUCCESS
from platpick.config.loader import PROJECT_CONFIG_NAMES, ConfigError, find_project_config, load_yaml_file
from platpick.config.validation import ConfigValidationIssue, validate_config_file
from platpick.platforms import Platform
from platpick.selection import generalize


class ValidateCommand(Command):
    """Checks a platpick configuration file and reports its issues."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "validate"

    def execute(self, args: Namespace, config: "PlatpickConfig | None" = None) -> int:
        """Validate ``--config`` or the project config in the current directory.

        Returns:
            Exit code: 0 = valid, 1 = has errors, 3 = no file to validate.
        """
        config_path = self._resolve_path(getattr(args, "config", None))
        if config_path is None:
            print("No configuration file found.")
            print(f"Looked for: {', '.join(PROJECT_CONFIG_NAMES)}")
            return EXIT_INVALID_USAGE
        if not config_path.exists():
            print(f"Configuration file not found: {config_path}")
            return EXIT_INVALID_USAGE

        print(f"Validating {config_path}...")
        is_valid, issues = validate_config_file(config_path)

        errors = [issue for issue in issues if issue.is_error]
        warnings = [issue for issue in issues if not issue.is_error]
        self._print_section("Errors", errors)
        self._print_section("Warnings", warnings)

        if not is_valid:
            print(f"\nConfiguration is invalid ({len(errors)} error(s)).")
            return EXIT_INVALID_CONFIG

        self._print_target_platform(config_path)
        if warnings:
            print(f"\nConfiguration is valid with {len(warnings)} warning(s).")
        else:
            print("Configuration is valid.")
        return EXIT_SUCCESS

    def _resolve_path(self, config_arg: Optional[str]) -> Optional[Path]:
        if config_arg:
            return Path(config_arg)
        return find_project_config(Path.cwd())

    def _print_section(self, title: str, issues: List[ConfigValidationIssue]) -> None:
        if not issues:
            return
        print(f"\n{title} ({len(issues)}):")
        for issue in issues:
            location = f" [{issue.key}]" if issue.key else ""
            print(f"  - {issue.message}{location}")
            if issue.suggestion:
                print(f"    Did you mean '{issue.suggestion}'?")

    def _print_target_platform(self, config_path: Path) -> None:
        """Show how a configured platform override will be interpreted."""
        try:
            platform_text = load_yaml_file(config_path).get("platform")
        except ConfigError:
            return
        if not platform_text:
            return
        platform = Platform.parse(platform_text)
        print(f"Target platform: {platform} (generic: {generalize(platform)})")

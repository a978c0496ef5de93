"""Argument parser construction for the platpick CLI.

Subcommands:
- platpick status     - Show the local platform and its generic bucket
- platpick generalize - Map platforms to their generic buckets
- platpick score      - Score a declared platform against a target
- platpick select     - Pick the best variant(s) from a manifest
- platpick validate   - Validate a configuration file
"""

from __future__ import annotations

import argparse


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show platpick version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to a config file (default: .platpick.yml in the current directory).",
    )


def _build_status_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'status' subcommand parser."""
    status_parser = subparsers.add_parser(
        "status",
        help="Show the local platform and its generic bucket.",
    )
    _add_config_option(status_parser)


def _build_generalize_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'generalize' subcommand parser."""
    generalize_parser = subparsers.add_parser(
        "generalize",
        help="Show the generic bucket of one or more platforms.",
    )
    generalize_parser.add_argument(
        "platforms",
        nargs="+",
        metavar="PLATFORM",
        help="Platform strings such as x86_64-linux or x64-mingw-ucrt.",
    )


def _build_score_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'score' subcommand parser."""
    score_parser = subparsers.add_parser(
        "score",
        help="Score how specifically a declared platform fits a target.",
        description="Lower scores are better; -1 is an exact match.",
    )
    score_parser.add_argument("declared", help="Platform the variant was built for.")
    score_parser.add_argument("target", help="Platform being installed to.")


def _build_select_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'select' subcommand parser."""
    select_parser = subparsers.add_parser(
        "select",
        help="Select the best variant(s) from a variant manifest.",
        description=(
            "Read variants from a YAML manifest and select the best one(s) "
            "for a target platform (default: the local platform)."
        ),
    )
    select_parser.add_argument(
        "manifest",
        help="YAML manifest listing the available variants.",
    )
    select_parser.add_argument(
        "--platform",
        metavar="PLATFORM",
        help="Target platform (default: configured or detected local platform).",
    )
    select_parser.add_argument(
        "--all",
        action="store_true",
        help="List every compatible variant instead of the best one(s).",
    )
    select_parser.add_argument(
        "--force-generic",
        action="store_true",
        default=None,
        help="Only consider portable builds and install them as such.",
    )
    select_parser.add_argument(
        "--prefer-locked",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Prefer variants locked by a previous resolution (default: on).",
    )
    select_parser.add_argument(
        "--format",
        choices=["table", "json"],
        default=None,
        help="Output format (default: table).",
    )
    _add_config_option(select_parser)


def _build_validate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'validate' subcommand parser."""
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a platpick configuration file.",
    )
    _add_config_option(validate_parser)


def build_parser() -> argparse.ArgumentParser:
    """Build the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="platpick",
        description="platpick - pick the best pre-built package variant for a platform.",
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    _build_status_parser(subparsers)
    _build_generalize_parser(subparsers)
    _build_score_parser(subparsers)
    _build_select_parser(subparsers)
    _build_validate_parser(subparsers)

    return parser

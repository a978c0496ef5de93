"""Configuration validation for platpick.

Unknown keys are warnings, with a close-match suggestion where one exists.
Values of the wrong type and unknown output formats are errors. A platform
string whose operating system is not recognized is a warning: it still
parses, but nothing will ever be compatible with it except portable builds.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

import yaml

from platpick.config.models import OUTPUT_FORMATS
from platpick.core.logging import get_logger
from platpick.platforms import Platform

LOGGER = get_logger(__name__)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Config cannot be used as written
    WARNING = "warning"  # Likely mistake, config still usable


@dataclass
class ConfigValidationIssue:
    """A single problem found in a configuration source."""

    message: str
    source: str
    severity: ValidationSeverity = ValidationSeverity.WARNING
    key: Optional[str] = None
    suggestion: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity == ValidationSeverity.ERROR

    def __str__(self) -> str:
        text = f"{self.message} in {self.source}"
        if self.suggestion:
            text += f" (did you mean '{self.suggestion}'?)"
        return text


VALID_TOP_LEVEL_KEYS: Set[str] = {
    "platform",
    "force_generic",
    "prefer_locked",
    "output",
}

VALID_OUTPUT_KEYS: Set[str] = {
    "format",
}

BOOLEAN_KEYS: Tuple[str, ...] = ("force_generic", "prefer_locked")


def validate_config(data: Dict[str, Any], source: str) -> List[ConfigValidationIssue]:
    """Check a configuration mapping without raising.

    Warnings are also logged, so that problems in a config file that is
    merely loaded (not explicitly validated) are still visible.

    Args:
        data: Parsed configuration mapping.
        source: Where the mapping came from, for messages.

    Returns:
        Every issue found, errors and warnings alike.
    """
    if not isinstance(data, dict):  # type: ignore[unreachable]
        return [ConfigValidationIssue(  # type: ignore[unreachable]
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
            severity=ValidationSeverity.ERROR,
        )]

    issues: List[ConfigValidationIssue] = []
    issues.extend(_check_unknown_keys(data, VALID_TOP_LEVEL_KEYS, source))
    issues.extend(_check_platform(data.get("platform"), source))
    issues.extend(_check_booleans(data, source))
    issues.extend(_check_output(data.get("output"), source))

    for issue in issues:
        if not issue.is_error:
            LOGGER.warning(str(issue))
    return issues


def _check_unknown_keys(
    data: Dict[str, Any],
    valid_keys: Set[str],
    source: str,
    section: Optional[str] = None,
) -> Iterable[ConfigValidationIssue]:
    for key in data:
        if key in valid_keys:
            continue
        where = f"'{section}'" if section else "top level"
        yield ConfigValidationIssue(
            message=f"Unknown key '{key}' at {where}",
            source=source,
            key=f"{section}.{key}" if section else str(key),
            suggestion=_suggest_key(str(key), valid_keys),
        )


def _check_platform(platform: Any, source: str) -> Iterable[ConfigValidationIssue]:
    if platform is None:
        return
    if not isinstance(platform, str):
        yield ConfigValidationIssue(
            message=f"'platform' must be a string, got {type(platform).__name__}",
            source=source,
            severity=ValidationSeverity.ERROR,
            key="platform",
        )
    elif Platform.parse(platform).os == "unknown":
        yield ConfigValidationIssue(
            message=f"Unrecognized operating system in platform '{platform}'",
            source=source,
            key="platform",
        )


def _check_booleans(data: Dict[str, Any], source: str) -> Iterable[ConfigValidationIssue]:
    for key in BOOLEAN_KEYS:
        value = data.get(key)
        if value is not None and not isinstance(value, bool):
            yield ConfigValidationIssue(
                message=f"'{key}' must be a boolean, got {type(value).__name__}",
                source=source,
                severity=ValidationSeverity.ERROR,
                key=key,
            )


def _check_output(output: Any, source: str) -> Iterable[ConfigValidationIssue]:
    if output is None:
        return
    if not isinstance(output, dict):
        yield ConfigValidationIssue(
            message=f"'output' must be a mapping, got {type(output).__name__}",
            source=source,
            severity=ValidationSeverity.ERROR,
            key="output",
        )
        return

    yield from _check_unknown_keys(output, VALID_OUTPUT_KEYS, source, section="output")

    fmt = output.get("format")
    if fmt is not None and fmt not in OUTPUT_FORMATS:
        yield ConfigValidationIssue(
            message=f"Invalid value '{fmt}' for 'output.format'. "
                    f"Valid values: {', '.join(OUTPUT_FORMATS)}",
            source=source,
            severity=ValidationSeverity.ERROR,
            key="output.format",
            suggestion=_suggest_key(str(fmt), set(OUTPUT_FORMATS)),
        )


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Closest valid key for a likely typo, or None."""
    matches = get_close_matches(invalid_key, sorted(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def validate_config_file(config_path: Path) -> Tuple[bool, List[ConfigValidationIssue]]:
    """Validate a configuration file on disk.

    Returns:
        ``(is_valid, issues)``; ``is_valid`` is False if any issue is an
        error. A missing file or broken YAML is a single error; an empty
        file is valid with a warning.
    """
    source = str(config_path)

    def single(message: str, severity: ValidationSeverity) -> List[ConfigValidationIssue]:
        return [ConfigValidationIssue(message=message, source=source, severity=severity)]

    if not config_path.exists():
        return False, single(f"Configuration file not found: {config_path}", ValidationSeverity.ERROR)

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, single(f"Invalid YAML syntax: {e}", ValidationSeverity.ERROR)

    if data is None:
        return True, single("Configuration file is empty", ValidationSeverity.WARNING)

    issues = validate_config(data, source)
    return not any(issue.is_error for issue in issues), issues

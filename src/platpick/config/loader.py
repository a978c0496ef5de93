"""Layered configuration loading.

Layers, lowest precedence first:

1. built-in defaults (``PlatpickConfig()``)
2. global config, ``$PLATPICK_HOME/config/config.yml``
3. project config (``.platpick.yml`` and friends) or an explicit ``--config``
4. CLI flag overrides

String values may reference the environment as ``${VAR}`` or
``${VAR:-default}``. Mappings are merged key by key; anything else in a
higher layer replaces the lower value.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import yaml

from platpick.bootstrap.paths import PlatpickPaths
from platpick.config.models import OutputConfig, PlatpickConfig
from platpick.config.validation import validate_config
from platpick.core.logging import get_logger

LOGGER = get_logger(__name__)

PROJECT_CONFIG_NAMES = [".platpick.yml", ".platpick.yaml", "platpick.yml", "platpick.yaml"]

# ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


@dataclass(frozen=True)
class ConfigLayer:
    """A configuration file taking part in the merge.

    Attributes:
        label: ``global``, ``project`` or ``custom``.
        path: File location.
        required: Whether a broken file aborts loading. Optional layers
            are skipped with a warning instead.
    """

    label: str
    path: Path
    required: bool = True

    @property
    def source(self) -> str:
        return f"{self.label}:{self.path}"


def load_config(
    project_root: Path,
    cli_config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> PlatpickConfig:
    """Load and merge every configuration layer.

    Args:
        project_root: Directory searched for a project config file.
        cli_config_path: ``--config`` file used instead of the project file.
        cli_overrides: Values from CLI flags, applied last.

    Raises:
        ConfigError: If ``cli_config_path`` does not exist, or the project
            or custom file is not valid YAML or has invalid values.
    """
    if cli_config_path is not None and not cli_config_path.exists():
        raise ConfigError(f"Config file not found: {cli_config_path}")

    merged: Dict[str, Any] = {}
    sources: List[str] = []
    for layer in _config_layers(project_root, cli_config_path):
        try:
            data = _read_layer(layer)
        except ConfigError as e:
            if layer.required:
                raise
            LOGGER.warning(f"Ignoring {layer.label} config: {e}")
            continue
        merged = merge_configs(merged, data)
        sources.append(layer.source)
        LOGGER.debug(f"Loaded {layer.label} config from {layer.path}")

    if cli_overrides:
        merged = merge_configs(merged, cli_overrides)
        sources.append("cli")

    config = dict_to_config(merged)
    config._config_sources = sources
    LOGGER.debug(f"Config loaded from sources: {sources}")
    return config


def _config_layers(project_root: Path, cli_config_path: Optional[Path]) -> Iterator[ConfigLayer]:
    global_path = find_global_config()
    if global_path is not None:
        yield ConfigLayer("global", global_path, required=False)

    if cli_config_path is not None:
        yield ConfigLayer("custom", cli_config_path)
        return

    project_path = find_project_config(project_root)
    if project_path is not None:
        yield ConfigLayer("project", project_path)


def _read_layer(layer: ConfigLayer) -> Dict[str, Any]:
    try:
        data = load_yaml_file(layer.path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {layer.path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {layer.path}: {e}") from e

    errors = [issue for issue in validate_config(data, source=str(layer.path)) if issue.is_error]
    if errors:
        details = "; ".join(issue.message for issue in errors)
        raise ConfigError(f"Invalid configuration in {layer.path}: {details}")
    return data


def find_project_config(project_root: Path) -> Optional[Path]:
    """First existing project config file in ``project_root``, if any."""
    for name in PROJECT_CONFIG_NAMES:
        config_path = project_root / name
        if config_path.exists():
            return config_path
    return None


def find_global_config() -> Optional[Path]:
    """Global config file, if it exists."""
    config_path = PlatpickPaths.default().global_config
    return config_path if config_path.exists() else None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Parse a YAML config file and expand environment references.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")
    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Expand ``${VAR}`` references in every string nested in ``data``."""
    if isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    if isinstance(data, dict):
        return {key: expand_env_vars(value) for key, value in data.items()}
    if isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    return data


def _env_var_replacer(match: re.Match[str]) -> str:
    name, default = match.group(1), match.group(2)
    value = os.environ.get(name, default)
    if value is None:
        LOGGER.warning(f"Environment variable ${name} is not set and has no default")
        return ""
    return value


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``overlay`` onto ``base``; nested mappings merge recursively."""
    result = dict(base)
    for key, value in overlay.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = merge_configs(current, value)
        else:
            result[key] = value
    return result


def dict_to_config(data: Dict[str, Any]) -> PlatpickConfig:
    """Build a typed ``PlatpickConfig`` from a merged mapping."""
    output = data.get("output") or {}
    platform = data.get("platform")
    return PlatpickConfig(
        platform=str(platform) if platform else None,
        force_generic=bool(data.get("force_generic", False)),
        prefer_locked=bool(data.get("prefer_locked", True)),
        output=OutputConfig(format=output.get("format", "table")),
    )

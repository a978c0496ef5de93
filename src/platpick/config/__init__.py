"""Configuration loading for platpick."""

from platpick.config.loader import ConfigError, load_config
from platpick.config.models import OutputConfig, PlatpickConfig

__all__ = [
    "ConfigError",
    "load_config",
    "OutputConfig",
    "PlatpickConfig",
]

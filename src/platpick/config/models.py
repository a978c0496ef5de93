"""Typed configuration for platpick."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from platpick.platforms import Platform

OUTPUT_FORMATS = ("table", "json")


@dataclass
class OutputConfig:
    """Output settings."""

    format: str = "table"


@dataclass
class PlatpickConfig:
    """Merged platpick configuration.

    Attributes:
        platform: Platform string overriding local detection, if any.
        force_generic: Install portable builds even where native ones exist.
        prefer_locked: Prefer variants pinned by a previous resolution.
        output: Output settings.
    """

    platform: Optional[str] = None
    force_generic: bool = False
    prefer_locked: bool = True
    output: OutputConfig = field(default_factory=OutputConfig)

    # Where the configuration was loaded from, for `platpick status`
    _config_sources: List[str] = field(default_factory=list)

    @property
    def platform_override(self) -> Optional[Platform]:
        """Parsed platform override, or None to detect the local platform."""
        if not self.platform:
            return None
        return Platform.parse(self.platform)

"""Location of platpick's home directory and the files kept in it."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_HOME_DIR_NAME = ".platpick"
PLATPICK_HOME_ENV = "PLATPICK_HOME"


def get_platpick_home() -> Path:
    """``$PLATPICK_HOME`` if set (``~`` is expanded), else ``~/.platpick``."""
    env_home = os.environ.get(PLATPICK_HOME_ENV, "").strip()
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / DEFAULT_HOME_DIR_NAME


@dataclass(frozen=True)
class PlatpickPaths:
    """Files under a platpick home directory.

    Layout::

        <home>/
          config/
            config.yml    global configuration
    """

    home: Path

    @classmethod
    def default(cls) -> "PlatpickPaths":
        return cls(get_platpick_home())

    @property
    def config_dir(self) -> Path:
        return self.home / "config"

    @property
    def global_config(self) -> Path:
        return self.config_dir / "config.yml"

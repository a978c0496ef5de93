"""Logging setup for platpick.

Modules log through ``get_logger(__name__)``; the CLI calls
``configure_logging`` once per run. Log records go to stderr so that
command output on stdout (including ``--format json``) stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "platpick"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is when a record is emitted.

    ``sys.stderr`` may be replaced (or the old one closed) between CLI runs
    in one process, so the stream is never cached.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Set the platpick log level from CLI flags.

    Precedence:
    - quiet -> ERROR
    - debug -> DEBUG
    - verbose -> INFO
    - default -> WARNING
    """
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if isinstance(h, StderrHandler)), None)
    if handler is None:
        handler = StderrHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT if debug else LOG_FORMAT))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``platpick`` namespace."""
    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)

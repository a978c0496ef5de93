"""Tests for platpick.core.logging."""

from __future__ import annotations

import io
import logging
import sys

from platpick.core.logging import PACKAGE_LOGGER, StderrHandler, configure_logging, get_logger


class TestGetLogger:
    """Tests for get_logger."""

    def test_default_is_package_logger(self) -> None:
        assert get_logger().name == PACKAGE_LOGGER

    def test_module_name_kept(self) -> None:
        assert get_logger("platpick.selection.selector").name == "platpick.selection.selector"

    def test_foreign_name_is_namespaced(self) -> None:
        assert get_logger("plugins.extra").name == "platpick.plugins.extra"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_levels(self) -> None:
        logger = logging.getLogger(PACKAGE_LOGGER)

        configure_logging()
        assert logger.level == logging.WARNING
        configure_logging(verbose=True)
        assert logger.level == logging.INFO
        configure_logging(debug=True, verbose=True)
        assert logger.level == logging.DEBUG
        configure_logging(debug=True, quiet=True)
        assert logger.level == logging.ERROR

    def test_handler_installed_once(self) -> None:
        configure_logging()
        configure_logging(debug=True)
        logger = logging.getLogger(PACKAGE_LOGGER)
        ours = [h for h in logger.handlers if isinstance(h, StderrHandler)]
        assert len(ours) == 1

    def test_reconfigure_after_stderr_closed(self, monkeypatch) -> None:
        first = io.TextIOWrapper(io.BytesIO())
        monkeypatch.setattr(sys, "stderr", first)
        configure_logging()
        first.close()

        second = io.StringIO()
        monkeypatch.setattr(sys, "stderr", second)
        configure_logging()
        get_logger("platpick.test").warning("still logging")

        assert "still logging" in second.getvalue()

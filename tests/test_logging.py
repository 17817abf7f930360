"""Tests for framecode.logging module."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from framecode.logging import configure_logging, get_logger, logger


@pytest.fixture(autouse=True)
def restore_level() -> Iterator[None]:
    level = logger.level
    yield
    logger.setLevel(level)


class TestGetLogger:
    def test_module_logger_is_child(self) -> None:
        assert get_logger("framecode.timecode").name == "framecode.timecode"
        assert get_logger("framecode.timecode").parent is logger

    def test_package_name_returns_package_logger(self) -> None:
        assert get_logger("framecode") is logger


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logger.level == logging.DEBUG
        assert get_logger("framecode.config").isEnabledFor(logging.DEBUG)

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logger.level == logging.WARNING
        assert not get_logger("framecode.config").isEnabledFor(logging.DEBUG)

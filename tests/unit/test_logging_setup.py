"""
Unit Tests for configure_logging.

Test Aspects Covered:
    ✅ Business Logic: Package logger level follows the requested level
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

import latest_stock_price

PACKAGE_LOGGER = "latest_stock_price"


@pytest.fixture(autouse=True)
def restore_package_level() -> Iterator[None]:
    """Put the package logger back the way the test found it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield
    logger.setLevel(level)


class TestConfigureLogging:
    """Test cases for configure_logging."""

    @pytest.mark.parametrize("level", [logging.DEBUG, logging.WARNING])
    def test_sets_package_logger_level(self, level: int) -> None:
        latest_stock_price.configure_logging(level)

        assert logging.getLogger(PACKAGE_LOGGER).level == level

    def test_module_loggers_inherit_level(self) -> None:
        """
        SCENARIO: DEBUG requested for the package
        EXPECTED: Pipeline module logger emits DEBUG records
        """
        latest_stock_price.configure_logging(logging.DEBUG)

        pipeline_logger = logging.getLogger("latest_stock_price.pipeline.query_pipeline")
        assert pipeline_logger.isEnabledFor(logging.DEBUG)

    def test_default_level_is_info(self) -> None:
        latest_stock_price.configure_logging()

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert package_logger.level == logging.INFO
        assert not package_logger.isEnabledFor(logging.DEBUG)

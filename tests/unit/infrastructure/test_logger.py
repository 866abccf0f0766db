"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from flyweight_registry.config.schemas import LoggingConfig
from flyweight_registry.domain.core.exceptions import ConfigurationError
from flyweight_registry.infrastructure.logging.logger import (
    DetailedFormatter,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Test logging configuration."""

    def test_stdout_destination(self, restore_root_logger):
        setup_logging(LoggingConfig(level="debug", destination="stdout"))

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, DetailedFormatter)

    def test_file_destination_writes_records(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "registry.log"

        logger = setup_logging(
            LoggingConfig(level="INFO", destination="file", file_path=str(log_file))
        )
        logger.info("Registry ready", registry="vehicle-types")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert isinstance(restore_root_logger.handlers[0], RotatingFileHandler)
        content = log_file.read_text()
        assert "Registry ready" in content
        assert "registry='vehicle-types'" in content
        assert "- INFO - flyweight_registry [" in content

    def test_file_destination_requires_path(self, restore_root_logger):
        with pytest.raises(ConfigurationError, match="file path"):
            setup_logging(LoggingConfig(destination="file"))

    def test_detailed_formatter_adds_caller_info(self):
        formatter = DetailedFormatter("%(caller_info)s %(message)s")
        record = logging.LogRecord(
            "test", logging.INFO, "/x/module.py", 12, "hello", None, None, func="run"
        )

        assert formatter.format(record) == "module.run:12 hello"

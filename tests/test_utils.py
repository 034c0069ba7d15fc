"""
Tests for logging and configuration.
"""

import logging
from pathlib import Path

import pytest

from create_typical.core.config import Settings
from create_typical.utils import get_logger, setup_logging
from create_typical.utils.logging_config import FileFormatter, MeasureFormatter


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(**extra):
    record = logging.LogRecord(
        "create_typical.test", logging.INFO, __file__, 1, "Assigned weather", None, None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogging:
    """Tests for logging configuration."""

    def test_get_logger(self):
        """Test getting a logger instance."""
        logger = get_logger("test_module")
        assert logger.name == "test_module"

    def test_setup_installs_console_handler(self, restore_root_logger):
        setup_logging(level="debug")
        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.DEBUG
        assert logging.getLogger("eppy").level == logging.WARNING

    def test_setup_with_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging(level="INFO", log_to_file=True, log_file=str(log_file))

        get_logger("create_typical.test").info("hello", extra={"template": "90.1-2013"})
        for handler in restore_root_logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "hello" in content
        assert "90.1-2013" in content


class TestFormatters:

    def test_console_formatter_appends_context(self):
        formatter = MeasureFormatter(use_colors=False)
        text = formatter.format(make_record(climate_zone="ASHRAE 169-2013-5A"))
        assert text.endswith("Assigned weather [climate_zone=ASHRAE 169-2013-5A]")

    def test_console_formatter_without_context(self):
        text = MeasureFormatter(use_colors=False).format(make_record())
        assert text.endswith("Assigned weather")

    def test_file_formatter(self):
        text = FileFormatter().format(make_record(error_kind="DUPLICATE_ZONES"))
        assert "'level': 'INFO'" in text
        assert "'error_kind': 'DUPLICATE_ZONES'" in text


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CREATE_TYPICAL_OPENSTUDIO_PATH", raising=False)
        config = Settings(_env_file=None)
        assert config.generator_timeout_seconds == 1800
        assert config.openstudio_path is None
        assert config.geometry_dir == Path("data/geometry")

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CREATE_TYPICAL_GEOMETRY_DIR", str(tmp_path))
        monkeypatch.setenv("CREATE_TYPICAL_GENERATOR_TIMEOUT_SECONDS", "60")
        config = Settings(_env_file=None)
        assert config.geometry_dir == tmp_path
        assert config.generator_timeout_seconds == 60

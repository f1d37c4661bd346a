import logging

import pytest
import structlog
from pydantic import ValidationError

from roster.config import Settings
from roster.constants import LOG_FILE_NAME
from roster.logging_config import get_logger, setup_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for var in ("ROSTER_DEBUG", "ROSTER_LOG_LEVEL", "ROSTER_LOG_TO_FILE"):
        monkeypatch.delenv(var, raising=False)

    config = Settings(_env_file=None)
    assert config.debug is False
    assert config.log_to_file is False
    assert config.effective_log_level == "INFO"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch):
    """Test that settings are read from prefixed environment variables."""
    monkeypatch.setenv("ROSTER_DEBUG", "true")
    monkeypatch.setenv("ROSTER_LOG_LEVEL", " warning ")

    config = Settings(_env_file=None)
    assert config.debug is True
    assert config.log_level == "WARNING"
    assert config.effective_log_level == "WARNING"


def test_debug_defaults_to_debug_level():
    config = Settings(_env_file=None, debug=True, log_level=None)
    assert config.effective_log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError, match="Log level must be one of"):
        Settings(_env_file=None, log_level="chatty")


def test_setup_logging_console_only(tmp_path):
    """Test that without file logging only the rich handler is installed."""
    config = Settings(_env_file=None, log_dir=tmp_path / "logs")

    setup_logging(config=config)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO
    assert len(root_logger.handlers) == 1
    assert not (tmp_path / "logs").exists()


def test_setup_logging_to_file(tmp_path):
    """Test that file logging writes stdlib records to the log directory."""
    config = Settings(
        _env_file=None, log_to_file=True, log_dir=tmp_path / "logs", debug=True
    )

    setup_logging(config=config)
    logging.getLogger("records").debug("written to file")

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    for handler in root_logger.handlers:
        handler.flush()
    content = (tmp_path / "logs" / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "records | DEBUG | written to file" in content


def test_setup_logging_override_level(tmp_path):
    setup_logging("error", config=Settings(_env_file=None, log_dir=tmp_path))
    assert logging.getLogger().level == logging.ERROR


def test_structlog_filters_below_level(tmp_path, capsys: pytest.CaptureFixture):
    """Test that structlog output respects the configured level."""
    setup_logging("warning", config=Settings(_env_file=None, log_dir=tmp_path))
    capsys.readouterr()

    logger = get_logger("roster.test")
    logger.info("hidden")
    logger.warning("shown", field="name")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert '"event": "shown"' in out
    assert structlog.is_configured()


def test_empty_log_level_falls_back_to_default(monkeypatch: pytest.MonkeyPatch):
    """Test that a blank log level in the environment is treated as unset."""
    monkeypatch.setenv("ROSTER_LOG_LEVEL", "")
    monkeypatch.delenv("ROSTER_DEBUG", raising=False)

    config = Settings(_env_file=None)
    assert config.log_level is None
    assert config.effective_log_level == "INFO"


def test_blank_log_level_argument_is_unset():
    config = Settings(_env_file=None, log_level="   ", debug=True)
    assert config.log_level is None
    assert config.effective_log_level == "DEBUG"

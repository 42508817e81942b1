"""
Tests for logging utilities
"""

import logging

from rate_notifier.config import Config
from rate_notifier.utils.logging import get_logger, setup_logger


def test_setup_logger_defaults_to_info():
    logger = setup_logger(name="rate_notifier.test_default")

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logger_uses_config_level():
    config = Config(api_key="key", webhook_url="https://example.com/hook", log_level="debug")

    logger = setup_logger(config, name="rate_notifier.test_config_level")

    assert logger.level == logging.DEBUG


def test_setup_logger_level_override_wins():
    config = Config(api_key="key", webhook_url="https://example.com/hook", log_level="DEBUG")

    logger = setup_logger(config, level="warning", name="rate_notifier.test_override")

    assert logger.level == logging.WARNING


def test_setup_logger_replaces_handlers():
    """Test repeated setup on a warm instance does not duplicate output"""
    setup_logger(name="rate_notifier.test_repeat")
    logger = setup_logger(name="rate_notifier.test_repeat")

    assert len(logger.handlers) == 1


def test_setup_logger_writes_config_log_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    config = Config(
        api_key="key", webhook_url="https://example.com/hook", log_file=str(log_file)
    )

    logger = setup_logger(config, console=False, name="rate_notifier.test_file")
    logger.info("posted rate")
    for handler in logger.handlers:
        handler.flush()

    assert log_file.exists()
    assert "posted rate" in log_file.read_text(encoding="utf-8")
    for handler in logger.handlers:
        handler.close()


def test_module_loggers_propagate_to_package_logger(caplog):
    setup_logger(level="INFO")

    with caplog.at_level(logging.INFO, logger="rate_notifier"):
        get_logger("rate_notifier.services.exchange_rate").info("Exchange rate: 1 USD = 1.4 AUD")

    assert "Exchange rate: 1 USD = 1.4 AUD" in caplog.text


def test_get_logger_returns_named_logger():
    assert get_logger("rate_notifier.x") is logging.getLogger("rate_notifier.x")

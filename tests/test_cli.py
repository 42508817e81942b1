"""
Tests for CLI module
"""

from unittest.mock import patch

import pytest

from rate_notifier.cli import main, parse_args
from rate_notifier.exceptions import HTTPStatusError
from rate_notifier.handler import PubSubMessage


def test_parse_args_defaults():
    args = parse_args([])
    assert args.env_file is None
    assert args.log_level is None
    assert args.payload == "hello"


def test_parse_args_log_level_case_insensitive():
    args = parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"


def test_parse_args_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "verbose"])


@patch("rate_notifier.cli.handle_message")
def test_main_success(mock_handle_message, mock_env):
    mock_handle_message.return_value = 1.41523

    main(["--payload", "ping"])

    mock_handle_message.assert_called_once()
    args, kwargs = mock_handle_message.call_args
    assert args == (PubSubMessage(data=b"ping"),)
    assert kwargs["config"].api_key == "test_api_key_123"


@patch("rate_notifier.cli.handle_message")
@patch("rate_notifier.config.load_dotenv")
def test_main_configuration_error(mock_load_dotenv, mock_handle_message, monkeypatch, capsys):
    """Test missing configuration exits before running"""
    mock_load_dotenv.return_value = None
    monkeypatch.delenv("TRANSFERWISE_API_KEY", raising=False)
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    mock_handle_message.assert_not_called()
    assert "TRANSFERWISE_API_KEY" in capsys.readouterr().out


@patch("rate_notifier.cli.handle_message")
def test_main_application_error(mock_handle_message, mock_env, capsys):
    mock_handle_message.side_effect = HTTPStatusError(
        "Bad status code from Slack webhook: 500 Internal Server Error", status_code=500
    )

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    assert "Slack webhook" in capsys.readouterr().out


@patch("rate_notifier.cli.handle_message")
def test_main_keyboard_interrupt(mock_handle_message, mock_env):
    mock_handle_message.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 0

"""
Pytest configuration and fixtures
"""

from typing import Any, Dict, List
from unittest.mock import Mock

import pytest
import requests

from rate_notifier.config import Config


@pytest.fixture
def sample_config() -> Dict[str, str]:
    """Sample configuration for testing"""
    return {
        "TRANSFERWISE_API_KEY": "test_api_key_123",
        "SLACK_WEBHOOK_URL": "https://hooks.slack.com/services/T000/B000/XXXX",
    }


@pytest.fixture
def mock_env(sample_config, monkeypatch):
    """Mock environment variables"""
    for key, value in sample_config.items():
        monkeypatch.setenv(key, value)
    for key in (
        "REQUEST_TIMEOUT",
        "SLACK_USERNAME",
        "SLACK_ICON_EMOJI",
        "SLACK_CHANNEL",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config(sample_config) -> Config:
    """Explicit configuration, independent of the process environment"""
    return Config(
        api_key=sample_config["TRANSFERWISE_API_KEY"],
        webhook_url=sample_config["SLACK_WEBHOOK_URL"],
    )


def _make_response(status_code: int = 200, json_data: Any = None, reason: str = "OK") -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    response.json.return_value = json_data
    return response


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects"""
    return _make_response


@pytest.fixture
def single_rate() -> List[Dict[str, Any]]:
    """Rates API response with exactly one record"""
    return [{"rate": 1.41523, "source": "USD", "target": "AUD"}]


@pytest.fixture
def session() -> Mock:
    """Fake HTTP session with no responses configured"""
    return Mock(spec=requests.Session)

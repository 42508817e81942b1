"""
Configuration management for Rate Notifier
"""

import math
import os
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_CHANNEL,
    DEFAULT_ICON_EMOJI,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT,
    DEFAULT_USERNAME,
    ENV_API_KEY,
    ENV_WEBHOOK_URL,
)
from .exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Configuration for a single rate notification run"""

    def __init__(
        self,
        api_key: str,
        webhook_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        username: str = DEFAULT_USERNAME,
        icon_emoji: str = DEFAULT_ICON_EMOJI,
        channel: str = DEFAULT_CHANNEL,
        log_level: str = DEFAULT_LOG_LEVEL,
        log_file: Optional[str] = None,
    ):
        """
        Initialize configuration

        Args:
            api_key: TransferWise API key
            webhook_url: Slack incoming webhook URL
            timeout: Per-request timeout in seconds
            username: Bot display name for the Slack message
            icon_emoji: Bot avatar emoji for the Slack message
            channel: Slack channel the message is posted to
            log_level: Log level name
            log_file: Optional log file path

        Raises:
            ConfigurationError: If required config is missing
        """
        self._api_key = api_key or ""
        self._webhook_url = webhook_url or ""
        self._timeout = timeout
        self._username = username
        self._icon_emoji = icon_emoji
        self._channel = channel
        self._log_level = (log_level or DEFAULT_LOG_LEVEL).upper()
        self._log_file = log_file

        self._validate()

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Config":
        """
        Build configuration from environment variables

        Args:
            env_file: Optional path to .env file

        Returns:
            Config instance

        Raises:
            ConfigurationError: If required config is missing
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            api_key=os.getenv(ENV_API_KEY, ""),
            webhook_url=os.getenv(ENV_WEBHOOK_URL, ""),
            timeout=_parse_timeout(os.getenv("REQUEST_TIMEOUT")),
            username=os.getenv("SLACK_USERNAME", DEFAULT_USERNAME),
            icon_emoji=os.getenv("SLACK_ICON_EMOJI", DEFAULT_ICON_EMOJI),
            channel=os.getenv("SLACK_CHANNEL", DEFAULT_CHANNEL),
            log_level=_parse_log_level(os.getenv("LOG_LEVEL")),
            log_file=os.getenv("LOG_FILE"),
        )

    def _validate(self) -> None:
        """
        Validate required configuration

        Raises:
            ConfigurationError: If required config is missing or invalid
        """
        if not self._api_key:
            raise ConfigurationError(f"{ENV_API_KEY} is required")
        if not self._webhook_url:
            raise ConfigurationError(f"{ENV_WEBHOOK_URL} is required")
        if not math.isfinite(self._timeout) or self._timeout <= 0:
            raise ConfigurationError(f"Timeout must be a positive number, got {self._timeout}")
        if self._log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self._log_level}")

    @property
    def api_key(self) -> str:
        """Get TransferWise API key"""
        return self._api_key

    @property
    def webhook_url(self) -> str:
        """Get Slack webhook URL"""
        return self._webhook_url

    @property
    def timeout(self) -> float:
        """Get per-request timeout in seconds"""
        return self._timeout

    @property
    def username(self) -> str:
        return self._username

    @property
    def icon_emoji(self) -> str:
        return self._icon_emoji

    @property
    def channel(self) -> str:
        return self._channel

    @property
    def log_level(self) -> str:
        """Get log level"""
        return self._log_level

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path"""
        return self._log_file

    def __repr__(self) -> str:
        return (
            f"Config(webhook_url=<redacted>, timeout={self._timeout}, "
            f"username={self._username!r}, channel={self._channel!r})"
        )


def _parse_timeout(value: Optional[str]) -> float:
    """Parse a timeout value, falling back to the default"""
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        return DEFAULT_TIMEOUT
    if not math.isfinite(timeout) or timeout <= 0:
        return DEFAULT_TIMEOUT
    return timeout


def _parse_log_level(value: Optional[str]) -> str:
    if value and value.upper() in LOG_LEVELS:
        return value.upper()
    return DEFAULT_LOG_LEVEL

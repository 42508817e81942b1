"""
Notification service for posting exchange rates to Slack

Messages are delivered through a Slack incoming webhook
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

import requests

from ..constants import (
    DEFAULT_CHANNEL,
    DEFAULT_ICON_EMOJI,
    DEFAULT_TIMEOUT,
    DEFAULT_USERNAME,
    RATE_MESSAGE_TEMPLATE,
    USER_AGENT,
)
from ..exceptions import DataParsingError, HTTPStatusError, TransportError
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SlackMessageField:
    """A title/value pair displayed in a table on the message"""

    title: str
    value: str
    short: bool = False


@dataclass
class SlackMessage:
    """Incoming webhook payload"""

    text: str
    username: str = ""
    icon_url: str = ""
    icon_emoji: str = ""
    channel: str = ""
    fallback: str = ""
    pretext: str = ""
    color: str = ""  # e.g. "#36a64f", "good", "warning", "danger"
    fields: List[SlackMessageField] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a webhook payload, omitting empty optional values"""
        payload = {"text": self.text}
        for key, value in asdict(self).items():
            if key != "text" and value:
                payload[key] = value
        return payload


def format_rate_text(rate: float) -> str:
    """Format a rate into the message text"""
    return RATE_MESSAGE_TEMPLATE.format(rate=rate)


class SlackNotifier:
    """Slack webhook notification service"""

    def __init__(
        self,
        webhook_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        username: str = DEFAULT_USERNAME,
        icon_emoji: str = DEFAULT_ICON_EMOJI,
        channel: str = DEFAULT_CHANNEL,
        user_agent: str = USER_AGENT,
    ):
        """
        Initialize Slack notifier

        Args:
            webhook_url: Slack incoming webhook URL
            session: Optional HTTP session; a new one is created if omitted
            timeout: Request timeout in seconds
            username: Bot display name
            icon_emoji: Bot avatar emoji
            channel: Channel the message is posted to
            user_agent: User-Agent header value

        Raises:
            ValueError: If webhook_url is empty
        """
        if not webhook_url:
            raise ValueError("Webhook URL cannot be empty")

        self.webhook_url = webhook_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.username = username
        self.icon_emoji = icon_emoji
        self.channel = channel
        self.user_agent = user_agent

    def build_rate_message(self, rate: float) -> SlackMessage:
        """
        Build the message announcing an exchange rate

        Args:
            rate: Exchange rate to announce

        Returns:
            Message with the configured presentation metadata
        """
        return SlackMessage(
            text=format_rate_text(rate),
            username=self.username,
            icon_emoji=self.icon_emoji,
            channel=self.channel,
        )

    def send(self, message: SlackMessage) -> None:
        """
        Post a message to the webhook

        Args:
            message: Message to post

        Raises:
            DataParsingError: If the message cannot be serialized
            TransportError: If the request fails or times out
            HTTPStatusError: If the webhook does not answer with 200
        """
        try:
            body = json.dumps(message.to_dict())
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize Slack message: {e}")
            raise DataParsingError(f"Failed to serialize Slack message: {e}") from e

        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }

        try:
            response = self.session.post(
                self.webhook_url, data=body, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Failed to send Slack webhook request: {e}")
            raise TransportError(f"Failed to send Slack webhook request: {e}") from e

        if response.status_code != 200:
            status = f"{response.status_code} {response.reason}"
            logger.error(f"Bad status code from Slack webhook: {status}")
            raise HTTPStatusError(
                f"Bad status code from Slack webhook: {status}",
                status_code=response.status_code,
                reason=response.reason,
            )

        logger.info(f"Posted message to Slack channel {message.channel or '(default)'}")

    def send_rate(self, rate: float) -> None:
        """Post the exchange rate message"""
        self.send(self.build_rate_message(rate))

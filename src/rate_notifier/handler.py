"""
Invocation entry points

Each invocation fetches the exchange rate and then posts it to Slack.
The trigger payload is not inspected.
"""

import base64
import binascii
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from .config import Config
from .services.exchange_rate import ExchangeRateService
from .services.notification import SlackNotifier
from .utils.logging import get_logger, setup_logger

logger = get_logger(__name__)


@dataclass
class PubSubMessage:
    """Payload of a Pub/Sub event"""

    data: bytes = b""


def run(config: Config, session: Optional[requests.Session] = None) -> float:
    """
    Fetch the exchange rate and post it to Slack

    Args:
        config: Run configuration
        session: Optional HTTP session shared by both calls

    Returns:
        The rate that was posted

    Raises:
        RateNotifierError: If either step fails
    """
    owns_session = session is None
    if owns_session:
        session = requests.Session()

    try:
        fetcher = ExchangeRateService(config.api_key, session=session, timeout=config.timeout)
        notifier = SlackNotifier(
            config.webhook_url,
            session=session,
            timeout=config.timeout,
            username=config.username,
            icon_emoji=config.icon_emoji,
            channel=config.channel,
        )

        rate = fetcher.get_rate()
        notifier.send_rate(rate)
        return rate
    finally:
        if owns_session:
            session.close()


def handle_message(
    message: PubSubMessage,
    config: Optional[Config] = None,
    session: Optional[requests.Session] = None,
) -> float:
    """
    Handle one trigger message

    Args:
        message: Trigger payload (ignored)
        config: Run configuration; loaded from the environment if omitted
        session: Optional HTTP session

    Returns:
        The rate that was posted

    Raises:
        ConfigurationError: If configuration is missing
        RateNotifierError: If either step fails
    """
    logger.debug(f"Received trigger message ({len(message.data)} bytes)")

    if config is None:
        config = Config.from_env()

    return run(config, session=session)


def pubsub_handler(event: Dict[str, Any], context: Any = None) -> None:
    """Cloud Functions background entry point for Pub/Sub triggers"""
    config = Config.from_env()
    setup_logger(config)

    raw = event.get("data") or ""
    try:
        data = base64.b64decode(raw)
    except (binascii.Error, TypeError, ValueError):
        logger.warning("Trigger payload is not valid base64, ignoring it")
        data = b""

    handle_message(PubSubMessage(data=data), config=config)

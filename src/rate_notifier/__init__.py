"""
Rate Notifier
Posts the current USD to AUD exchange rate to a Slack channel
"""

__version__ = "0.1.0"
__author__ = "Rate Notifier Contributors"

from .config import Config
from .handler import PubSubMessage, handle_message, pubsub_handler, run
from .services.exchange_rate import ExchangeRateService
from .services.notification import SlackNotifier

__all__ = [
    "Config",
    "ExchangeRateService",
    "PubSubMessage",
    "SlackNotifier",
    "handle_message",
    "pubsub_handler",
    "run",
]

"""Services module for external integrations"""

from .exchange_rate import ExchangeRate, ExchangeRateService
from .notification import SlackMessage, SlackMessageField, SlackNotifier, format_rate_text

__all__ = [
    "ExchangeRate",
    "ExchangeRateService",
    "SlackMessage",
    "SlackMessageField",
    "SlackNotifier",
    "format_rate_text",
]

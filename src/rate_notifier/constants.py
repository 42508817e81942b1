"""
Constants and configuration defaults for Rate Notifier
"""

# Exchange Rate API Configuration
EXCHANGE_RATE_API_URL = "https://api.transferwise.com/v1/rates"
DEFAULT_SOURCE_CURRENCY = "USD"
DEFAULT_TARGET_CURRENCY = "AUD"

# HTTP Configuration
USER_AGENT = "github.com/porty/transferwise-exchange-rate"
DEFAULT_TIMEOUT = 5.0  # seconds, per outbound call

# Slack Message Configuration
RATE_MESSAGE_TEMPLATE = "The exchange rate is {rate:.5f}"
DEFAULT_USERNAME = "TransferwiseBot"
DEFAULT_ICON_EMOJI = ":moneybag:"
DEFAULT_CHANNEL = "transferwise"

# Environment Variables
ENV_API_KEY = "TRANSFERWISE_API_KEY"
ENV_WEBHOOK_URL = "SLACK_WEBHOOK_URL"

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = "INFO"

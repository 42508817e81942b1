"""
Custom exceptions for Rate Notifier
"""

from typing import Optional


class RateNotifierError(Exception):
    """Base exception for Rate Notifier"""

    pass


class ConfigurationError(RateNotifierError):
    """Raised when configuration is invalid or missing"""

    pass


class APIError(RateNotifierError):
    """Raised when a request to an external API fails"""

    pass


class TransportError(APIError):
    """Raised when a request cannot be sent or times out"""

    pass


class HTTPStatusError(APIError):
    """Raised when an external API answers with a non-success status"""

    def __init__(self, message: str, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class DataParsingError(RateNotifierError):
    """Raised when a payload cannot be parsed or serialized"""

    pass


class RateCountError(DataParsingError):
    """Raised when the rate API does not return exactly one rate"""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Expected one exchange rate, received {count}")

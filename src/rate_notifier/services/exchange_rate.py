"""
Exchange Rate Service
Fetches the current exchange rate for a currency pair from the TransferWise API
"""

import math
from dataclasses import dataclass
from typing import Any, List, Optional

import requests

from ..constants import (
    DEFAULT_SOURCE_CURRENCY,
    DEFAULT_TARGET_CURRENCY,
    DEFAULT_TIMEOUT,
    EXCHANGE_RATE_API_URL,
    USER_AGENT,
)
from ..exceptions import DataParsingError, HTTPStatusError, RateCountError, TransportError
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExchangeRate:
    """A single rate record returned by the rates API"""

    rate: float
    source: str
    target: str

    @classmethod
    def from_dict(cls, record: Any) -> "ExchangeRate":
        """
        Build a rate from one record of the API response

        Raises:
            DataParsingError: If the record is missing fields or has bad values
        """
        if not isinstance(record, dict):
            raise DataParsingError(f"Exchange rate record is not an object: {record!r}")

        try:
            rate = record["rate"]
            source = record["source"]
            target = record["target"]
        except KeyError as e:
            raise DataParsingError(f"Exchange rate record is missing field {e}") from e

        # bool is an int subclass but never a valid rate
        if isinstance(rate, bool) or not isinstance(rate, (int, float)):
            raise DataParsingError(f"Exchange rate is not a number: {rate!r}")
        if not math.isfinite(rate):
            raise DataParsingError(f"Exchange rate is not finite: {rate!r}")
        if not isinstance(source, str) or not isinstance(target, str):
            raise DataParsingError("Exchange rate currency codes must be strings")

        return cls(rate=float(rate), source=source, target=target)


class ExchangeRateService:
    """Client for the TransferWise rates endpoint"""

    def __init__(
        self,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = EXCHANGE_RATE_API_URL,
        user_agent: str = USER_AGENT,
    ):
        """
        Initialize exchange rate service

        Args:
            api_key: TransferWise API key, sent as a bearer token
            session: Optional HTTP session; a new one is created if omitted
            timeout: Request timeout in seconds
            base_url: Rates endpoint URL
            user_agent: User-Agent header value

        Raises:
            ValueError: If api_key is empty
        """
        if not api_key:
            raise ValueError("API key cannot be empty")

        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout
        self.base_url = base_url
        self.user_agent = user_agent

    def get_rates(
        self,
        source: str = DEFAULT_SOURCE_CURRENCY,
        target: str = DEFAULT_TARGET_CURRENCY,
    ) -> List[ExchangeRate]:
        """
        Fetch all rate records for a currency pair

        Args:
            source: Source currency code
            target: Target currency code

        Returns:
            Parsed rate records, in response order

        Raises:
            TransportError: If the request fails or times out
            HTTPStatusError: If the API does not answer with 200
            DataParsingError: If the body is not a JSON array of rate records
        """
        params = {"source": source, "target": target}
        headers = {
            "User-Agent": self.user_agent,
            "Authorization": f"Bearer {self.api_key}",
        }

        logger.info(f"Requesting {source}/{target} exchange rate...")

        try:
            response = self.session.get(
                self.base_url, params=params, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Failed to send exchange rate request: {e}")
            raise TransportError(f"Failed to send exchange rate request: {e}") from e

        if response.status_code != 200:
            status = f"{response.status_code} {response.reason}"
            logger.error(f"Bad status code from exchange rate API: {status}")
            raise HTTPStatusError(
                f"Bad status code from exchange rate API: {status}",
                status_code=response.status_code,
                reason=response.reason,
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Failed to parse exchange rate API response: {e}")
            raise DataParsingError(f"Failed to parse exchange rate API response: {e}") from e

        if not isinstance(payload, list):
            raise DataParsingError(
                f"Expected a list from exchange rate API, got {type(payload).__name__}"
            )

        rates = [ExchangeRate.from_dict(record) for record in payload]
        logger.debug(f"Received {len(rates)} rate record(s)")
        return rates

    def get_rate(
        self,
        source: str = DEFAULT_SOURCE_CURRENCY,
        target: str = DEFAULT_TARGET_CURRENCY,
    ) -> float:
        """
        Fetch the single current rate for a currency pair

        Args:
            source: Source currency code
            target: Target currency code

        Returns:
            Exchange rate (target units per source unit)

        Raises:
            RateCountError: If the API does not return exactly one record
            APIError: If the request fails
            DataParsingError: If the response is malformed
        """
        rates = self.get_rates(source, target)

        if len(rates) != 1:
            logger.error(f"Expected one exchange rate, received {len(rates)}")
            raise RateCountError(len(rates))

        rate = rates[0].rate
        logger.info(f"Exchange rate: 1 {source} = {rate} {target}")
        return rate

# -*- coding: utf-8 -*-
"""
Mercado Bitcoin Public Market Data Client

This module provides a lightweight client for accessing public market data
from Mercado Bitcoin without requiring authentication.
"""

import logging
from datetime import date
from typing import Any

from aiohttp import ClientSession

from .api_methods import decode_payload
from .constants import DEFAULT_PUBLIC_URL, DEFAULT_TIMEOUT
from .http_client import HttpClient
from .models.market import DaySummary, Ticker
from .session_manager import SessionManager
from .utils import (
    parse_date,
    parse_decimal_string,
    parse_integer,
    parse_number,
    parse_timestamp_ms,
    require_dict,
    validate_symbol,
    validate_url,
)


logger = logging.getLogger(__name__)


def parse_ticker(data: Any) -> Ticker:
    """Parse a ``{"ticker": {...}}`` body; prices arrive as strings."""
    ticker = require_dict(require_dict(data, "response")["ticker"], "ticker")
    return Ticker(
        high=parse_decimal_string(ticker["high"], "high"),
        low=parse_decimal_string(ticker["low"], "low"),
        vol=parse_decimal_string(ticker["vol"], "vol"),
        last=parse_decimal_string(ticker["last"], "last"),
        buy=parse_decimal_string(ticker["buy"], "buy"),
        sell=parse_decimal_string(ticker["sell"], "sell"),
        date=parse_timestamp_ms(ticker["date"], "date"),
    )


def parse_day_summary(data: Any) -> DaySummary:
    """Parse a day summary body; statistics arrive as native JSON numbers."""
    data = require_dict(data, "response")
    return DaySummary(
        date=parse_date(data["date"], "date"),
        opening=parse_number(data["opening"], "opening"),
        closing=parse_number(data["closing"], "closing"),
        lowest=parse_number(data["lowest"], "lowest"),
        highest=parse_number(data["highest"], "highest"),
        volume=parse_number(data["volume"], "volume"),
        quantity=parse_number(data["quantity"], "quantity"),
        amount=parse_integer(data["amount"], "amount"),
        avg_price=parse_number(data["avg_price"], "avg_price"),
    )


class MercadoPublicClient:
    """
    A lightweight client for accessing public market data from Mercado Bitcoin
    without requiring authentication.

    Only market-data operations exist on this type; trading needs a
    MercadoPrivateClient or MercadoClient.
    """

    def __init__(self, public_url: str = DEFAULT_PUBLIC_URL, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize the public client.

        Args:
            public_url: Base URL for the public data API
            timeout: Total request timeout in seconds
        """
        if not validate_url(public_url):
            raise ValueError("Base URL must be a valid HTTP/HTTPS URL")

        self.public_url = public_url.rstrip("/")
        self._session_manager = SessionManager(timeout)
        self._http_client = HttpClient()

        logger.info("MercadoPublicClient initialized for public market data access")

    async def _get_session(self) -> ClientSession:
        """Get or create aiohttp session."""
        return await self._session_manager.acquire()

    async def close(self):
        """Close the aiohttp session."""
        await self._session_manager.release()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def ticker_url(self, currency: str) -> str:
        return f"{self.public_url}/{currency}/ticker"

    def day_summary_url(self, currency: str, day: date) -> str:
        # Month and day are not zero padded
        return f"{self.public_url}/{currency}/day-summary/{day.year}/{day.month}/{day.day}"

    async def ticker(self, currency: str) -> Ticker:
        """
        Get the current ticker for a currency.

        Args:
            currency: Currency symbol (e.g., 'BTC', 'ETH', 'LTC')

        Returns:
            Ticker with high/low/volume/last/buy/sell prices
        """
        if not validate_symbol(currency):
            raise ValueError(f"Invalid currency format: {currency}")

        session = await self._get_session()
        data = await self._http_client.get(session, self.ticker_url(currency))
        return decode_payload(parse_ticker, data)

    async def day_summary(self, currency: str, day: date) -> DaySummary:
        """
        Get aggregated statistics for one calendar day.

        Args:
            currency: Currency symbol (e.g., 'BTC')
            day: Calendar day to summarise

        Returns:
            DaySummary for that day
        """
        if not validate_symbol(currency):
            raise ValueError(f"Invalid currency format: {currency}")

        session = await self._get_session()
        data = await self._http_client.get(session, self.day_summary_url(currency, day))
        return decode_payload(parse_day_summary, data)


if __name__ == "__main__":
    import asyncio

    # Example usage
    async def main():
        async with MercadoPublicClient() as client:
            print(await client.ticker("BTC"))
            print(await client.day_summary("BTC", date(2021, 3, 4)))

    asyncio.run(main())

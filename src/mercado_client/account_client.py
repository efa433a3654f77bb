"""
Mercado Bitcoin Client - Main orchestration module.

This module provides the authenticated client types:

- MercadoPrivateClient: trade API only (order book, orders, account info)
- MercadoClient: trade API plus public market data

Each type only exposes the operations its configuration can serve, so a
client without credentials has no private methods at all.
"""

import asyncio
import os
import logging
from datetime import date
from typing import Optional, Union
from dotenv import load_dotenv

from .api_methods import APIMethods
from .auth import ApiCredentials, MercadoSigner, NonceGenerator
from .constants import DEFAULT_PRIVATE_URL, DEFAULT_PUBLIC_URL, DEFAULT_TIMEOUT
from .http_client import HttpClient
from .models import (
    AccountInfo, ConnectionConfig, DaySummary, NoncePrecision, Order,
    Orderbook, OrderType, Ticker,
)
from .public_client import MercadoPublicClient
from .session_manager import SessionManager

load_dotenv()
logger = logging.getLogger(__name__)


def _config_from_env() -> ConnectionConfig:
    """Build a ConnectionConfig from MB_* environment variables."""
    return ConnectionConfig(
        identifier=os.getenv("MB_TAPI_ID", ""),
        secret=os.getenv("MB_TAPI_SECRET", ""),
        private_url=os.getenv("MB_PRIVATE_URL", DEFAULT_PRIVATE_URL),
        timeout=float(os.getenv("MB_TIMEOUT", str(DEFAULT_TIMEOUT))),
        nonce_precision=NoncePrecision(os.getenv("MB_NONCE_PRECISION", NoncePrecision.NANOSECONDS.value)),
    )


class MercadoPrivateClient:
    """
    Authenticated trade API client.

    Coordinates signing, nonce generation and HTTP execution. Holds only
    immutable configuration plus the session and nonce counter.
    """

    def __init__(self, config: ConnectionConfig):
        """Initialize the trade client with configuration."""
        self._config = config
        self._session_manager = SessionManager(config.timeout)
        self._http_client = HttpClient()
        self._signer = MercadoSigner(ApiCredentials(config.identifier, config.secret))
        self._nonce_generator = NonceGenerator(config.nonce_precision)
        self._api_methods = APIMethods(
            self._http_client, config, self._signer, self._nonce_generator
        )
        self._closed = False

        logger.info(f"{type(self).__name__} initialized for trade API at {config.private_url}")

    @classmethod
    def from_env(cls) -> "MercadoPrivateClient":
        """Create client from environment variables."""
        return cls(_config_from_env())

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    # Order book
    async def orderbook(self, coin_pair: str, full: bool = False) -> Orderbook:
        """
        Fetch the authenticated order book.

        Args:
            coin_pair: Trading market (e.g., "BRLBTC")
            full: Return the full book instead of the top entries

        Returns:
            Orderbook with bids and asks
        """
        return await self._execute(self._api_methods.list_orderbook, coin_pair, full)

    # Order methods
    async def place_buy_order(
        self, quantity: float, limit_price: float, coin_pair: str
    ) -> Order:
        """Place a limit buy order."""
        return await self._execute(
            self._api_methods.place_order, OrderType.BUY, quantity, limit_price, coin_pair
        )

    async def place_sell_order(
        self, quantity: float, limit_price: float, coin_pair: str
    ) -> Order:
        """Place a limit sell order."""
        return await self._execute(
            self._api_methods.place_order, OrderType.SELL, quantity, limit_price, coin_pair
        )

    # Account methods
    async def get_account_info(self) -> AccountInfo:
        """Get balances and withdrawal limits."""
        return await self._execute(self._api_methods.get_account_info)

    async def _execute(self, api_method, *args):
        """Execute an API method on the shared session."""
        if self._closed:
            raise RuntimeError("Client is closed")

        start_time = asyncio.get_running_loop().time()
        session = await self._session_manager.acquire()
        try:
            return await api_method(session, *args)
        finally:
            duration_ms = (asyncio.get_running_loop().time() - start_time) * 1000
            logger.debug(f"{api_method.__name__} finished in {duration_ms:.1f} ms")

    async def close(self) -> None:
        """Close client and cleanup resources."""
        if not self._closed:
            await self._session_manager.release()
            self._closed = True
            logger.info("Mercado client closed")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


class MercadoClient(MercadoPrivateClient):
    """Client for both the public data API and the trade API."""

    def __init__(self, config: ConnectionConfig, public_url: str = DEFAULT_PUBLIC_URL):
        super().__init__(config)
        self._public_client = MercadoPublicClient(public_url, timeout=config.timeout)

    @classmethod
    def from_env(cls) -> "MercadoClient":
        """Create client from environment variables."""
        return cls(
            _config_from_env(),
            public_url=os.getenv("MB_PUBLIC_URL", DEFAULT_PUBLIC_URL),
        )

    @property
    def public_url(self) -> str:
        return self._public_client.public_url

    # Market data
    async def ticker(self, currency: str) -> Ticker:
        """Get the current ticker for a currency."""
        if self._closed:
            raise RuntimeError("Client is closed")
        return await self._public_client.ticker(currency)

    async def day_summary(self, currency: str, day: date) -> DaySummary:
        """Get aggregated statistics for one calendar day."""
        if self._closed:
            raise RuntimeError("Client is closed")
        return await self._public_client.day_summary(currency, day)

    async def close(self) -> None:
        """Close both sessions."""
        await self._public_client.close()
        await super().close()


def create_mercado_client(
    identifier: Optional[str] = None,
    secret: Optional[str] = None,
    public_url: str = DEFAULT_PUBLIC_URL,
    private_url: str = DEFAULT_PRIVATE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    nonce_precision: NoncePrecision = NoncePrecision.NANOSECONDS,
) -> Union[MercadoPublicClient, MercadoClient]:
    """
    Factory function to create a client with common configuration.

    Args:
        identifier: TAPI identifier; omit together with secret for public access
        secret: TAPI secret
        public_url: Base URL for public data endpoints
        private_url: Trade API endpoint
        timeout: Request timeout in seconds
        nonce_precision: Resolution of the request nonce

    Returns:
        MercadoPublicClient without credentials, MercadoClient otherwise
    """
    if identifier is None and secret is None:
        return MercadoPublicClient(public_url, timeout=timeout)

    if not identifier or not secret:
        raise ValueError("Both identifier and secret are required for trade API access")

    config = ConnectionConfig(
        identifier=identifier,
        secret=secret,
        private_url=private_url,
        timeout=timeout,
        nonce_precision=nonce_precision,
    )
    return MercadoClient(config, public_url=public_url)

"""
Mercado Client - Python client for the Mercado Bitcoin APIs.

This package provides an asyncio client for the public market data API and
the signed trade API (``/tapi/v3/``).
"""

from .account_client import (
    MercadoClient,
    MercadoPrivateClient,
    create_mercado_client,
)
from .public_client import MercadoPublicClient
from .auth import ApiCredentials, MercadoSigner, NonceGenerator
from .http_client import ApiError, HttpClientError, ResponseDecodeError
from .models import (
    # Configuration
    ConnectionConfig,
    NoncePrecision,
    # Envelope
    ApiStatus,
    ApiResponse,
    # Market
    Ticker,
    DaySummary,
    # Orders
    OrderType,
    OrderStatus,
    OrderbookOrder,
    Orderbook,
    Order,
    # Account
    AccountInfo,
    Balance,
    Balances,
    WithdrawalLimits,
)

__all__ = [
    # Main Clients
    "MercadoClient",
    "MercadoPrivateClient",
    "MercadoPublicClient",
    "create_mercado_client",
    # Signing
    "ApiCredentials",
    "MercadoSigner",
    "NonceGenerator",
    # Errors
    "ApiError",
    "HttpClientError",
    "ResponseDecodeError",
    "ConnectionConfig",
    "NoncePrecision",
    "ApiStatus",
    "ApiResponse",
    "Ticker",
    "DaySummary",
    "OrderType",
    "OrderStatus",
    "OrderbookOrder",
    "Orderbook",
    "Order",
    "AccountInfo",
    "Balance",
    "Balances",
    "WithdrawalLimits",
]

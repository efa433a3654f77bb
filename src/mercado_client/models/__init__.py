"""
Data models for Mercado Bitcoin client.

This package contains all data structures used throughout the client,
following the state-first principle with immutable data structures.
"""

from .config import ConnectionConfig, NoncePrecision
from .status import ApiStatus, ApiResponse
from .orders import OrderType, OrderStatus, OrderbookOrder, Orderbook, Order
from .account import AccountInfo, Balance, Balances, WithdrawalLimits
from .market import Ticker, DaySummary

__all__ = [
    # Configuration
    "ConnectionConfig",
    "NoncePrecision",
    # Envelope
    "ApiStatus",
    "ApiResponse",
    # Orders
    "OrderType",
    "OrderStatus",
    "OrderbookOrder",
    "Orderbook",
    "Order",
    # Account
    "AccountInfo",
    "Balance",
    "Balances",
    "WithdrawalLimits",
    # Market
    "Ticker",
    "DaySummary",
]

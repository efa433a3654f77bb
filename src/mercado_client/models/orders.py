"""
Order-related models for Mercado Bitcoin client.

Immutable data structures for the order book and order management.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class OrderType(IntEnum):
    """Order side as encoded by the trade API."""
    BUY = 1
    SELL = 2

    @property
    def place_order_method(self) -> str:
        """Trade API method used to place an order of this side."""
        if self is OrderType.BUY:
            return "place_buy_order"
        return "place_sell_order"


class OrderStatus(IntEnum):
    """Order lifecycle status."""
    OPEN = 2
    CANCELLED = 3
    FILLED = 4


@dataclass(frozen=True)
class OrderbookOrder:
    """Single order book entry."""
    order_id: int
    quantity: float
    limit_price: float
    is_owner: bool  # order belongs to the authenticated account


@dataclass(frozen=True)
class Orderbook:
    """Authenticated order book, bids and asks in server order."""
    bids: Tuple[OrderbookOrder, ...]
    asks: Tuple[OrderbookOrder, ...]


@dataclass(frozen=True)
class Order:
    """Order data structure."""
    order_id: int
    coin_pair: str
    order_type: OrderType
    status: OrderStatus
    has_fills: bool
    quantity: float
    limit_price: float
    executed_quantity: float
    executed_price_avg: float
    fee: float

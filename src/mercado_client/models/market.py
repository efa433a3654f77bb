"""
Market-related models for Mercado Bitcoin client.

Immutable data structures for public market data.
"""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class Ticker:
    """Current ticker snapshot for a currency."""
    high: float
    low: float
    vol: float
    last: float
    buy: float
    sell: float
    date: datetime


@dataclass(frozen=True)
class DaySummary:
    """Aggregated statistics for a single trading day."""
    date: date
    opening: float
    closing: float
    lowest: float
    highest: float
    volume: float
    quantity: float
    amount: int  # number of trades
    avg_price: float

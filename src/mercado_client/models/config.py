"""
Configuration models for Mercado Bitcoin client.

Immutable configuration structures following state-first design.
"""

from dataclasses import dataclass
from enum import Enum

from ..constants import (
    DEFAULT_PRICE_DECIMALS,
    DEFAULT_PRIVATE_URL,
    DEFAULT_QUANTITY_DECIMALS,
    DEFAULT_TIMEOUT,
)
from ..utils import validate_url


class NoncePrecision(Enum):
    """Resolution of the wall-clock nonce sent with private requests."""
    MILLISECONDS = "ms"
    NANOSECONDS = "ns"

    @property
    def divisor(self) -> int:
        """Divisor applied to a nanosecond timestamp."""
        if self is NoncePrecision.MILLISECONDS:
            return 1_000_000
        return 1


@dataclass(frozen=True)
class ConnectionConfig:
    """Configuration for the trade API connection."""
    identifier: str
    secret: str
    private_url: str = DEFAULT_PRIVATE_URL
    timeout: float = DEFAULT_TIMEOUT
    nonce_precision: NoncePrecision = NoncePrecision.NANOSECONDS
    quantity_decimals: int = DEFAULT_QUANTITY_DECIMALS
    price_decimals: int = DEFAULT_PRICE_DECIMALS

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_credential("Identifier", self.identifier)
        self._validate_credential("Secret", self.secret)

        if not validate_url(self.private_url):
            raise ValueError("Private URL must be a valid HTTP/HTTPS URL")

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

        if not isinstance(self.nonce_precision, NoncePrecision):
            raise ValueError(f"Invalid nonce precision: {self.nonce_precision!r}")

        if self.quantity_decimals < 0 or self.price_decimals < 0:
            raise ValueError("Decimal places cannot be negative")

    @staticmethod
    def _validate_credential(name: str, value: str):
        """Validate identifier/secret format."""
        if not value:
            raise ValueError(f"{name} cannot be empty")

        if len(value) > 128:
            raise ValueError(
                f"{name} appears to be too long (expected max 128 characters, got {len(value)})"
            )

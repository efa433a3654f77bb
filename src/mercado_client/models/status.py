"""
Trade API status codes and the response envelope.

Every private call answers with ``{"response_data": ..., "status_code": ...}``.
The status code is a closed enumeration; anything outside it is rejected.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ApiStatus(IntEnum):
    """Status codes documented for the trade API."""
    SUCCESS = 100
    TRADING_HALTED = 199
    POST_REQUEST_REQUIRED = 200
    INVALID_TAPI_ID = 201
    INVALID_TAPI_MAC = 202
    INVALID_TAPI_NONCE = 203
    INVALID_TAPI_METHOD = 204
    INVALID_COIN_PAIR = 205
    INVALID_PARAM = 206
    INSUFFICIENT_BRL_BALANCE = 207
    READ_ONLY_KEY = 211
    INSUFFICIENT_BTC_BALANCE = 215
    INSUFFICIENT_LTC_BALANCE = 216
    INVALID_BTC_QUANTITY = 222
    INVALID_LTC_QUANTITY = 223
    INVALID_PRICE = 224
    INVALID_DECIMAL_CASES = 227
    INSUFFICIENT_BCH_BALANCE = 232
    INVALID_BCH_QUANTITY = 234
    INSUFFICIENT_XRP_BALANCE = 240
    INVALID_XRP_QUANTITY = 242
    INSUFFICIENT_ETH_BALANCE = 243
    INVALID_ETH_QUANTITY = 245
    REQUEST_LIMIT_EXCEEDED = 429
    INVALID_REQUEST = 430
    REQUEST_BLOCKED = 431
    ORDER_PROCESSING = 432
    INTERNAL_ERROR = 500

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ApiStatus.SUCCESS: "Success",
    ApiStatus.TRADING_HALTED: "Trading stopped",
    ApiStatus.POST_REQUEST_REQUIRED: "POST request required",
    ApiStatus.INVALID_TAPI_ID: "Invalid TAPI-ID",
    ApiStatus.INVALID_TAPI_MAC: "Invalid TAPI-MAC",
    ApiStatus.INVALID_TAPI_NONCE: "Invalid TAPI nonce",
    ApiStatus.INVALID_TAPI_METHOD: "Invalid TAPI method",
    ApiStatus.INVALID_COIN_PAIR: "Invalid coin pair",
    ApiStatus.INVALID_PARAM: "Invalid parameter",
    ApiStatus.INSUFFICIENT_BRL_BALANCE: "Insufficient BRL balance",
    ApiStatus.READ_ONLY_KEY: "Read only key",
    ApiStatus.INSUFFICIENT_BTC_BALANCE: "Insufficient Bitcoin balance",
    ApiStatus.INSUFFICIENT_LTC_BALANCE: "Insufficient Litecoin balance",
    ApiStatus.INVALID_BTC_QUANTITY: "Invalid Bitcoin quantity",
    ApiStatus.INVALID_LTC_QUANTITY: "Invalid Litecoin quantity",
    ApiStatus.INVALID_PRICE: "Invalid price",
    ApiStatus.INVALID_DECIMAL_CASES: "Invalid decimal cases",
    ApiStatus.INSUFFICIENT_BCH_BALANCE: "Insufficient BCash balance",
    ApiStatus.INVALID_BCH_QUANTITY: "Invalid BCash quantity",
    ApiStatus.INSUFFICIENT_XRP_BALANCE: "Insufficient XRP balance",
    ApiStatus.INVALID_XRP_QUANTITY: "Invalid XRP quantity",
    ApiStatus.INSUFFICIENT_ETH_BALANCE: "Insufficient Ethereum balance",
    ApiStatus.INVALID_ETH_QUANTITY: "Invalid Ethereum quantity",
    ApiStatus.REQUEST_LIMIT_EXCEEDED: "Request limit exceeded",
    ApiStatus.INVALID_REQUEST: "Invalid request",
    ApiStatus.REQUEST_BLOCKED: "Blocked",
    ApiStatus.ORDER_PROCESSING: "Order still processing",
    ApiStatus.INTERNAL_ERROR: "Internal error",
}


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Decoded trade API envelope.

    ``response_data`` is present if and only if ``status`` is SUCCESS;
    the decoder enforces this before the envelope is built.
    """
    status: ApiStatus
    response_data: Optional[T] = None

    @property
    def is_success(self) -> bool:
        return self.status is ApiStatus.SUCCESS

"""
API method implementations for Mercado Bitcoin client.

Contains the trade API endpoint implementations and the pure functions that
turn decoded JSON into immutable models.
"""

import logging
from dataclasses import fields
from typing import Any, Callable, Dict, Tuple, Type, TypeVar

from aiohttp import ClientSession

from .auth import MercadoSigner, NonceGenerator
from .http_client import ApiError, HttpClient, ResponseDecodeError
from .models.account import AccountInfo, Balance, Balances, WithdrawalLimits
from .models.config import ConnectionConfig
from .models.orders import Order, Orderbook, OrderbookOrder, OrderStatus, OrderType
from .models.status import ApiResponse, ApiStatus
from .utils import (
    Query,
    form_encode,
    format_bool,
    format_fixed,
    parse_bool,
    parse_decimal_string,
    parse_integer,
    parse_string,
    require_dict,
    validate_price,
    validate_quantity,
    validate_symbol,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
B = TypeVar("B", Balances, WithdrawalLimits)


def decode_payload(parser: Callable[[Any], T], data: Any) -> T:
    """Run a payload parser, reporting shape mismatches as ResponseDecodeError."""
    try:
        return parser(data)
    except (KeyError, ValueError, TypeError) as e:
        raise ResponseDecodeError(
            f"Failed to decode response: {e!r}", response_data=data
        ) from e


def decode_envelope(data: Any, parser: Callable[[Any], T]) -> ApiResponse[T]:
    """
    Decode a trade API envelope.

    Args:
        data: Decoded JSON body ``{"response_data": ..., "status_code": ...}``
        parser: Parser for ``response_data`` on success

    Returns:
        Envelope with payload on success, without payload otherwise

    Raises:
        ResponseDecodeError: Malformed envelope, unknown status code, or a
            success envelope without payload
    """
    try:
        body = require_dict(data, "response")
        status = ApiStatus(parse_integer(body["status_code"], "status_code"))
    except (KeyError, ValueError) as e:
        raise ResponseDecodeError(
            f"Invalid response envelope: {e!r}", response_data=data
        ) from e

    if status is not ApiStatus.SUCCESS:
        return ApiResponse(status=status)

    raw_payload = body.get("response_data")
    if raw_payload is None:
        raise ResponseDecodeError(
            "Successful response is missing response_data", response_data=data
        )

    return ApiResponse(status=status, response_data=decode_payload(parser, raw_payload))


def unwrap_response(response: ApiResponse[T]) -> T:
    """Return the payload of a successful envelope or raise ApiError."""
    if response.is_success:
        return response.response_data
    raise ApiError(response.status)


def parse_balance(data: Any) -> Balance:
    data = require_dict(data, "balance")
    return Balance(
        available=parse_decimal_string(data["available"], "available"),
        total=parse_decimal_string(data["total"], "total"),
    )


def _parse_asset_balances(cls: Type[B], data: Any, field: str) -> B:
    data = require_dict(data, field)
    return cls(**{f.name: parse_balance(data[f.name]) for f in fields(cls)})


def parse_account_info(data: Any) -> AccountInfo:
    """Parse the ``get_account_info`` payload."""
    data = require_dict(data, "response_data")
    return AccountInfo(
        balance=_parse_asset_balances(Balances, data["balance"], "balance"),
        withdrawal_limits=_parse_asset_balances(
            WithdrawalLimits, data["withdrawal_limits"], "withdrawal_limits"
        ),
    )


def parse_orderbook_order(data: Any) -> OrderbookOrder:
    data = require_dict(data, "order")
    return OrderbookOrder(
        order_id=parse_integer(data["order_id"], "order_id"),
        quantity=parse_decimal_string(data["quantity"], "quantity"),
        limit_price=parse_decimal_string(data["limit_price"], "limit_price"),
        is_owner=parse_bool(data["is_owner"], "is_owner"),
    )


def parse_orderbook(data: Any) -> Orderbook:
    """Parse the ``list_orderbook`` payload."""
    orderbook = require_dict(require_dict(data, "response_data")["orderbook"], "orderbook")
    return Orderbook(
        bids=tuple(parse_orderbook_order(item) for item in orderbook["bids"]),
        asks=tuple(parse_orderbook_order(item) for item in orderbook["asks"]),
    )


def parse_order(data: Any) -> Order:
    """Parse the ``place_buy_order``/``place_sell_order`` payload."""
    order: Dict[str, Any] = require_dict(require_dict(data, "response_data")["order"], "order")
    return Order(
        order_id=parse_integer(order["order_id"], "order_id"),
        coin_pair=parse_string(order["coin_pair"], "coin_pair"),
        order_type=OrderType(parse_integer(order["order_type"], "order_type")),
        status=OrderStatus(parse_integer(order["status"], "status")),
        has_fills=parse_bool(order["has_fills"], "has_fills"),
        quantity=parse_decimal_string(order["quantity"], "quantity"),
        limit_price=parse_decimal_string(order["limit_price"], "limit_price"),
        executed_quantity=parse_decimal_string(order["executed_quantity"], "executed_quantity"),
        executed_price_avg=parse_decimal_string(order["executed_price_avg"], "executed_price_avg"),
        fee=parse_decimal_string(order["fee"], "fee"),
    )


class APIMethods:
    """Container for all trade API method implementations."""

    def __init__(
        self,
        http_client: HttpClient,
        config: ConnectionConfig,
        signer: MercadoSigner,
        nonce_generator: NonceGenerator,
    ):
        """Initialize API methods with HTTP client and signing collaborators."""
        self._http_client = http_client
        self._config = config
        self._signer = signer
        self._nonce_generator = nonce_generator

    def build_params(self, tapi_method: str, *extra: Tuple[str, str]) -> Query:
        """Start a parameter list with method and nonce, then append extras in order."""
        params: Query = [
            ("tapi_method", tapi_method),
            ("tapi_nonce", str(self._nonce_generator.next())),
        ]
        params.extend(extra)
        return params

    async def _private_call(
        self,
        session: ClientSession,
        params: Query,
        parser: Callable[[Any], T],
    ) -> T:
        """Sign, POST and decode a trade API call."""
        body = form_encode(params)
        headers = self._signer.get_auth_headers(self._signer.sign_encoded(body))
        tapi_method = params[0][1]

        logger.debug(f"Calling trade API method {tapi_method}")
        data = await self._http_client.post_form(
            session, self._config.private_url, body, headers
        )

        response = decode_envelope(data, parser)
        if not response.is_success:
            logger.warning(
                f"Trade API method {tapi_method} failed with status "
                f"{response.status.value} ({response.status.description})"
            )
        return unwrap_response(response)

    async def list_orderbook(
        self, session: ClientSession, coin_pair: str, full: bool = False
    ) -> Orderbook:
        """Fetch the authenticated order book for a coin pair."""
        if not validate_symbol(coin_pair):
            raise ValueError(f"Invalid coin pair format: {coin_pair}")

        params = self.build_params(
            "list_orderbook",
            ("coin_pair", coin_pair),
            ("full", format_bool(full)),
        )
        return await self._private_call(session, params, parse_orderbook)

    def build_order_params(
        self,
        order_type: OrderType,
        quantity: float,
        limit_price: float,
        coin_pair: str,
    ) -> Query:
        """Build the ordered parameters for placing a limit order."""
        if not validate_symbol(coin_pair):
            raise ValueError(f"Invalid coin pair format: {coin_pair}")
        if not validate_quantity(quantity, self._config.quantity_decimals):
            raise ValueError(f"Invalid quantity: {quantity}")
        if not validate_price(limit_price, self._config.price_decimals):
            raise ValueError(f"Invalid limit price: {limit_price}")

        return self.build_params(
            order_type.place_order_method,
            ("coin_pair", coin_pair),
            ("quantity", format_fixed(quantity, self._config.quantity_decimals)),
            ("limit_price", format_fixed(limit_price, self._config.price_decimals)),
        )

    async def place_order(
        self,
        session: ClientSession,
        order_type: OrderType,
        quantity: float,
        limit_price: float,
        coin_pair: str,
    ) -> Order:
        """Place a limit order on the given side."""
        params = self.build_order_params(order_type, quantity, limit_price, coin_pair)
        order = await self._private_call(session, params, parse_order)
        logger.info(
            f"Placed {order_type.name.lower()} order {order.order_id} on {coin_pair}"
        )
        return order

    async def get_account_info(self, session: ClientSession) -> AccountInfo:
        """Get balances and withdrawal limits."""
        params = self.build_params("get_account_info")
        return await self._private_call(session, params, parse_account_info)

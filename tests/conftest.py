# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing Mercado Bitcoin client.
"""

import json
import pytest
from typing import Dict, Any
from unittest.mock import Mock, AsyncMock

from mercado_client.account_client import MercadoClient, MercadoPrivateClient
from mercado_client.models import ConnectionConfig
from mercado_client.public_client import MercadoPublicClient


TEST_IDENTIFIER = "4c7a32e1a8c1b6a9f1c0d2e3f4a5b6c7"
TEST_SECRET = "1ebda7d457ece1330dff1c9e04cd62c4e02d1835968ff89d2fb2339f06f73028"


def _make_response(body: Any, status: int = 200) -> Mock:
    response = Mock()
    response.status = status
    text = body if isinstance(body, str) else json.dumps(body)
    response.text = AsyncMock(return_value=text)
    return response


@pytest.fixture
def make_response():
    """Factory for mock aiohttp responses returning a JSON body."""
    return _make_response


def balance(available: str = "0.00000000", total: str = "0.00000000") -> Dict[str, str]:
    return {"available": available, "total": total}


# Mock data fixtures
@pytest.fixture
def ticker_response_data() -> Dict[str, Any]:
    """Mock ticker response data."""
    return {
        "ticker": {
            "high": "250000.00000000",
            "low": "240000.50000000",
            "vol": "123.45000000",
            "last": "245000.12000000",
            "buy": "244999.00000000",
            "sell": "245001.00000000",
            "date": 1614816000000,
        }
    }


@pytest.fixture
def day_summary_response_data() -> Dict[str, Any]:
    """Mock day summary response data."""
    return {
        "date": "2021-03-04",
        "opening": 262000.0,
        "closing": 269999.99,
        "lowest": 258000.01,
        "highest": 272500,
        "volume": 48572356.2,
        "quantity": 182.0,
        "amount": 13842,
        "avg_price": 266880.4,
    }


@pytest.fixture
def orderbook_response_data() -> Dict[str, Any]:
    """Mock list_orderbook envelope."""
    return {
        "response_data": {
            "orderbook": {
                "bids": [
                    {"order_id": 1001, "quantity": "0.50000000", "limit_price": "245000.00000", "is_owner": True},
                    {"order_id": 1002, "quantity": "1.25000000", "limit_price": "244900.00000", "is_owner": False},
                ],
                "asks": [
                    {"order_id": 2001, "quantity": "0.10000000", "limit_price": "245100.00000", "is_owner": False},
                ],
            }
        },
        "status_code": 100,
    }


@pytest.fixture
def order_response_data() -> Dict[str, Any]:
    """Mock place_buy_order envelope."""
    return {
        "response_data": {
            "order": {
                "order_id": 3868,
                "coin_pair": "BRLBTC",
                "order_type": 1,
                "status": 2,
                "has_fills": False,
                "quantity": "1.50000000",
                "limit_price": "200.12000",
                "executed_quantity": "0.00000000",
                "executed_price_avg": "0.00000",
                "fee": "0.00000000",
            }
        },
        "status_code": 100,
    }


@pytest.fixture
def account_info_response_data() -> Dict[str, Any]:
    """Mock get_account_info envelope."""
    assets = [
        "bch", "brl", "btc", "eth", "ltc", "xrp",
        "mbprk01", "mbprk02", "mbprk03", "mbprk04", "mbcons01", "usdc",
    ]
    balances = {asset: balance() for asset in assets}
    balances["brl"] = balance("1500.25000", "2000.75000")
    balances["btc"] = balance("0.01000000", "0.02500000")
    limits = {asset: balance() for asset in ["bch", "brl", "btc", "eth", "ltc", "xrp"]}
    limits["brl"] = balance("988.00", "988.00")
    return {
        "response_data": {"balance": balances, "withdrawal_limits": limits},
        "status_code": 100,
    }


@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(
        identifier=TEST_IDENTIFIER,
        secret=TEST_SECRET,
        private_url="https://test-api.example.com/tapi/v3/",
    )


@pytest.fixture
def public_client():
    """Create a fresh MercadoPublicClient instance for testing."""
    return MercadoPublicClient(public_url="https://test-api.example.com/api")


@pytest.fixture
def private_client(connection_config):
    return MercadoPrivateClient(connection_config)


@pytest.fixture
def full_client(connection_config):
    return MercadoClient(connection_config, public_url="https://test-api.example.com/api")

# -*- coding: utf-8 -*-
"""
Tests for trade API signing and nonce generation.
"""

import pytest

from mercado_client.auth import ApiCredentials, MercadoSigner, NonceGenerator
from mercado_client.models import NoncePrecision
from mercado_client.utils import form_encode


SECRET = "1ebda7d457ece1330dff1c9e04cd62c4e02d1835968ff89d2fb2339f06f73028"

ORDERBOOK_PARAMS = [
    ("tapi_method", "list_orderbook"),
    ("tapi_nonce", "1"),
    ("coin_pair", "BRLBTC"),
    ("full", "true"),
]
ORDERBOOK_SIGNATURE = (
    "0ccddce42c13c090cf7103784f0f28d7ef62c9af51fa2a04f3882836a74ee83b"
    "a8a3d32ee56549b90389428e68d0d49326e6dda6782cdd13ee8be2073f03cef5"
)

BUY_ORDER_PARAMS = [
    ("tapi_method", "place_buy_order"),
    ("tapi_nonce", "1"),
    ("coin_pair", "BRLBTC"),
    ("quantity", "1.50000000"),
    ("limit_price", "200.12"),
]
BUY_ORDER_SIGNATURE = (
    "30dbb2857ae2861fc182116924c9e2d1de83099903c8f6b453196758621999c5"
    "ebf1a58e25c6ccfe59c3c6a805e5c5536e62309370a118bce5f66172a2158c98"
)

ACCOUNT_INFO_SIGNATURE = (
    "a36554f309e3322823ab067719c78cddf6c5c43415741223744d78ce4166e709"
    "b04214769304ddb35fef7fe3124299f102ca06738bda77f81af2c86fce2bb584"
)


@pytest.fixture
def signer():
    return MercadoSigner(ApiCredentials(identifier="my-tapi-id", secret=SECRET))


class TestFormEncoding:
    """Test query string serialisation used for signing."""

    def test_preserves_insertion_order(self):
        params = [("b", "2"), ("a", "1"), ("c", "3")]
        assert form_encode(params) == "b=2&a=1&c=3"

    def test_space_and_reserved_characters(self):
        params = [("note", "a b&c=d"), ("path", "/x?y")]
        assert form_encode(params) == "note=a+b%26c%3Dd&path=%2Fx%3Fy"

    def test_literal_and_escaped_punctuation(self):
        assert form_encode([("k", "*-._~")]) == "k=*-._%7E"

    def test_empty_params(self):
        assert form_encode([]) == ""


class TestSignature:
    """Test HMAC-SHA512 signature generation."""

    def test_signing_input(self, signer):
        assert (
            signer.signing_input(form_encode(ORDERBOOK_PARAMS))
            == "/tapi/v3/?tapi_method=list_orderbook&tapi_nonce=1&coin_pair=BRLBTC&full=true"
        )

    def test_orderbook_golden_vector(self, signer):
        assert signer.sign(ORDERBOOK_PARAMS) == ORDERBOOK_SIGNATURE

    def test_buy_order_golden_vector(self, signer):
        assert signer.sign(BUY_ORDER_PARAMS) == BUY_ORDER_SIGNATURE

    def test_account_info_golden_vector(self, signer):
        params = [("tapi_method", "get_account_info"), ("tapi_nonce", "1")]
        assert signer.sign(params) == ACCOUNT_INFO_SIGNATURE

    def test_signature_is_lowercase_hex_of_512_bits(self, signer):
        signature = signer.sign(ORDERBOOK_PARAMS)
        assert len(signature) == 128
        assert signature == signature.lower()
        int(signature, 16)

    def test_deterministic(self, signer):
        assert signer.sign(ORDERBOOK_PARAMS) == signer.sign(list(ORDERBOOK_PARAMS))

    def test_changes_with_value(self, signer):
        changed = list(ORDERBOOK_PARAMS)
        changed[3] = ("full", "false")
        assert signer.sign(changed) != ORDERBOOK_SIGNATURE

    def test_changes_with_order(self, signer):
        reordered = [ORDERBOOK_PARAMS[0], ORDERBOOK_PARAMS[1], ORDERBOOK_PARAMS[3], ORDERBOOK_PARAMS[2]]
        assert signer.sign(reordered) != ORDERBOOK_SIGNATURE

    def test_changes_with_secret(self):
        other = MercadoSigner(ApiCredentials(identifier="my-tapi-id", secret=SECRET[:-1] + "9"))
        assert other.sign(ORDERBOOK_PARAMS) != ORDERBOOK_SIGNATURE

    def test_independent_of_identifier(self):
        other = MercadoSigner(ApiCredentials(identifier="another-id", secret=SECRET))
        assert other.sign(ORDERBOOK_PARAMS) == ORDERBOOK_SIGNATURE

    def test_sign_encoded_matches_sign(self, signer):
        assert signer.sign_encoded(form_encode(BUY_ORDER_PARAMS)) == BUY_ORDER_SIGNATURE

    def test_auth_headers(self, signer):
        headers = signer.get_auth_headers("abc123")
        assert headers == {"TAPI-ID": "my-tapi-id", "TAPI-MAC": "abc123"}


class TestNonceGenerator:
    """Test nonce monotonicity and precision."""

    def test_nanosecond_precision(self):
        generator = NonceGenerator(NoncePrecision.NANOSECONDS)
        assert generator.next(now_ns=1_614_816_000_123_456_789) == 1_614_816_000_123_456_789

    def test_millisecond_precision(self):
        generator = NonceGenerator(NoncePrecision.MILLISECONDS)
        assert generator.next(now_ns=1_614_816_000_123_456_789) == 1_614_816_000_123

    def test_strictly_increasing_when_clock_stalls(self):
        generator = NonceGenerator(NoncePrecision.MILLISECONDS)
        first = generator.next(now_ns=5_000_000)
        second = generator.next(now_ns=5_000_000)
        third = generator.next(now_ns=4_000_000)
        assert first == 5
        assert second == 6
        assert third == 7

    def test_follows_clock_when_it_advances(self):
        generator = NonceGenerator(NoncePrecision.MILLISECONDS)
        generator.next(now_ns=5_000_000)
        assert generator.next(now_ns=9_000_000) == 9

    def test_real_clock_rapid_calls(self):
        generator = NonceGenerator()
        nonces = [generator.next() for _ in range(100)]
        assert nonces == sorted(set(nonces))

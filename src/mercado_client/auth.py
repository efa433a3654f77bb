"""
Authentication and signing utilities for the Mercado Bitcoin trade API
"""

from dataclasses import dataclass
from typing import Dict, Optional
import hashlib
import hmac
import time

from .constants import API_VERSION_PATH, TAPI_ID_HEADER, TAPI_MAC_HEADER
from .models.config import NoncePrecision
from .utils import Query, form_encode


@dataclass(frozen=True)
class ApiCredentials:
    """Container for trade API credentials"""
    identifier: str
    secret: str


class NonceGenerator:
    """
    Produces wall-clock nonces for private requests.

    Values come from ``time.time_ns()`` at the configured precision and are
    bumped past the previous value when the clock has not advanced, so two
    calls never share a nonce.
    """

    def __init__(self, precision: NoncePrecision = NoncePrecision.NANOSECONDS):
        self.precision = precision
        self._last = 0

    def next(self, now_ns: Optional[int] = None) -> int:
        """
        Return the next nonce.

        Args:
            now_ns: Override for the current time in nanoseconds

        Returns:
            Nonce strictly greater than any previously returned value
        """
        if now_ns is None:
            now_ns = time.time_ns()
        nonce = max(now_ns // self.precision.divisor, self._last + 1)
        self._last = nonce
        return nonce


class MercadoSigner:
    """
    Handles request signing for the trade API.

    The signature is an HMAC-SHA512 over ``/tapi/v3/?<form-encoded params>``,
    keyed with the account secret and hex-encoded in lower case. Parameter
    order is preserved exactly as given.
    """

    def __init__(self, credentials: ApiCredentials):
        """
        Initialize the signer with API credentials.

        Args:
            credentials: Trade API identifier and secret
        """
        self.credentials = credentials

    @staticmethod
    def signing_input(encoded_params: str) -> str:
        """Build the message that gets signed from an encoded query string."""
        return f"{API_VERSION_PATH}?{encoded_params}"

    def sign_encoded(self, encoded_params: str) -> str:
        """
        Generate the HMAC-SHA512 signature for an encoded query string.

        Args:
            encoded_params: Form-encoded parameters, exactly as sent in the body

        Returns:
            Hex-encoded signature
        """
        return hmac.new(
            self.credentials.secret.encode("utf-8"),
            self.signing_input(encoded_params).encode("utf-8"),
            hashlib.sha512,
        ).hexdigest()

    def sign(self, params: Query) -> str:
        """Sign an ordered parameter list."""
        return self.sign_encoded(form_encode(params))

    def get_auth_headers(self, signature: str) -> Dict[str, str]:
        """
        Get authentication headers for a signed request.

        Args:
            signature: Signature returned by ``sign``

        Returns:
            Dictionary containing TAPI-ID and TAPI-MAC headers
        """
        return {
            TAPI_ID_HEADER: self.credentials.identifier,
            TAPI_MAC_HEADER: signature,
        }

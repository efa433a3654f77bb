"""
HTTP client for the Mercado Bitcoin APIs.

Handles request execution and response processing. Transport problems are
surfaced as HttpClientError, undecodable bodies as ResponseDecodeError and
non-success trade API status codes as ApiError. Nothing is retried.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientResponse, ClientSession

from .models.status import ApiStatus

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpClient:
    """HTTP client specialized for Mercado Bitcoin API interactions."""

    async def get(self, session: ClientSession, url: str) -> Any:
        """Execute a GET request and return the decoded JSON body."""
        return await self._execute(session, "GET", url)

    async def post_form(
        self,
        session: ClientSession,
        url: str,
        body: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Execute a form-encoded POST request.

        The body is sent verbatim so that it matches the signed string byte
        for byte. Error statuses whose body is still a trade API envelope are
        returned for envelope decoding.
        """
        request_headers = dict(headers or {})
        request_headers["Content-Type"] = FORM_CONTENT_TYPE
        return await self._execute(
            session, "POST", url, envelope=True, data=body, headers=request_headers
        )

    async def _execute(
        self,
        session: ClientSession,
        method: str,
        url: str,
        envelope: bool = False,
        **kwargs: Any,
    ) -> Any:
        logger.debug(f"{method} {url}")
        try:
            async with session.request(method=method, url=url, **kwargs) as response:
                return await self._process_response(response, envelope)
        except asyncio.TimeoutError as e:
            logger.error(f"Request timeout: {method} {url}")
            raise HttpClientError(f"Request timeout: {method} {url}") from e
        except aiohttp.ClientError as e:
            logger.error(f"Request failed: {method} {url}: {e}")
            raise HttpClientError(f"Request failed: {e}") from e

    async def _process_response(self, response: ClientResponse, envelope: bool = False) -> Any:
        """Process HTTP response and return data."""
        try:
            response_text = await response.text()
        except UnicodeDecodeError as e:
            raise ResponseDecodeError(
                f"Undecodable response body (Status {response.status}): {e}",
                status_code=response.status,
            ) from e

        try:
            data = json.loads(response_text)
        except json.JSONDecodeError as e:
            if response.status >= 400:
                raise HttpClientError(
                    f"HTTP {response.status}: {response_text[:200]}",
                    status_code=response.status,
                ) from e
            raise ResponseDecodeError(
                f"Invalid JSON response (Status {response.status}): {response_text[:200]}",
                status_code=response.status,
            ) from e

        # Trade API failures still carry a status envelope worth decoding
        if response.status >= 400 and not (
            envelope and isinstance(data, dict) and "status_code" in data
        ):
            raise HttpClientError(
                f"HTTP {response.status}: {data}",
                status_code=response.status,
                response_data=data,
            )

        return data


class HttpClientError(Exception):
    """Base exception for transport-level failures."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class ResponseDecodeError(HttpClientError):
    """Exception for bodies that do not match the expected shape."""
    pass


class ApiError(Exception):
    """Exception for a documented non-success trade API status code."""

    def __init__(self, status: ApiStatus):
        super().__init__(f"API error {status.value}: {status.description}")
        self.status = status

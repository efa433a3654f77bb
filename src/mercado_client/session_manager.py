"""
Session management for Mercado Bitcoin client.

Every client talks to a single host, so one lazily opened aiohttp session
with a small connection pool serves all of its requests.
"""

import logging
from typing import Optional

import aiohttp

from .constants import DEFAULT_TIMEOUT, MAX_CONNECTIONS, USER_AGENT

logger = logging.getLogger(__name__)


class SessionManager:
    """Owns the aiohttp session of one Mercado Bitcoin client."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, user_agent: str = USER_AGENT):
        self._timeout = timeout
        self._user_agent = user_agent
        self._session: Optional[aiohttp.ClientSession] = None

    def _build_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(limit=MAX_CONNECTIONS, ttl_dns_cache=300),
            timeout=aiohttp.ClientTimeout(total=self._timeout),
            headers={"User-Agent": self._user_agent, "Accept": "application/json"},
        )

    async def acquire(self) -> aiohttp.ClientSession:
        """Return the open session, opening a new one if needed."""
        if not self.is_open:
            self._session = self._build_session()
            logger.debug(f"Opened HTTP session (timeout {self._timeout}s)")
        return self._session

    async def release(self) -> None:
        """Close the session if one is open; safe to call repeatedly."""
        session, self._session = self._session, None
        if session is not None and not session.closed:
            await session.close()
            logger.debug("Closed HTTP session")

    @property
    def is_open(self) -> bool:
        return self._session is not None and not self._session.closed

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Current session, without opening one."""
        return self._session

    @property
    def timeout(self) -> float:
        return self._timeout

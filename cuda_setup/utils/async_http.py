"""Async HTTP client utilities."""

import logging
import aiohttp
from pydantic import BaseModel
from typing import Optional, Dict

logger = logging.getLogger(__name__)


class HTTPResponse(BaseModel):
    """Status and decoded body of a finished GET request."""
    url: str
    status: int
    reason: str = ""
    body: str = ""

    @property
    def ok(self) -> bool:
        return self.status == 200


class AsyncHTTPClient:
    """Reusable async HTTP client."""

    def __init__(self, headers: Optional[Dict[str, str]] = None, timeout: float = 60.0):
        self.default_headers = headers or {}
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_settings(cls, settings) -> "AsyncHTTPClient":
        return cls(headers={"User-Agent": settings.user_agent}, timeout=settings.timeout)

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(headers=self.default_headers, timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self.session:
            await self.session.close()

    async def get_text(self, url: str, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        """GET request returning the status and text body without raising on HTTP errors."""
        if not self.session:
            raise RuntimeError("AsyncHTTPClient must be used as an async context manager")

        logger.debug("GET %s", url)
        async with self.session.get(url, headers=headers) as resp:
            body = await resp.text(errors="replace")
            return HTTPResponse(url=url, status=resp.status, reason=resp.reason or "", body=body)

"""Shared fixtures."""

import pytest

from cuda_setup.config import Settings
from cuda_setup.utils.async_http import HTTPResponse


class FakeHTTPClient:
    """Serves canned bodies by URL and records every request."""

    def __init__(self, pages=None):
        self.pages = pages or {}
        self.requested = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def get_text(self, url, headers=None):
        self.requested.append(url)
        if url not in self.pages:
            return HTTPResponse(url=url, status=404, reason="Not Found")
        page = self.pages[url]
        if isinstance(page, tuple):
            status, body = page
            return HTTPResponse(url=url, status=status, reason="Error", body=body)
        return HTTPResponse(url=url, status=200, reason="OK", body=page)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fake_client():
    return FakeHTTPClient()

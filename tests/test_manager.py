"""Tests for version discovery and resolution."""

import asyncio

import pytest

from cuda_setup.errors import TransportFailure
from cuda_setup.utils.async_http import HTTPResponse
from cuda_setup.versions.manager import VersionManager, resolve_version

CATALOG = ["10.0", "10.1", "10.2", "11.0.1", "11.0.3"]


def pages(settings, redist="", archive="", opensource=""):
    return {
        settings.redistrib_url: redist,
        settings.archive_url: archive,
        settings.opensource_url: opensource,
    }


def test_resolve_latest():
    assert resolve_version(CATALOG, "latest") == "11.0.3"


def test_resolve_latest_on_empty_catalog():
    assert resolve_version([], "latest") is None


def test_resolve_exact_match():
    assert resolve_version(CATALOG, "10.1") == "10.1"
    assert resolve_version(CATALOG, "11.0.1") == "11.0.1"


def test_resolve_major_prefix_returns_highest():
    assert resolve_version(CATALOG, "10") == "10.2"
    assert resolve_version(CATALOG, "11") == "11.0.3"


def test_resolve_minor_prefix_returns_highest_patch():
    assert resolve_version(CATALOG, "11.0") == "11.0.3"


def test_resolve_prefix_uses_numeric_order():
    catalog = ["11.2.0", "11.2.2", "11.2.10"]
    assert resolve_version(catalog, "11.2") == "11.2.10"


def test_resolve_prefix_requires_dot_boundary():
    assert resolve_version(["11.0.1", "110.1"], "11") == "11.0.1"
    assert resolve_version(["1.0", "12.0"], "1") == "1.0"


def test_resolve_not_found():
    assert resolve_version(CATALOG, "9.9") is None
    assert resolve_version(CATALOG, "12") is None


@pytest.mark.asyncio
async def test_fetch_available_versions_merges_sources(fake_client, settings):
    fake_client.pages.update(pages(
        settings,
        redist="redistrib_11.0.3.json redistrib_12.4.1.json",
        archive='CUDA Toolkit 11.0.3 <a href="/cuda-9-2-download-archive">',
        opensource='<a href="10.2.89/">10.2.89/</a><a href="11.0.1/">11.0.1/</a>',
    ))

    versions = await VersionManager(fake_client, settings).fetch_available_versions()

    assert versions == ["10.0", "10.1", "10.1.1", "10.1.2", "10.2", "11.0.1", "11.0.3", "12.4.1"]
    assert sorted(fake_client.requested) == sorted(pages(settings))


@pytest.mark.asyncio
async def test_fetch_available_versions_drops_unsupported(fake_client, settings):
    fake_client.pages.update(pages(
        settings,
        archive="CUDA Toolkit 8.0 CUDA Toolkit 9.2.148",
        opensource='<a href="9.1/">9.1/</a>',
    ))

    versions = await VersionManager(fake_client, settings).fetch_available_versions()

    assert versions == ["10.0", "10.1", "10.1.1", "10.1.2", "10.2"]


@pytest.mark.asyncio
async def test_fetch_available_versions_is_idempotent(fake_client, settings):
    fake_client.pages.update(pages(
        settings,
        redist="redistrib_12.0.0.json redistrib_11.8.0.json",
        archive="CUDA Toolkit 12.0.0 CUDA Toolkit 11.8.0",
    ))
    manager = VersionManager(fake_client, settings)

    first = await manager.fetch_available_versions()
    second = await manager.fetch_available_versions()

    assert first == second
    assert len(first) == len(set(first))


@pytest.mark.asyncio
async def test_fetch_available_versions_fails_when_any_source_fails(fake_client, settings):
    fake_client.pages.update(pages(settings, redist="redistrib_12.0.0.json"))
    fake_client.pages[settings.archive_url] = (500, "")

    with pytest.raises(TransportFailure) as exc_info:
        await VersionManager(fake_client, settings).fetch_available_versions()

    assert exc_info.value.url == settings.archive_url


@pytest.mark.asyncio
async def test_find_version(fake_client, settings):
    fake_client.pages.update(pages(
        settings,
        redist="redistrib_12.4.0.json redistrib_12.4.1.json redistrib_12.6.0.json",
    ))
    manager = VersionManager(fake_client, settings)

    assert await manager.find_version("12.4") == "12.4.1"
    assert await manager.find_version("latest") == "12.6.0"
    assert await manager.find_version("13") is None


class SlowHTTPClient:
    """Fails one URL at once and answers the others after a delay."""

    def __init__(self, failing_url, delay=0.2):
        self.failing_url = failing_url
        self.delay = delay
        self.finished = []

    async def get_text(self, url, headers=None):
        if url == self.failing_url:
            return HTTPResponse(url=url, status=500, reason="Internal Server Error")
        await asyncio.sleep(self.delay)
        self.finished.append(url)
        return HTTPResponse(url=url, status=200, reason="OK", body="")


class GatedHTTPClient:
    """Holds every request until all expected URLs have been requested."""

    def __init__(self, expected_urls):
        self.expected_urls = set(expected_urls)
        self.requested = set()
        self.all_requested = asyncio.Event()

    async def get_text(self, url, headers=None):
        self.requested.add(url)
        if self.requested >= self.expected_urls:
            self.all_requested.set()
        await asyncio.wait_for(self.all_requested.wait(), timeout=1.0)
        return HTTPResponse(url=url, status=200, reason="OK", body="")


@pytest.mark.asyncio
async def test_fetch_available_versions_cancels_remaining_sources(settings):
    client = SlowHTTPClient(settings.archive_url)

    with pytest.raises(TransportFailure):
        await VersionManager(client, settings).fetch_available_versions()
    await asyncio.sleep(0.3)

    assert client.finished == []


@pytest.mark.asyncio
async def test_fetch_available_versions_requests_sources_concurrently(settings):
    client = GatedHTTPClient(pages(settings))

    versions = await VersionManager(client, settings).fetch_available_versions()

    assert client.requested == set(pages(settings))
    assert versions == ["10.0", "10.1", "10.1.1", "10.1.2", "10.2"]

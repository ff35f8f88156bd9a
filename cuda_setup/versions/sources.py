"""Upstream listings that CUDA versions are scraped from.

Each source fetches a single page and extracts version strings from it. The
pages are plain HTML directory indexes or marketing pages, so extraction is
done with regular expressions rather than an HTML parser.
"""

import logging
import re
from typing import Set

from ..errors import TransportFailure
from ..utils.async_http import AsyncHTTPClient

logger = logging.getLogger(__name__)


def normalize_cuda_version(version: str) -> str:
    """Trim versions up to CUDA 10 to major.minor.

    The opensource directory only goes down to major.minor for those releases,
    newer releases keep their full version.
    """
    parts = version.split(".")
    try:
        major = int(parts[0])
    except ValueError:
        return version

    if major <= 10:
        return ".".join(parts[:2])
    return version


class VersionSource:
    """A single upstream listing of CUDA versions."""

    name = "listing"

    def __init__(self, url: str):
        self.url = url

    async def fetch(self, client: AsyncHTTPClient) -> str:
        response = await client.get_text(self.url)
        if not response.ok:
            raise TransportFailure(self.url, response.status, response.reason, what=self.name)
        return response.body

    def extract(self, html: str) -> Set[str]:
        raise NotImplementedError

    async def discover(self, client: AsyncHTTPClient) -> Set[str]:
        versions = self.extract(await self.fetch(client))
        logger.debug("Found %d versions in %s", len(versions), self.name)
        return versions


class RedistribSource(VersionSource):
    """redistrib_<version>.json manifests in the redist directory index."""

    name = "redistrib index"
    PATTERN = re.compile(r"redistrib_(\d+\.\d+(?:\.\d+)?(?:\.\d+)?)\.json")

    def extract(self, html: str) -> Set[str]:
        return set(self.PATTERN.findall(html))


class ArchiveSource(VersionSource):
    """The CUDA Toolkit Archive page."""

    name = "archive page"
    TITLE_PATTERN = re.compile(r"CUDA Toolkit\s+(\d+\.\d+(?:\.\d+)?)", re.IGNORECASE)
    LINK_PATTERN = re.compile(r"cuda-(\d+)-(\d+)(?:-(\d+))?-")

    def extract(self, html: str) -> Set[str]:
        versions = set(self.TITLE_PATTERN.findall(html))
        for groups in self.LINK_PATTERN.findall(html):
            versions.add(".".join(g for g in groups if g))
        return versions


class OpensourceSource(VersionSource):
    """Version directories of the opensource index."""

    name = "opensource index"
    PATTERN = re.compile(r">(\d+\.\d+(?:\.\d+)?)/")

    def extract(self, html: str) -> Set[str]:
        return {normalize_cuda_version(v) for v in self.PATTERN.findall(html)}

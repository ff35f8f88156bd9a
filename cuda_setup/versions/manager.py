"""CUDA version catalog and specifier resolution."""

import asyncio
import logging
from typing import List, Optional, Sequence

from ..config import Settings
from ..utils.async_http import AsyncHTTPClient
from .comparator import compare_versions, sort_versions
from .constants import OLD_CUDA_VERSIONS, START_SUPPORTED_CUDA_VERSION
from .sources import ArchiveSource, OpensourceSource, RedistribSource, VersionSource

logger = logging.getLogger(__name__)

LATEST = "latest"


def resolve_version(versions: Sequence[str], input_version: str) -> Optional[str]:
    """Match a specifier against an ascending catalog.

    "latest" picks the newest entry, an exact entry is returned as is, and
    anything else is treated as a prefix ("11" -> newest 11.x, "11.0" ->
    newest 11.0.x). Returns None when nothing matches.
    """
    if input_version == LATEST:
        return versions[-1] if versions else None

    if input_version in versions:
        return input_version

    prefix = input_version + "."
    matching = [v for v in versions if v.startswith(prefix)]
    if matching:
        return matching[-1]

    return None


class VersionManager:
    def __init__(self, client: AsyncHTTPClient, settings: Optional[Settings] = None,
                 sources: Optional[Sequence[VersionSource]] = None):
        self.client = client
        self.settings = settings or Settings()
        self.sources = list(sources) if sources is not None else [
            RedistribSource(self.settings.redistrib_url),
            ArchiveSource(self.settings.archive_url),
            OpensourceSource(self.settings.opensource_url),
        ]

    async def fetch_available_versions(self) -> List[str]:
        """Merge every source with the legacy versions into one sorted catalog."""
        tasks = [asyncio.ensure_future(source.discover(self.client)) for source in self.sources]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            # One failed listing aborts discovery; stop the remaining fetches.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        all_versions = set(OLD_CUDA_VERSIONS)
        for found in results:
            all_versions.update(found)

        versions = [
            v for v in sort_versions(all_versions)
            if compare_versions(v, START_SUPPORTED_CUDA_VERSION) >= 0
        ]
        logger.info("Discovered %d supported CUDA versions", len(versions))
        return versions

    async def find_version(self, input_version: str) -> Optional[str]:
        """Find the CUDA version matching a specifier such as "latest", "11" or "11.2.0"."""
        versions = await self.fetch_available_versions()
        version = resolve_version(versions, input_version)
        if version:
            logger.info("Resolved CUDA version %s -> %s", input_version, version)
        else:
            logger.warning("No CUDA version matches %s", input_version)
        return version

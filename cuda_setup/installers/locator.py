"""Locate the local installer for a CUDA version and platform."""

import logging
import re
from typing import Dict, Optional

from ..config import Settings
from ..errors import NoMatchingInstaller, TransportFailure, UnsupportedPlatformCombination, UnsupportedVersion
from ..utils.async_http import AsyncHTTPClient
from ..versions.comparator import compare_versions, major_version
from ..versions.constants import CUDA_LINKS, START_SUPPORTED_CUDA_VERSION
from ..versions.models import Arch, OS

logger = logging.getLogger(__name__)

LOCAL_INSTALLERS_DIR = "local_installers"


def parse_md5sum(text: str) -> Dict[str, str]:
    """Parse ``<checksum> <filename>`` lines into a filename -> checksum mapping."""
    md5sums = {}
    for line in text.splitlines():
        parts = line.strip().split(" ")
        if len(parts) < 2:
            continue
        md5sums[parts[1]] = parts[0]
    return md5sums


def linux_installer_pattern(version: str, arch: Arch) -> re.Pattern:
    # cuda_<version>_<bundled driver version>_linux[_sbsa].run
    suffix = {Arch.X86_64: "_linux", Arch.ARM64_SBSA: "_linux_sbsa"}[arch]
    return re.compile(rf"cuda_{re.escape(version)}_\d+\.\d+(\.\d+)?{suffix}\.run")


def find_linux_installer(md5sums: Dict[str, str], version: str, arch: Arch) -> Optional[str]:
    pattern = linux_installer_pattern(version, arch)
    for filename in md5sums:
        if pattern.search(filename):
            return filename
    return None


def find_windows_installer(md5sums: Dict[str, str]) -> Optional[str]:
    """Prefer the first ``_windows.exe``, else the last ``_win10.exe`` listed."""
    win10_filename = None
    for filename in md5sums:
        if filename.endswith("_windows.exe"):
            return filename
        if filename.endswith("_win10.exe"):
            win10_filename = filename
    return win10_filename


class InstallerLocator:
    def __init__(self, client: AsyncHTTPClient, settings: Optional[Settings] = None):
        self.client = client
        self.settings = settings or Settings()

    def get_download_url(self, version: str, directory: str, filename: str) -> str:
        return f"{self.settings.download_base_url}/{version}/{directory}/{filename}"

    def get_md5sum_url(self, version: str) -> str:
        if major_version(version) >= 11:
            return f"{self.settings.download_base_url}/{version}/docs/sidebar/md5sum.txt"
        return CUDA_LINKS[version].md5sum_url

    async def fetch_md5sum(self, version: str) -> Dict[str, str]:
        """Fetch the md5sum listing for a version, keyed by installer filename."""
        url = self.get_md5sum_url(version)
        response = await self.client.get_text(url)
        if not response.ok:
            raise TransportFailure(url, response.status, response.reason, what="MD5 checksum")
        md5sums = parse_md5sum(response.body)
        logger.debug("Loaded %d checksum entries from %s", len(md5sums), url)
        return md5sums

    async def locate(self, version: str, os: OS, arch: Arch) -> str:
        """Return the installer URL for a resolved CUDA version on the given platform.

        Releases up to CUDA 10 come from the static link table. Newer releases
        are found by matching installer filenames listed in the release's md5sum
        file.
        """
        if compare_versions(version, START_SUPPORTED_CUDA_VERSION) < 0:
            raise UnsupportedVersion(version)

        major = major_version(version)
        if major <= 10 and os == OS.LINUX and arch == Arch.ARM64_SBSA:
            raise UnsupportedPlatformCombination(
                version, os, arch,
                message=f"CUDA version {version} is not supported on Linux with Arm "
                        f"architecture for CUDA 10 and earlier",
            )

        link = CUDA_LINKS.get(version)
        if link:
            if os == OS.LINUX and arch == Arch.X86_64 and link.linux_x86_url:
                return self._legacy(version, link.linux_x86_url)
            if os == OS.LINUX and arch == Arch.ARM64_SBSA and link.linux_arm64_url:
                return self._legacy(version, link.linux_arm64_url)
            if os == OS.WINDOWS and link.windows_url:
                return self._legacy(version, link.windows_url)

        if major <= 10 and os == OS.LINUX and arch == Arch.X86_64:
            return self._legacy(version, CUDA_LINKS[version].linux_x86_url)
        if major <= 10 and os == OS.WINDOWS:
            return self._legacy(version, CUDA_LINKS[version].windows_url)

        md5sums = await self.fetch_md5sum(version)
        if os == OS.LINUX:
            filename = find_linux_installer(md5sums, version, arch)
        elif os == OS.WINDOWS:
            filename = find_windows_installer(md5sums)
        else:
            filename = None

        if not filename:
            raise NoMatchingInstaller(version, os, arch)

        logger.info("Using installer %s for CUDA %s (%s/%s)", filename, version, os, arch)
        return self.get_download_url(version, LOCAL_INSTALLERS_DIR, filename)

    @staticmethod
    def _legacy(version: str, url: str) -> str:
        logger.info("Using static installer link for CUDA %s", version)
        return url

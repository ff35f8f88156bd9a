"""Resolve CUDA toolkit versions and locate their installers."""

from typing import Optional

from .config import Settings
from .installers import InstallerLocator
from .utils import AsyncHTTPClient
from .versions import Arch, OS, VersionManager

__version__ = "0.1.0"


async def find_cuda_version(input_version: str, settings: Optional[Settings] = None) -> Optional[str]:
    """Resolve a version specifier like "latest", "11" or "11.2" to a full version."""
    settings = settings or Settings()
    async with AsyncHTTPClient.from_settings(settings) as client:
        return await VersionManager(client, settings).find_version(input_version)


async def get_cuda_installer_url(version: str, os: OS, arch: Arch,
                                 settings: Optional[Settings] = None) -> str:
    """Get the installer URL for an already resolved version."""
    settings = settings or Settings()
    async with AsyncHTTPClient.from_settings(settings) as client:
        return await InstallerLocator(client, settings).locate(version, os, arch)


__all__ = [
    "Arch",
    "InstallerLocator",
    "OS",
    "Settings",
    "VersionManager",
    "__version__",
    "find_cuda_version",
    "get_cuda_installer_url",
]

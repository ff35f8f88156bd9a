"""Version management module."""

from .comparator import compare_versions, sort_versions
from .manager import VersionManager, resolve_version
from .models import Arch, CudaLink, OS, Platform

__all__ = [
    "Arch",
    "CudaLink",
    "OS",
    "Platform",
    "VersionManager",
    "compare_versions",
    "resolve_version",
    "sort_versions",
]

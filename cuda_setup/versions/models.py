"""Data models for CUDA versions and target platforms."""

import platform
from enum import Enum

from pydantic import BaseModel, ConfigDict

from ..errors import UnsupportedPlatform


class OS(str, Enum):
    LINUX = "linux"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.value


class Arch(str, Enum):
    X86_64 = "x86_64"
    ARM64_SBSA = "arm64-sbsa"

    def __str__(self) -> str:
        return self.value


class CudaLink(BaseModel):
    """Hand-maintained download links for a release older than CUDA 11."""
    model_config = ConfigDict(frozen=True)

    md5sum_url: str
    linux_x86_url: str
    linux_arm64_url: str = ""
    windows_url: str


class Platform(BaseModel):
    model_config = ConfigDict(frozen=True)

    os: OS
    arch: Arch

    @classmethod
    def detect(cls) -> "Platform":
        """Map the running host onto an (OS, Arch) pair."""
        system = platform.system().lower()
        machine = platform.machine().lower()

        os_map = {
            "linux": OS.LINUX,
            "windows": OS.WINDOWS,
        }
        arch_map = {
            "amd64": Arch.X86_64,
            "x86_64": Arch.X86_64,
            "aarch64": Arch.ARM64_SBSA,
            "arm64": Arch.ARM64_SBSA,
        }

        if system not in os_map or machine not in arch_map:
            raise UnsupportedPlatform(system, machine)
        return cls(os=os_map[system], arch=arch_map[machine])

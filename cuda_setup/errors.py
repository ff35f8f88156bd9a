"""Errors raised while resolving versions and locating installers."""


class CudaSetupError(Exception):
    """Base class for all setup-cuda errors."""


class TransportFailure(CudaSetupError):
    """An upstream listing or manifest answered with a non-success status."""

    def __init__(self, url: str, status: int, reason: str = "", what: str = "page"):
        self.url = url
        self.status = status
        self.reason = reason
        super().__init__(f"Failed to fetch {what} from {url}: {status} {reason}".rstrip())


class UnsupportedVersion(CudaSetupError):
    def __init__(self, version: str):
        self.version = version
        super().__init__(f"CUDA version {version} is not supported")


class UnsupportedPlatformCombination(CudaSetupError):
    def __init__(self, version: str, os, arch, message: str = ""):
        self.version = version
        self.os = os
        self.arch = arch
        super().__init__(
            message or f"CUDA version {version} is not supported on {os} with architecture {arch}"
        )


class NoMatchingInstaller(CudaSetupError):
    def __init__(self, version: str, os, arch):
        self.version = version
        self.os = os
        self.arch = arch
        super().__init__(
            f"No matching CUDA installer found for version {version} on {os} with architecture {arch}"
        )


class UnsupportedPlatform(CudaSetupError):
    """The host OS or CPU has no CUDA installer at all."""

    def __init__(self, system: str, machine: str):
        self.system = system
        self.machine = machine
        super().__init__(f"Unsupported platform: {system} {machine}")

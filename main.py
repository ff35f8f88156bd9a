#!/usr/bin/env python3
"""setup-cuda entry point: resolve a CUDA version and print its installer URL."""

import argparse
import asyncio
import logging
import sys

import aiohttp

from cuda_setup import InstallerLocator, Settings, VersionManager
from cuda_setup.errors import CudaSetupError
from cuda_setup.utils import AsyncHTTPClient, setup_logging
from cuda_setup.versions import Arch, OS, Platform

logger = logging.getLogger("setup_cuda")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the CUDA toolkit installer for a version and platform.")
    parser.add_argument("version", nargs="?", default="latest",
                        help='CUDA version specifier, e.g. "latest", "12", "12.4" or "12.4.1"')
    parser.add_argument("--os", type=OS, choices=list(OS), help="target OS (default: host)")
    parser.add_argument("--arch", type=Arch, choices=list(Arch), help="target architecture (default: host)")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Resolve the requested version, then locate its installer."""
    args = parse_args(argv)
    setup_logging(args.log_level)
    settings = Settings.from_env()

    try:
        if args.os is None or args.arch is None:
            host = Platform.detect()
            target_os = args.os or host.os
            target_arch = args.arch or host.arch
        else:
            target_os, target_arch = args.os, args.arch

        async with AsyncHTTPClient.from_settings(settings) as client:
            version = await VersionManager(client, settings).find_version(args.version)
            if version is None:
                logger.error("CUDA version %s is not available", args.version)
                return 1
            url = await InstallerLocator(client, settings).locate(version, target_os, target_arch)
    except CudaSetupError as e:
        logger.error("%s", e)
        return 1
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Request failed: %s", str(e) or type(e).__name__)
        return 1

    print(f"version={version}")
    print(f"url={url}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

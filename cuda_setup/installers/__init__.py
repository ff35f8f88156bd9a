"""Installer location module."""

from .locator import InstallerLocator, parse_md5sum

__all__ = ["InstallerLocator", "parse_md5sum"]

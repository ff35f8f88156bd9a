"""Common utilities."""

from .async_http import AsyncHTTPClient, HTTPResponse
from .logger import setup_logging

__all__ = ["AsyncHTTPClient", "HTTPResponse", "setup_logging"]

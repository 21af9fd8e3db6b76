"""HTTP helpers for jsaudit."""

from .client import HTTPClient, HTTPResponse
from .headers import BROWSER_HEADERS

__all__ = [
    "BROWSER_HEADERS",
    "HTTPClient",
    "HTTPResponse",
]

"""Retrieval boundary: fetch documents with a browser header profile."""

import logging

import httpx

from jsaudit.tools.http import HTTPClient, HTTPResponse

from .errors import RetrievalError

logger = logging.getLogger(__name__)


class AssetFetcher:
    """Retrieve pages and script assets, raising RetrievalError on failure.

    Use as an async context manager so one connection pool serves the
    whole scan.
    """

    def __init__(self, timeout: float = 30.0, verify_ssl: bool = True):
        self._http = HTTPClient(timeout=timeout, verify_ssl=verify_ssl)

    async def __aenter__(self) -> "AssetFetcher":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._http.__aexit__(exc_type, exc_val, exc_tb)

    async def fetch(self, url: str) -> HTTPResponse:
        """GET ``url``; non-2xx responses raise with the status code attached."""
        try:
            response = await self._http.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RetrievalError(f"Failed to fetch script: {exc}") from exc
        if not response.ok:
            raise RetrievalError(
                f"Failed to fetch script with status {response.status_code}",
                status_code=response.status_code,
            )
        logger.debug(
            "Fetched %s (%d chars, %.2fs)", response.url, len(response.body), response.response_time
        )
        return response

"""Async HTTP client used to retrieve pages and script assets."""

import time
from dataclasses import dataclass

import httpx

from .headers import BROWSER_HEADERS


@dataclass
class HTTPResponse:
    """Represents an HTTP response."""

    url: str
    status_code: int
    headers: dict[str, str]
    body: str
    response_time: float
    content_type: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HTTPClient:
    """Async HTTP client presenting a desktop browser profile."""

    def __init__(
        self,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        verify_ssl: bool = True,
        headers: dict[str, str] | None = None,
    ):
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.verify_ssl = verify_ssl
        self.headers = dict(BROWSER_HEADERS if headers is None else headers)
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            verify=self.verify_ssl,
            headers=self.headers,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """Make a GET request."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        start = time.time()
        response = await self.client.get(url, headers=headers)
        elapsed = time.time() - start

        return HTTPResponse(
            url=str(response.url),
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
            response_time=elapsed,
            content_type=response.headers.get("content-type", ""),
        )

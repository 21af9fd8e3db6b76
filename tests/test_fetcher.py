"""Tests for the HTTP client and asset fetcher."""

import httpx
import pytest
import respx
from httpx import Response

from jsaudit.modules.jsscan import AssetFetcher, ErrorKind, RetrievalError, classify_error
from jsaudit.tools.http import BROWSER_HEADERS, HTTPClient


class TestHTTPClient:
    """Tests for HTTPClient."""

    @respx.mock
    async def test_get_sends_browser_profile(self):
        route = respx.get("https://example.com/app.js").mock(
            return_value=Response(
                200, text="var a;", headers={"Content-Type": "application/javascript"}
            )
        )

        async with HTTPClient() as client:
            response = await client.get("https://example.com/app.js")

        assert response.ok
        assert response.body == "var a;"
        assert response.content_type == "application/javascript"
        sent = route.calls.last.request.headers
        assert sent["user-agent"] == BROWSER_HEADERS["User-Agent"]

    async def test_get_outside_context_raises(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            await HTTPClient().get("https://example.com")


class TestAssetFetcher:
    """Tests for AssetFetcher."""

    @respx.mock
    async def test_fetch_success(self):
        respx.get("https://example.com/").mock(return_value=Response(200, text="<html></html>"))

        async with AssetFetcher() as fetcher:
            response = await fetcher.fetch("https://example.com/")

        assert response.status_code == 200
        assert response.body == "<html></html>"

    @respx.mock
    async def test_follows_redirects_and_reports_final_url(self):
        respx.get("https://example.com/").mock(
            return_value=Response(301, headers={"Location": "https://www.example.com/home/"})
        )
        respx.get("https://www.example.com/home/").mock(return_value=Response(200, text="ok"))

        async with AssetFetcher() as fetcher:
            response = await fetcher.fetch("https://example.com/")

        assert response.url == "https://www.example.com/home/"

    @respx.mock
    async def test_forbidden_carries_status(self):
        respx.get("https://example.com/app.js").mock(return_value=Response(403))

        async with AssetFetcher() as fetcher:
            with pytest.raises(RetrievalError) as exc_info:
                await fetcher.fetch("https://example.com/app.js")

        assert exc_info.value.status_code == 403
        assert classify_error(exc_info.value).kind is ErrorKind.ACCESS_DENIED

    @respx.mock
    async def test_server_error_is_retrieval_failure(self):
        respx.get("https://example.com/app.js").mock(return_value=Response(500))

        async with AssetFetcher() as fetcher:
            with pytest.raises(RetrievalError, match="status 500"):
                await fetcher.fetch("https://example.com/app.js")

    @respx.mock
    async def test_transport_error_wrapped(self):
        respx.get("https://down.example.com/app.js").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        async with AssetFetcher() as fetcher:
            with pytest.raises(RetrievalError) as exc_info:
                await fetcher.fetch("https://down.example.com/app.js")

        assert exc_info.value.status_code is None
        assert "Connection refused" in str(exc_info.value)

"""Tests for the blocking page fetcher."""
from __future__ import annotations

import httpx
import pytest

from imdbget.catalog.errors import FetchFailure
from imdbget.catalog.fetcher import PageFetcher
from imdbget.catalog.settings import CatalogSettings
from imdbget.cli.client import create_client


def _fetcher(settings: CatalogSettings, handler) -> PageFetcher:
    return PageFetcher(create_client(settings, transport=httpx.MockTransport(handler)))


def test_fetch_returns_body_and_sends_user_agent(settings: CatalogSettings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="<html>ok</html>")

    with _fetcher(settings, handler) as fetcher:
        body = fetcher.fetch("http://imdb.test/search/title?companies=fox")

    assert body == "<html>ok</html>"
    assert seen[0].headers["User-Agent"] == settings.user_agent


def test_fetch_follows_redirects(settings: CatalogSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "http://imdb.test/new"})
        return httpx.Response(200, text="moved here")

    with _fetcher(settings, handler) as fetcher:
        assert fetcher.fetch("http://imdb.test/old") == "moved here"


def test_error_status_raises_fetch_failure(settings: CatalogSettings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with _fetcher(settings, handler) as fetcher:
        with pytest.raises(FetchFailure) as excinfo:
            fetcher.fetch("http://imdb.test/search")

    assert excinfo.value.url == "http://imdb.test/search"
    assert excinfo.value.reason == "HTTP 503"


def test_transport_error_raises_fetch_failure(settings: CatalogSettings) -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        raise httpx.ConnectError("connection refused", request=request)

    with _fetcher(settings, handler) as fetcher:
        with pytest.raises(FetchFailure, match="connection refused"):
            fetcher.fetch("http://imdb.test/search")

    assert len(calls) == 1

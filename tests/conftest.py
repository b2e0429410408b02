from __future__ import annotations

import functools

import httpx
import pytest

from rssconv.loaders import HttpLoader
from rssconv.pipeline import coordinator


class TrackedStream(httpx.SyncByteStream):
    """Body stream that remembers whether it was closed."""

    def __init__(self, *chunks: bytes):
        self.chunks = chunks
        self.closed = False

    def __iter__(self):
        yield from self.chunks

    def close(self) -> None:
        self.closed = True


class BrokenStream(TrackedStream):
    """Body stream that dies part-way through."""

    def __iter__(self):
        yield b"<rss>"
        raise httpx.ReadError("connection reset by peer")


@pytest.fixture
def feeds():
    """URL -> handler result used by the mock transport; records every request."""

    routes: dict[str, object] = {}
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        requested.append(url)
        result = routes.get(url)
        if result is None:
            raise httpx.ConnectError("connection refused", request=request)
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, text=str(result))

    transport = httpx.MockTransport(handler)
    return routes, requested, transport


@pytest.fixture
def offline_http(monkeypatch, feeds):
    """Route every HttpLoader the pipeline builds through the mock transport."""

    routes, requested, transport = feeds
    monkeypatch.setattr(coordinator, "HttpLoader", functools.partial(HttpLoader, transport=transport))
    return routes, requested

from __future__ import annotations

import logging
from typing import Iterable

import httpx

from rssconv.errors import FetchError, ReadError
from rssconv.loaders.base import Loader
from rssconv.text import decode_body

logger = logging.getLogger(__name__)


class HttpLoader(Loader):
    """
    Loader that GETs each URL in order and keeps the whole body as text.

    Sources are fetched strictly one after another. The first failure stops the
    run: nothing after the failing URL is requested, and the error carries the
    documents that were already fetched.
    """

    def __init__(
        self,
        urls: Iterable[str],
        *,
        timeout: float | None = None,
        user_agent: str = "rssconv/0.1",
        follow_redirects: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.urls = tuple(urls)
        self._client = httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpLoader":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def load(self) -> list[str]:
        documents: list[str] = []
        for url in self.urls:
            documents.append(self._fetch(url, documents))
        return documents

    def _fetch(self, url: str, documents: list[str]) -> str:
        logger.debug("Fetching %s", url)
        try:
            with self._client.stream("GET", url) as response:
                return self._read_body(url, response, documents)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Failed to do http request", extra={"url": url, "error": str(exc)})
            raise FetchError(
                f"Failed to do http request: {exc}",
                url=url,
                documents=documents,
            ) from exc

    @staticmethod
    def _read_body(url: str, response: httpx.Response, documents: list[str]) -> str:
        # Non-2xx bodies are kept like any other response; only transport failures abort.
        if response.is_error:
            logger.warning(
                "Source responded with an error status",
                extra={"url": url, "status_code": response.status_code},
            )
        try:
            response.read()
        except httpx.HTTPError as exc:
            logger.error("Failed to read from http body", extra={"url": url, "error": str(exc)})
            raise ReadError(
                f"Failed to read from http body: {exc}",
                url=url,
                documents=documents,
            ) from exc
        logger.debug("Fetched %s bytes from %s", len(response.content), url)
        # The declared charset is ignored so the bytes survive untouched.
        return decode_body(response.content)

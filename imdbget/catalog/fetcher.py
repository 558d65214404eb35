"""Blocking page retrieval."""
from __future__ import annotations

import logging

import httpx

from .errors import FetchFailure

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetch search result pages one at a time.

    Failures are never retried: any transport error or non-success status is
    surfaced as :class:`FetchFailure` and ends the run.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def fetch(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchFailure(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise FetchFailure(url, str(exc) or exc.__class__.__name__) from exc
        return response.text

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

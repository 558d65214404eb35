"""HTTP client helpers for the imdb-get CLI."""
from __future__ import annotations

import httpx

from ..catalog.settings import CatalogSettings


def create_client(
    settings: CatalogSettings, *, transport: httpx.BaseTransport | None = None
) -> httpx.Client:
    """Instantiate an HTTPX client configured from ``settings``."""

    return httpx.Client(
        timeout=settings.request_timeout,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    )

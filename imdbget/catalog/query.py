"""Search URL construction."""
from __future__ import annotations

from .models import PageRequest


def build_url(request: PageRequest, *, base_url: str) -> str:
    """Return the search URL for ``request``.

    The first page omits the ``start`` parameter; later pages carry the
    1-based offset of their first result.
    """

    url = f"{base_url}?companies={request.identifier}&release_date={request.date_start},{request.date_end}"
    if request.offset > 1:
        url += f"&start={request.offset}"
    return url + "&view=simple"

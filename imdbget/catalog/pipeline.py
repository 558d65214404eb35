"""
Paginated fetch-and-normalize pipeline.

Each backend identifier is processed as one pass: the first page announces
the number of titles, follow-up pages are requested in steps of the page
size until that number is covered, and every page's results table is
normalized into output lines. Passes run strictly one after another and a
failure in any pass ends the whole run.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Protocol

from .errors import InternalInvariantViolation, TooManyItems
from .models import EntityQuery, PageRequest, PassResult
from .normalizer import Normalizer, normalize_records
from .parser import extract_item_count, extract_results_text
from .query import build_url
from .settings import CatalogSettings
from .studios import resolve_identifiers

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    def fetch(self, url: str) -> str:
        ...


class CatalogPipeline:
    """Drive every pass for a studio and collect the combined output."""

    def __init__(self, fetcher: Fetcher, normalizer: Normalizer, settings: CatalogSettings) -> None:
        self.fetcher = fetcher
        self.normalizer = normalizer
        self.settings = settings

    def _fetch(self, request: PageRequest) -> str:
        return self.fetcher.fetch(build_url(request, base_url=self.settings.base_url))

    def _results(self, page: str) -> List[str]:
        return extract_results_text(page, header_lines=self.settings.header_lines)

    def run_pass(self, identifier: str, query: EntityQuery) -> PassResult:
        """Fetch and normalize every page for a single identifier."""

        logger.info("IMDB Studio Identifier is %s", identifier)
        request = PageRequest.first(identifier, query)
        page = self._fetch(request)

        count = extract_item_count(page, identifier, header_lines=self.settings.header_lines)
        logger.info("Processing %s items...", f"{count:,}")
        if count >= query.item_ceiling:
            raise TooManyItems(count, query.item_ceiling, identifier)

        result = PassResult(identifier=identifier, item_count=count, pages_fetched=1)
        result.lines.extend(self.normalizer.normalize(self._results(page)))

        page_size = self.settings.page_size
        if count > page_size:
            request = request.next(page_size)
            while request.offset <= count:
                logger.debug("Fetching %s items starting at %d", identifier, request.offset)
                page = self._fetch(request)
                result.pages_fetched += 1
                results = self._results(page)
                # Judged on records, not output lines, in every mode.
                if self.settings.stop_on_empty_page and not normalize_records(results):
                    logger.info("Page at offset %d returned no entries; stopping early", request.offset)
                    break
                result.lines.extend(self.normalizer.normalize(results))
                request = request.next(page_size)

        logger.info("%d entries processed", count)
        return result

    def run(self, query: EntityQuery) -> List[str]:
        """Run one pass per resolved identifier and return the combined lines.

        Nothing is returned unless every pass succeeds.
        """

        identifiers = resolve_identifiers(query.logical_name)
        buffers: Dict[str, List[str]] = {}
        for identifier in identifiers:
            buffer_name = f"{query.logical_name}-{identifier}.{query.date_range}"
            if buffer_name in buffers:
                raise InternalInvariantViolation(
                    f"pass buffer {buffer_name!r} is already in use; identifier {identifier} listed twice"
                )
            buffers[buffer_name] = self.run_pass(identifier, query).lines

        results: List[str] = []
        for lines in buffers.values():
            results.extend(lines)
        return results

"""Exceptions raised by the catalog pipeline."""
from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for fatal catalog pipeline failures."""


class FetchFailure(CatalogError):
    """Raised when a page request fails at the transport or HTTP level."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class CountUnparseable(CatalogError):
    """Raised when the first page of a pass carries no item count."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unable to determine the number of items for studio identifier {identifier}")
        self.identifier = identifier


class TooManyItems(CatalogError):
    """Raised when a pass reports at least as many items as the ceiling allows."""

    def __init__(self, count: int, ceiling: int, identifier: str) -> None:
        super().__init__(
            f"Found {count} items in IMDB Database for query (limit {ceiling}). "
            "Too many items to process... aborting. "
            "This is most likely caused by a bad IMDB database query using an invalid "
            f"studio or company code ({identifier}); check your studio name or "
            "IMDB company code carefully!"
        )
        self.count = count
        self.ceiling = ceiling
        self.identifier = identifier


class InternalInvariantViolation(CatalogError):
    """Raised when an internal consistency check fails."""

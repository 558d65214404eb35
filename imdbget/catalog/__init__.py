"""Catalog pipeline: studio lookup, page fetching, parsing and normalization."""
from __future__ import annotations

from .errors import (
    CatalogError,
    CountUnparseable,
    FetchFailure,
    InternalInvariantViolation,
    TooManyItems,
)
from .fetcher import PageFetcher
from .models import EntityQuery, PageRequest, PassResult, Record
from .normalizer import Normalizer
from .pipeline import CatalogPipeline
from .settings import CatalogSettings
from .studios import KNOWN_STUDIOS, resolve_identifiers

__all__ = [
    "CatalogError",
    "CatalogPipeline",
    "CatalogSettings",
    "CountUnparseable",
    "EntityQuery",
    "FetchFailure",
    "InternalInvariantViolation",
    "KNOWN_STUDIOS",
    "Normalizer",
    "PageFetcher",
    "PageRequest",
    "PassResult",
    "Record",
    "TooManyItems",
    "resolve_identifiers",
]

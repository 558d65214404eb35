"""Command line interface for imdb-get."""
from __future__ import annotations

from .app import app

__all__ = ["app"]

"""
imdb-get: fetch a studio's IMDB catalog as tab-delimited records.

The ``catalog`` package holds the fetch-and-normalize pipeline and the
``cli`` package the Typer command that drives it.
"""

__version__ = "0.1.0"

__all__ = ["catalog", "cli"]

"""Command line interface for fetching IMDB studio catalogs."""
from __future__ import annotations

import logging
import re
import signal
import sys
import threading
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Iterator, Optional, Tuple

import typer

from ..catalog.errors import CatalogError, InternalInvariantViolation, TooManyItems
from ..catalog.fetcher import PageFetcher
from ..catalog.models import EntityQuery
from ..catalog.normalizer import Normalizer
from ..catalog.pipeline import CatalogPipeline
from ..catalog.settings import CatalogSettings
from ..catalog.studios import KNOWN_STUDIOS
from .client import create_client
from .output import write_output

logger = logging.getLogger(__name__)

PROG_NAME = "imdb-get"
EXIT_FATAL = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

DATE_RANGE_RE = re.compile(r"^(\d{4}),(\d{4})$")

app = typer.Typer(
    help="Fetch the IMDB catalog of a studio as tab-delimited records.",
    add_completion=False,
)


class TerminatedError(Exception):
    """Raised from the SIGTERM handler so cleanup runs before exiting."""


def _raise_terminated(signum: int, frame: object) -> None:
    raise TerminatedError(f"received signal {signum}")


@contextmanager
def _terminate_on_sigterm() -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGTERM, _raise_terminated)
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


def studio_help() -> str:
    return (
        f"Studio should be one of {', '.join(KNOWN_STUDIOS)}. "
        "Any other value is used as the IMDB company id (coXXXXXXX). "
        "Several company ids may be given as coXXXXXXX,coYYYYYYY,END."
    )


def parse_date_range(value: str, *, earliest: int, latest: int) -> Tuple[int, int]:
    """Parse ``YYYY,YYYY`` and check it lies within ``earliest``..``latest``."""

    match = DATE_RANGE_RE.match(value.strip())
    if not match:
        raise typer.BadParameter(
            "date range must be two years separated by a single comma (YYYY,YYYY)",
            param_hint="'--date-range'",
        )
    start, end = int(match.group(1)), int(match.group(2))
    if end > latest or start < earliest or end < start:
        raise typer.BadParameter(
            f"date range improperly set; the first year must not be earlier than {earliest} "
            f"and the second year not later than {latest}",
            param_hint="'--date-range'",
        )
    return start, end


def configure_logging(*, quiet: bool, verbose: bool) -> None:
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
    # Request lines are already reported by the fetcher.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _error(message: str) -> None:
    typer.echo(f"{PROG_NAME}: ERROR: {message}", err=True)


@app.command()
def fetch(
    studio: Optional[str] = typer.Option(
        None, "--studio", "-s", help="Studio name or IMDB company id(s) to fetch."
    ),
    date_range: Optional[str] = typer.Option(
        None,
        "--date-range",
        "-d",
        help="Release years to include as YYYY,YYYY (defaults to every year on record).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="File to write to instead of standard output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress progress information and overwrite --output without asking.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Also report every page request."
    ),
    raw: bool = typer.Option(
        False, "--raw", "-r", help="Output markup-stripped text without reshaping it."
    ),
    append: bool = typer.Option(
        False,
        "--append",
        "-a",
        help="Append to --output and remove the leading item numbers.",
    ),
    max_items: Optional[int] = typer.Option(
        None,
        "--max-items",
        min=1,
        help="Abort when a query reports at least this many items.",
    ),
    list_studios: bool = typer.Option(
        False, "--list-studios", help="List the supported studio names and exit."
    ),
) -> None:
    """Download every page of a studio's catalog and print one record per title."""

    settings = CatalogSettings()

    if list_studios:
        for name in KNOWN_STUDIOS:
            typer.echo(name)
        raise typer.Exit()

    configure_logging(quiet=quiet, verbose=verbose)

    if not studio:
        raise typer.BadParameter(f"studio must be set. {studio_help()}", param_hint="'--studio'")

    current_year = date.today().year
    date_start, date_end = settings.earliest_year, current_year
    if date_range is not None:
        logger.info("Checking Date Range...")
        date_start, date_end = parse_date_range(
            date_range, earliest=settings.earliest_year, latest=current_year
        )
        logger.info("Date1 = %d; Date2 = %d", date_start, date_end)

    if output is not None and append:
        logger.info("--output and --append set; will format without item numbers and append to file")

    query = EntityQuery.create(
        studio, date_start, date_end, max_items if max_items is not None else settings.max_items
    )
    normalizer = Normalizer(raw=raw, strip_ids=append)

    try:
        with _terminate_on_sigterm():
            with PageFetcher(create_client(settings)) as fetcher:
                lines = CatalogPipeline(fetcher, normalizer, settings).run(query)
            written = write_output(
                lines, output, append=append, quiet=quiet, confirm=typer.confirm
            )
    except TooManyItems as exc:
        _error(str(exc))
        typer.echo(studio_help(), err=True)
        raise typer.Exit(code=EXIT_USAGE) from exc
    except InternalInvariantViolation as exc:
        _error(f"internal error: {exc}")
        raise typer.Exit(code=EXIT_FATAL) from exc
    except CatalogError as exc:
        _error(str(exc))
        typer.echo("shutting down... internal error or unable to connect to Internet", err=True)
        raise typer.Exit(code=EXIT_FATAL) from exc
    except TerminatedError as exc:
        _error(f"terminated: {exc}")
        raise typer.Exit(code=EXIT_FATAL) from exc
    except KeyboardInterrupt as exc:
        typer.echo(f"{PROG_NAME}: INTERRUPTED", err=True)
        typer.echo("Cleaning up... no output written", err=True)
        raise typer.Exit(code=EXIT_INTERRUPTED) from exc

    if not written:
        typer.echo(f"{output} not overwritten", err=True)

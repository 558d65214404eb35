"""
Markup helpers for IMDB search result pages.

Pages are handled line by line: a region is selected between two marker
patterns, tags are stripped from each line and a fixed number of leading
header lines is discarded.
"""
from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Pattern

from .errors import CountUnparseable

TAG_RE = re.compile(r"<[^>]*>")
COUNT_START_RE = re.compile(r"Most Popular")
COUNT_END_RE = re.compile(r"title")
RESULTS_START_RE = re.compile(r'<table class="results">')
RESULTS_END_RE = re.compile(r"</table>")
OF_COUNT_RE = re.compile(r"\bof\s+([\d,]+)")
DEFAULT_HEADER_LINES = 11


def strip_tags(line: str) -> str:
    return TAG_RE.sub("", line)


def select_ranges(lines: Iterable[str], start: Pattern[str], end: Pattern[str]) -> Iterator[str]:
    """Yield every line from a ``start`` match through the next ``end`` match.

    The end pattern is also checked against the opening line, and selection
    resumes at the next ``start`` match once a range closes.
    """

    inside = False
    for line in lines:
        if not inside:
            if not start.search(line):
                continue
            yield line
            inside = not end.search(line)
        else:
            yield line
            if end.search(line):
                inside = False


def _stripped_region(page: str, start: Pattern[str], end: Pattern[str], header_lines: int) -> List[str]:
    region = [strip_tags(line) for line in select_ranges(page.splitlines(), start, end)]
    return region[header_lines:]


def extract_count_region(page: str, *, header_lines: int = DEFAULT_HEADER_LINES) -> List[str]:
    return _stripped_region(page, COUNT_START_RE, COUNT_END_RE, header_lines)


def extract_results_text(page: str, *, header_lines: int = DEFAULT_HEADER_LINES) -> List[str]:
    """Return the markup-stripped lines of the results table on ``page``."""

    return _stripped_region(page, RESULTS_START_RE, RESULTS_END_RE, header_lines)


def _parse_count(value: str) -> int | None:
    digits = value.strip().replace(",", "")
    if digits.isdigit():
        return int(digits)
    return None


def extract_item_count(page: str, identifier: str = "", *, header_lines: int = DEFAULT_HEADER_LINES) -> int:
    """Return the total number of titles announced on a first page.

    The count normally follows an ``of`` token ("1-100 of 1,234 titles.").
    When no such line exists the second-to-last line of the region is read
    instead. Raises :class:`CountUnparseable` when neither yields a number.
    """

    region = extract_count_region(page, header_lines=header_lines)

    for line in region:
        match = OF_COUNT_RE.search(line)
        if match:
            count = _parse_count(match.group(1))
            if count is not None:
                return count

    if len(region) >= 2:
        count = _parse_count(region[-2].split("\t")[0])
        if count is not None:
            return count

    raise CountUnparseable(identifier)

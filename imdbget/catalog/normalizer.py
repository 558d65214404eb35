"""
Reshape markup-stripped result text into tab-delimited records.

A line holding only a number and a period ("12.") starts a new record.
The non-blank lines that follow become the record's fields until a blank
line or the next marker; a tab inside a line also separates fields.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, List, Tuple

from .models import Record
from .parser import strip_tags

MARKER_RE = re.compile(r"^\d+\.$")
MAX_FIELDS = 3

# Only these codes are decoded; everything else passes through untouched.
ENTITY_TABLE: Tuple[Tuple[str, str], ...] = (
    ("&#x27;", "'"),
    ("&#x26;", "&"),
    ("&#xF3;", "o"),
)


def decode_entities(text: str) -> str:
    for code, replacement in ENTITY_TABLE:
        text = text.replace(code, replacement)
    return text


class TokenizerState(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


class RecordTokenizer:
    """Two-state tokenizer turning a line stream into records."""

    def __init__(self) -> None:
        self.state = TokenizerState.OUTSIDE
        self._fields: List[str] = []

    def _emit(self) -> List[Record]:
        record = Record(tuple(self._fields))
        self._fields = []
        self.state = TokenizerState.OUTSIDE
        return [record]

    def feed(self, line: str) -> List[Record]:
        """Consume one line and return any records it completed."""

        text = line.strip()
        completed: List[Record] = []

        if MARKER_RE.match(text):
            if self.state is TokenizerState.INSIDE:
                completed = self._emit()
            self._fields = [text]
            self.state = TokenizerState.INSIDE
            return completed

        if self.state is TokenizerState.OUTSIDE:
            return completed

        if text:
            self._fields.extend(text.split("\t"))
        elif len(self._fields) > 1:
            completed = self._emit()
        return completed

    def close(self) -> List[Record]:
        if self.state is TokenizerState.INSIDE:
            return self._emit()
        return []


def tokenize(lines: Iterable[str]) -> List[Record]:
    tokenizer = RecordTokenizer()
    records: List[Record] = []
    for line in lines:
        records.extend(tokenizer.feed(line))
    records.extend(tokenizer.close())
    return records


def normalize_records(lines: Iterable[str], *, max_fields: int = MAX_FIELDS) -> List[Record]:
    """Tokenize ``lines`` into records of exactly ``max_fields`` fields."""

    records = []
    for record in tokenize(lines):
        fields = [decode_entities(value) for value in record.fields[:max_fields]]
        fields.extend([""] * (max_fields - len(fields)))
        records.append(Record(tuple(fields)))
    return records


class Normalizer:
    """Turn result-region lines into output lines.

    In raw mode lines are only stripped of markup. Otherwise each catalog
    entry becomes one tab-delimited line; ``strip_ids`` drops the leading
    rank field.
    """

    def __init__(self, *, raw: bool = False, strip_ids: bool = False, max_fields: int = MAX_FIELDS) -> None:
        self.raw = raw
        self.strip_ids = strip_ids
        self.max_fields = max_fields

    def normalize(self, lines: Iterable[str]) -> List[str]:
        if self.raw:
            return [strip_tags(line) for line in lines]

        output = []
        for record in normalize_records(lines, max_fields=self.max_fields):
            if self.strip_ids:
                record = record.without_rank()
            output.append(record.to_line())
        return output

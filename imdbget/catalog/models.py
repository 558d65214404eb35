"""Value types shared by the catalog pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class EntityQuery:
    """A validated request for one studio's catalog."""

    logical_name: str
    date_start: int
    date_end: int
    item_ceiling: int

    @classmethod
    def create(cls, logical_name: str, date_start: int, date_end: int, item_ceiling: int) -> "EntityQuery":
        return cls(logical_name.strip().lower(), date_start, date_end, item_ceiling)

    @property
    def date_range(self) -> str:
        return f"{self.date_start},{self.date_end}"


@dataclass(frozen=True, slots=True)
class PageRequest:
    """One page of one identifier's search results."""

    identifier: str
    date_start: int
    date_end: int
    offset: int = 1

    @classmethod
    def first(cls, identifier: str, query: EntityQuery) -> "PageRequest":
        return cls(identifier, query.date_start, query.date_end, 1)

    def next(self, page_size: int) -> "PageRequest":
        """Return the request for the page following this one."""

        return replace(self, offset=self.offset + page_size)


@dataclass(frozen=True, slots=True)
class Record:
    """A single catalog entry: rank marker, title text, auxiliary metadata."""

    fields: Tuple[str, ...]

    @property
    def rank(self) -> str:
        return self.fields[0] if self.fields else ""

    @property
    def title(self) -> str:
        return self.fields[1] if len(self.fields) > 1 else ""

    @property
    def metadata(self) -> str:
        return self.fields[2] if len(self.fields) > 2 else ""

    def without_rank(self) -> "Record":
        return Record(self.fields[1:])

    def to_line(self) -> str:
        return "\t".join(self.fields)


@dataclass(slots=True)
class PassResult:
    """Normalized output collected for a single backend identifier."""

    identifier: str
    item_count: int
    pages_fetched: int = 0
    lines: List[str] = field(default_factory=list)

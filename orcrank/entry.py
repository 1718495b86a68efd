"""Rows of opening and closing ranks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from orcrank.filters import Filters


@dataclass(frozen=True)
class Entry:
    """One seat: institute, programme, category and its rank bounds."""

    institute: str
    branch: str
    quota: str
    seat_type: str
    gender: str
    opening_rank: int
    closing_rank: int


def filter_entries(filters: Filters, entries: Iterable[Entry]) -> Iterator[Entry]:
    """Yield, in order, the entries that ``filters`` lets through."""
    return (entry for entry in entries if filters.matches(entry))
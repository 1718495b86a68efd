"""Orderings for the list of entries."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orcrank.entry import Entry


class Sort(Enum):
    """How entries are ordered; the value is the label shown to users."""

    OPENING_ASCENDING = "Ascending (OR)"
    OPENING_DESCENDING = "Descending (OR)"
    CLOSING_ASCENDING = "Ascending (CR)"
    CLOSING_DESCENDING = "Descending (CR)"

    @classmethod
    def default(cls) -> Sort:
        """Return the ordering used before the user picks one."""
        return cls.CLOSING_ASCENDING

    def __str__(self) -> str:
        return self.value

    def key(self, entry: Entry) -> int:
        """Return the rank of ``entry`` that this ordering compares."""
        if self in (Sort.OPENING_ASCENDING, Sort.OPENING_DESCENDING):
            return entry.opening_rank
        return entry.closing_rank

    def reverse(self) -> bool:
        """Return True if this ordering puts higher ranks first."""
        return self in (Sort.OPENING_DESCENDING, Sort.CLOSING_DESCENDING)
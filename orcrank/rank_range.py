"""Inclusive ranges of ranks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(eq=False)
class RankRange:
    """An inclusive range of non-negative ranks with visible bounds.

    A range whose ``start`` lies past its ``end`` is empty. The default
    range is empty, and all empty ranges compare equal.
    """

    start: int = 4
    end: int = 3

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError(
                f"rank bounds must be non-negative, got {self.start}..={self.end}"
            )

    def is_empty(self) -> bool:
        """Return True if the range holds no value."""
        return self.start > self.end

    def contains(self, value: int) -> bool:
        """Return True if ``value`` lies within the bounds, both included."""
        return self.start <= value <= self.end

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankRange):
            return NotImplemented
        same_bounds = self.start == other.start and self.end == other.end
        return same_bounds or (self.is_empty() and other.is_empty())

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))
"""Choice of year and counselling round, and where its data lives."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_LAST_ROUND = {
    2016: 6,
    2017: 7,
    2018: 7,
    2019: 7,
    2020: 6,
    2021: 6,
    2022: 6,
    2023: 6,
    2024: 5,
}


def valid_years() -> range:
    """Return the years for which data is available."""
    return range(2016, 2025)


def valid_rounds(year: int | None) -> range | None:
    """Return the rounds held in ``year``, or None when no year is given.

    Raises ValueError for a year outside :func:`valid_years`.
    """
    if year is None:
        return None
    try:
        last = _LAST_ROUND[year]
    except KeyError:
        raise ValueError(f"Invalid year: {year}.") from None
    return range(1, last + 1)


@dataclass(frozen=True)
class Options:
    """A year and round selection; either may still be unset."""

    year: int | None = None
    round: int | None = None

    def is_complete(self) -> bool:
        """Return True when both year and round are chosen."""
        return self.year is not None and self.round is not None

    def db_path(self, root: str | Path = "db") -> Path:
        """Return the database file for this selection under ``root``."""
        if not self.is_complete():
            raise ValueError("year and round must both be chosen")
        return Path(root) / str(self.year) / f"data-{self.year}-{self.round}.db"
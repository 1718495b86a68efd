"""Selections that decide which entries are shown."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field

from orcrank.entry import Entry
from orcrank.rank_range import RankRange


def _uniques(conn: sqlite3.Connection, column: str) -> dict[str, bool]:
    rows = conn.execute(f"SELECT DISTINCT {column} FROM data;")
    return {value: True for (value,) in rows}


def _maximum(conn: sqlite3.Connection, column: str) -> int:
    (value,) = conn.execute(f"SELECT MAX({column}) FROM data;").fetchone()
    if value is None:
        raise ValueError(f"no values in column {column!r} of table 'data'")
    return int(value)


@dataclass
class Filters:
    """Which values of each column are enabled, and the allowed rank ranges.

    ``institute_kinds`` maps each kind of institute to whether it is enabled;
    ``institutes`` maps each kind to its institutes and whether each is enabled.
    """

    institute_kinds: dict[str, bool] = field(default_factory=dict)
    institutes: dict[str, dict[str, bool]] = field(default_factory=dict)
    branch: dict[str, bool] = field(default_factory=dict)
    quota: dict[str, bool] = field(default_factory=dict)
    seat_type: dict[str, bool] = field(default_factory=dict)
    gender: dict[str, bool] = field(default_factory=dict)
    opening: RankRange = field(default_factory=RankRange)
    closing: RankRange = field(default_factory=RankRange)
    opening_bounds: RankRange = field(default_factory=RankRange)
    closing_bounds: RankRange = field(default_factory=RankRange)

    def _load_institutes(self, conn: sqlite3.Connection) -> None:
        kinds = [
            kind
            for (kind,) in conn.execute(
                "SELECT DISTINCT instituteType FROM institutes;"
            )
        ]
        for kind in kinds:
            rows = conn.execute(
                "SELECT institute FROM institutes WHERE instituteType = ?;", (kind,)
            )
            self.institutes[kind] = {institute: True for (institute,) in rows}
            self.institute_kinds[kind] = True

    def load(self, conn: sqlite3.Connection) -> None:
        """Enable every value found in the database and widen ranges to its extent."""
        self.branch = _uniques(conn, "branch")
        self.quota = _uniques(conn, "quota")
        self.seat_type = _uniques(conn, "seatType")
        self.gender = _uniques(conn, "gender")

        max_opening = _maximum(conn, "orank")
        max_closing = _maximum(conn, "crank")
        self.opening = RankRange(0, max_opening)
        self.closing = RankRange(0, max_closing)
        self.opening_bounds = RankRange(0, max_opening)
        self.closing_bounds = RankRange(0, max_closing)

        self._load_institutes(conn)

    def matches(self, entry: Entry) -> bool:
        """Return True if ``entry`` passes every filter.

        Raises KeyError for a column value the filters do not know.
        """
        if not (
            self.branch[entry.branch]
            and self.quota[entry.quota]
            and self.seat_type[entry.seat_type]
            and self.gender[entry.gender]
            and entry.opening_rank in self.opening
            and entry.closing_rank in self.closing
        ):
            return False

        matched = False
        for kind, institutes in self.institutes.items():
            enabled = institutes.get(entry.institute)
            if enabled is not None:
                matched = self.institute_kinds[kind] and enabled
        return matched
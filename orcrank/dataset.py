"""A loaded table of ranks together with its filters."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Iterator

from orcrank.entry import Entry, filter_entries
from orcrank.filters import Filters
from orcrank.options import Options
from orcrank.sort import Sort

_ENTRY_QUERY = (
    "SELECT institute, branch, quota, seatType, gender, orank, crank FROM data"
)


class Dataset:
    """The entries of one year and round, read from databases under ``root``."""

    def __init__(self, root: str | Path = "db") -> None:
        self.root = Path(root)
        self.filters = Filters()
        self._connection: sqlite3.Connection | None = None
        self._options = Options()
        self._entries: list[Entry] = []

    def is_loaded(self) -> bool:
        """Return True once a database has been loaded."""
        return self._connection is not None

    def load(self, options: Options) -> None:
        """Read the database chosen by ``options``, unless it is already loaded.

        The file is opened read-only; sqlite3 errors propagate.
        """
        if options == self._options:
            return

        uri = options.db_path(self.root).resolve().as_uri() + "?mode=ro"
        connection = sqlite3.connect(uri, uri=True)
        try:
            entries = [
                Entry(institute, branch, quota, seat_type, gender, int(orank), int(crank))
                for institute, branch, quota, seat_type, gender, orank, crank in connection.execute(
                    _ENTRY_QUERY
                )
            ]
            self.filters.load(connection)
        except Exception:
            connection.close()
            raise

        if self._connection is not None:
            self._connection.close()
        self._entries = entries
        self._connection = connection
        self._options = options

    def sort(self, sort: Sort) -> None:
        """Order the entries in place; equal ranks keep their order."""
        self._entries.sort(key=sort.key, reverse=sort.reverse())

    def entries(self) -> Iterator[Entry]:
        """Yield the entries that pass the current filters, in order."""
        return filter_entries(self.filters, self._entries)
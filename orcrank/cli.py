"""Command line for browsing opening and closing ranks."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from typing import Iterable, Sequence

from orcrank.dataset import Dataset
from orcrank.entry import Entry
from orcrank.filters import Filters
from orcrank.options import Options, valid_rounds, valid_years
from orcrank.rank_range import RankRange
from orcrank.sort import Sort

_HEADERS = (
    "Institute",
    "Branch",
    "Quota",
    "Seat type",
    "Gender",
    "Opening Rank",
    "Closing Rank",
)
_TEXT_COLUMNS = 5

_SORT_CHOICES = {sort.name.lower().replace("_", "-"): sort for sort in Sort}


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="orcrank",
        description="Show opening and closing ranks for a year and round.",
    )
    parser.add_argument(
        "--root", default="db", help="directory holding the databases (default: db)"
    )
    parser.add_argument("--year", type=int, choices=list(valid_years()))
    parser.add_argument("--round", type=int)
    default_sort = next(
        name for name, sort in _SORT_CHOICES.items() if sort is Sort.default()
    )
    parser.add_argument(
        "--sort",
        choices=list(_SORT_CHOICES),
        default=default_sort,
        help=f"ordering of rows (default: {default_sort})",
    )
    for flag, dest, what in (
        ("--branch", "branch", "branches"),
        ("--quota", "quota", "quotas"),
        ("--seat-type", "seat_type", "seat types"),
        ("--gender", "gender", "genders"),
        ("--institute-kind", "institute_kind", "kinds of institute"),
        ("--institute", "institute", "institutes"),
    ):
        parser.add_argument(
            flag,
            dest=dest,
            action="append",
            metavar="NAME",
            help=f"show only these {what}; may be repeated",
        )
    parser.add_argument(
        "--opening",
        type=int,
        nargs=2,
        metavar=("MIN", "MAX"),
        help="allowed opening ranks, both included",
    )
    parser.add_argument(
        "--closing",
        type=int,
        nargs=2,
        metavar=("MIN", "MAX"),
        help="allowed closing ranks, both included",
    )
    return parser


def _select(choices: dict[str, bool], wanted: Sequence[str] | None, what: str) -> None:
    if wanted is None:
        return
    unknown = set(wanted) - choices.keys()
    if unknown:
        raise ValueError(f"unknown {what}: {', '.join(sorted(unknown))}")
    keep = set(wanted)
    for key in choices:
        choices[key] = key in keep


def _narrow(bounds: RankRange, values: Sequence[int] | None, what: str) -> RankRange | None:
    if values is None:
        return None
    start, end = values
    if start > end or start < bounds.start or end > bounds.end:
        raise ValueError(
            f"{what} range {start}..{end} must be ordered and lie within "
            f"{bounds.start}..{bounds.end}"
        )
    return RankRange(start, end)


def apply_filters(filters: Filters, args: argparse.Namespace) -> None:
    """Narrow ``filters`` to the selections given in ``args``.

    Raises ValueError for names the data does not hold or ranges out of bounds.
    """
    _select(filters.branch, args.branch, "branch")
    _select(filters.quota, args.quota, "quota")
    _select(filters.seat_type, args.seat_type, "seat type")
    _select(filters.gender, args.gender, "gender")
    _select(filters.institute_kinds, args.institute_kind, "institute kind")

    if args.institute is not None:
        known = {name for names in filters.institutes.values() for name in names}
        unknown = set(args.institute) - known
        if unknown:
            raise ValueError(f"unknown institute: {', '.join(sorted(unknown))}")
        keep = set(args.institute)
        for names in filters.institutes.values():
            for name in names:
                names[name] = name in keep

    opening = _narrow(filters.opening_bounds, args.opening, "opening rank")
    if opening is not None:
        filters.opening = opening
    closing = _narrow(filters.closing_bounds, args.closing, "closing rank")
    if closing is not None:
        filters.closing = closing


def format_table(entries: Iterable[Entry]) -> str:
    """Return the entries as an aligned text table with a header."""
    rows = [
        (
            entry.institute,
            entry.branch,
            entry.quota,
            entry.seat_type,
            entry.gender,
            str(entry.opening_rank),
            str(entry.closing_rank),
        )
        for entry in entries
    ]
    widths = [max(len(cell) for cell in column) for column in zip(_HEADERS, *rows)]

    def line(cells: Sequence[str], right_align: bool) -> str:
        parts = [
            cell.rjust(width) if right_align and index >= _TEXT_COLUMNS else cell.ljust(width)
            for index, (cell, width) in enumerate(zip(cells, widths))
        ]
        return "  ".join(parts).rstrip()

    lines = [line(_HEADERS, False), "  ".join("-" * width for width in widths)]
    lines.extend(line(row, True) for row in rows)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.year is None or args.round is None:
        print("No dataset selected.")
        return 1

    rounds = valid_rounds(args.year)
    if rounds is None or args.round not in rounds:
        parser.error(
            f"round must be between {rounds.start} and {rounds.stop - 1} "
            f"for {args.year}"
        )

    dataset = Dataset(args.root)
    try:
        dataset.load(Options(args.year, args.round))
    except (sqlite3.Error, ValueError) as error:
        print(f"orcrank: cannot load dataset: {error}", file=sys.stderr)
        return 1
    dataset.sort(_SORT_CHOICES[args.sort])

    try:
        apply_filters(dataset.filters, args)
    except ValueError as error:
        parser.error(str(error))

    print(format_table(dataset.entries()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
import sqlite3
from pathlib import Path

import pytest

from orcrank.cli import apply_filters, build_parser, format_table, main
from orcrank.entry import Entry
from orcrank.filters import Filters
from orcrank.rank_range import RankRange

ROWS = [
    ("IIT A", "CSE", "AI", "OPEN", "Gender-Neutral", 10, 50),
    ("IIT A", "EE", "AI", "OPEN", "Female-only", 100, 300),
    ("NIT B", "CSE", "HS", "OBC-NCL", "Gender-Neutral", 500, 900),
    ("NIT B", "ME", "OS", "OPEN", "Gender-Neutral", 40, 80),
]
INSTITUTES = [("IIT A", "IIT"), ("NIT B", "NIT")]


@pytest.fixture
def root(tmp_path: Path) -> Path:
    base = tmp_path / "db"
    path = base / "2020" / "data-2020-1.db"
    path.parent.mkdir(parents=True)
    conn = sqlite3.connect(path)
    conn.execute(
        "CREATE TABLE data (institute TEXT, branch TEXT, quota TEXT, "
        "seatType TEXT, gender TEXT, orank INTEGER, crank INTEGER)"
    )
    conn.execute("CREATE TABLE institutes (institute TEXT, instituteType TEXT)")
    conn.executemany("INSERT INTO data VALUES (?, ?, ?, ?, ?, ?, ?)", ROWS)
    conn.executemany("INSERT INTO institutes VALUES (?, ?)", INSTITUTES)
    conn.commit()
    conn.close()
    return base


def run(capsys, root, *extra):
    status = main(["--root", str(root), "--year", "2020", "--round", "1", *extra])
    lines = capsys.readouterr().out.splitlines()
    return status, lines[2:]


def make_filters() -> Filters:
    return Filters(
        institute_kinds={"IIT": True, "NIT": True},
        institutes={"IIT": {"IIT A": True}, "NIT": {"NIT B": True}},
        branch={"CSE": True, "EE": True},
        quota={"AI": True},
        seat_type={"OPEN": True},
        gender={"Gender-Neutral": True},
        opening=RankRange(0, 500),
        closing=RankRange(0, 900),
        opening_bounds=RankRange(0, 500),
        closing_bounds=RankRange(0, 900),
    )


def test_default_sort_is_closing_ascending(capsys, root):
    status, rows = run(capsys, root)
    assert status == 0
    closing = [int(row.split()[-1]) for row in rows]
    assert closing == sorted(row[6] for row in ROWS)


def test_opening_descending(capsys, root):
    status, rows = run(capsys, root, "--sort", "opening-descending")
    assert status == 0
    opening = [int(row.split()[-2]) for row in rows]
    assert opening == sorted((row[5] for row in ROWS), reverse=True)


def test_branch_filter(capsys, root):
    status, rows = run(capsys, root, "--branch", "CSE")
    assert status == 0
    assert len(rows) == 2
    assert all("CSE" in row for row in rows)


def test_institute_kind_filter(capsys, root):
    _, rows = run(capsys, root, "--institute-kind", "NIT")
    assert len(rows) == 2
    assert all(row.startswith("NIT B") for row in rows)


def test_closing_range_filter(capsys, root):
    _, rows = run(capsys, root, "--closing", "0", "100")
    assert sorted(int(row.split()[-1]) for row in rows) == [50, 80]


def test_unknown_branch_is_usage_error(root):
    with pytest.raises(SystemExit) as info:
        main(["--root", str(root), "--year", "2020", "--round", "1", "--branch", "XYZ"])
    assert info.value.code == 2


def test_round_outside_year_is_usage_error(root):
    with pytest.raises(SystemExit) as info:
        main(["--root", str(root), "--year", "2024", "--round", "6"])
    assert info.value.code == 2


def test_missing_database_fails(capsys, root):
    status = main(["--root", str(root), "--year", "2020", "--round", "2"])
    assert status == 1
    assert "cannot load dataset" in capsys.readouterr().err


def test_no_selection(capsys):
    assert main([]) == 1
    assert "No dataset selected." in capsys.readouterr().out


def test_apply_filters_selects_only_named():
    filters = make_filters()
    apply_filters(filters, build_parser().parse_args(["--branch", "EE"]))
    assert filters.branch == {"CSE": False, "EE": True}
    assert filters.quota == {"AI": True}


def test_apply_filters_institute():
    filters = make_filters()
    apply_filters(filters, build_parser().parse_args(["--institute", "NIT B"]))
    assert filters.institutes == {"IIT": {"IIT A": False}, "NIT": {"NIT B": True}}


def test_apply_filters_range():
    filters = make_filters()
    apply_filters(filters, build_parser().parse_args(["--opening", "10", "200"]))
    assert filters.opening == RankRange(10, 200)
    assert filters.closing == RankRange(0, 900)


def test_apply_filters_range_out_of_bounds():
    filters = make_filters()
    with pytest.raises(ValueError):
        apply_filters(filters, build_parser().parse_args(["--closing", "0", "901"]))


def test_apply_filters_reversed_range():
    filters = make_filters()
    with pytest.raises(ValueError):
        apply_filters(filters, build_parser().parse_args(["--opening", "50", "10"]))


def test_apply_filters_unknown_kind():
    filters = make_filters()
    with pytest.raises(ValueError):
        apply_filters(filters, build_parser().parse_args(["--institute-kind", "IIIT"]))


def test_format_table_header_and_alignment():
    entries = [Entry(*row) for row in ROWS]
    lines = format_table(entries).splitlines()
    assert len(lines) == len(entries) + 2
    assert [cell for cell in lines[0].split("  ") if cell] == [
        "Institute",
        "Branch",
        "Quota",
        "Seat type",
        "Gender",
        "Opening Rank",
        "Closing Rank",
    ]
    assert len({len(line) for line in lines}) == 1


def test_format_table_empty():
    lines = format_table([]).splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Institute")
    assert set(lines[1]) <= {"-", " "}
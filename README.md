# orcrank

Browse opening and closing ranks (OR/CR) from JoSAA counselling rounds. The
data is kept in SQLite files, one file for each year and round. The files sit
under a root directory, which is `db` by default:

```
<root>/<year>/data-<year>-<round>.db
```

Each database must hold two tables:

- a `data` table with the columns `institute`, `branch`, `quota`,
  `seatType`, `gender`, `orank` and `crank`;
- an `institutes` table with the columns `institute` and `instituteType`.

The files are opened read-only. This package does not ship any databases.

The valid years are 2016 to 2024. Each year has its own number of rounds:

| Years               | Rounds |
|---------------------|--------|
| 2016                | 1–6    |
| 2017, 2018, 2019    | 1–7    |
| 2020 to 2023        | 1–6    |
| 2024                | 1–5    |

## Installation

```
pip install .
```

## Command line

```
orcrank --help
orcrank --year 2023 --round 6
orcrank --root path/to/db --year 2022 --round 3 \
    --branch "Computer Science and Engineering" --gender Gender-Neutral \
    --closing 1 5000 --sort closing-descending
```

These are the options:

- `--root DIR`: the directory that holds the databases. The default is `db`.
- `--year YEAR` and `--round ROUND`: the dataset to load. If either one is
  missing, the command prints `No dataset selected.` and exits with status 1.
  A round outside the range for its year is a usage error.
- `--sort`: one of `opening-ascending`, `opening-descending`,
  `closing-ascending` or `closing-descending`. The default is
  `closing-ascending`. Rows with equal ranks keep the order they have in the
  database.
- `--branch`, `--quota`, `--seat-type`, `--gender`, `--institute-kind` and
  `--institute NAME`: show only the named values. Each option may be
  repeated. A name that does not occur in the data is a usage error.
- `--opening MIN MAX` and `--closing MIN MAX`: the allowed rank range, with
  both ends included. The range must be ordered and must lie between 0 and
  the largest rank in the data.

The matching rows are printed as an aligned text table. If the database
cannot be read, the command prints an error to stderr and exits with
status 1.

## Library use

```python
from orcrank.dataset import Dataset
from orcrank.options import Options
from orcrank.rank_range import RankRange
from orcrank.sort import Sort

dataset = Dataset(root="db")
dataset.load(Options(year=2023, round=6))
dataset.sort(Sort.default())

dataset.filters.gender["Female-only (including Supernumerary)"] = False
dataset.filters.closing = RankRange(1, 10000)

for entry in dataset.entries():
    print(entry.institute, entry.branch, entry.opening_rank, entry.closing_rank)
```

- `orcrank.options`: `Options(year, round)`, `valid_years()`,
  `valid_rounds(year)` and `Options.db_path(root)`. `valid_rounds` raises
  `ValueError` for an unknown year. `db_path` raises `ValueError` unless
  both the year and the round are set.
- `orcrank.dataset.Dataset`: `load(options)` reads the chosen database. It
  does nothing if the same options are already loaded. Errors from `sqlite3`
  propagate to the caller. `sort(sort)` orders the entries in place, and the
  sort is stable. `entries()` yields the entries that pass `filters`.
  `is_loaded()` reports whether a database has been read.
- `orcrank.filters.Filters`: loading fills the `branch`, `quota`,
  `seat_type` and `gender` maps with every value set to `True`. It also fills
  `institute_kinds`, which maps each kind to `True`, and `institutes`, which
  maps each kind to its institutes with every value set to `True`. The
  `opening` and `closing` ranges, and their `opening_bounds` and
  `closing_bounds`, start at `RankRange(0, largest rank)`. Set a flag to
  `False` or narrow a range to hide rows. An entry whose institute is not
  listed in the `institutes` table is never shown. `matches()` raises
  `KeyError` for a column value that the filters do not know.
- `orcrank.rank_range.RankRange(start, end)`: an inclusive range. A range
  whose `start` is past its `end` is empty, and all empty ranges compare
  equal. It supports `in` and iteration.
- `orcrank.sort.Sort`: the four orderings. `str()` gives their labels, for
  example `Ascending (CR)`.
- `orcrank.entry.Entry`: one row, with the fields `institute`, `branch`,
  `quota`, `seat_type`, `gender`, `opening_rank` and `closing_rank`.

## What it does not do

This package has no graphical or interactive interface. You make your
selections through command-line options or in code, and the results are
printed once as plain text. It does not download or build the rank databases.

## Development

```
pip install -e .[test]
pytest
```
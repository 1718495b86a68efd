"""Load, filter and sort JoSAA opening and closing rank datasets from SQLite."""

__version__ = "0.1.0"
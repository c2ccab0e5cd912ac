"""Shared constants for the name-frequency index."""

from __future__ import annotations

# Character stored on the root node; never part of a real key.
ROOT_CHAR = ""

# Column at which the "(category:weight, ...)" list starts in enumeration output.
KEY_FIELD_WIDTH = 20

# Candidate dataset files, tried in order after an explicit path.
DATA_SEARCH_PATHS: list[str] = [
    "names.csv",
    "names.txt",
    "NationalNames.csv",
]

DATA_ENV_VAR = "NAMEFREQ_DATA"

# Fallback rows used when no dataset file is found: (name, gender, count).
# fmt: off
SAMPLE_ROWS: list[tuple[str, str, int]] = [
    ("Alice",   "F", 105),
    ("Alicia",  "F",  88),
    ("Alex",    "M",  61),
    ("Alex",    "F",  12),
    ("Sam",     "F", 276),
    ("Sam",     "M",  51),
    ("Samuel",  "M", 270),
    ("Samantha","F", 190),
    ("Sara",    "F", 140),
    ("Sarah",   "F", 215),
    ("Jordan",  "M",  98),
    ("Jordan",  "F",  43),
]
# fmt: on

"""Name-count dataset loader that builds the frequency trie."""

from __future__ import annotations

import csv
import logging
import os
from collections.abc import Iterable

from namefreq.constants import DATA_ENV_VAR, DATA_SEARCH_PATHS, KEY_FIELD_WIDTH, SAMPLE_ROWS
from namefreq.trie import Trie

log = logging.getLogger("namefreq")


# Header names accepted for each column, lower-cased.
_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "firstname", "first_name"),
    "gender": ("gender", "sex"),
    "count": ("count", "number", "occurrences"),
}


def _header_columns(fields: list[str]) -> tuple[int, int, int] | None:
    """Indexes of the name, gender and count columns if ``fields`` is a header."""
    labels = [x.strip().lower() for x in fields]
    found: list[int] = []
    for aliases in _COLUMN_ALIASES.values():
        idx = next((i for i, label in enumerate(labels) if label in aliases), None)
        if idx is None:
            return None
        found.append(idx)
    return found[0], found[1], found[2]


def read_rows(path: str) -> list[tuple[str, str, int]]:
    """Parse ``name, gender, count`` rows from a delimited text file.

    The delimiter is sniffed from the first few lines (comma by default).
    A header naming Name/Gender/Count columns selects those columns, so
    wider layouts such as ``Id,Name,Year,Gender,Count`` load too; without
    one each row must have exactly three fields.  Rows whose count is not
    an integer are skipped.
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        try:
            dialect = csv.Sniffer().sniff(sample, delimiters=",;\t|")
        except csv.Error:
            dialect = csv.excel

        columns: tuple[int, int, int] | None = None
        width = 3
        seen_first = False
        rows: list[tuple[str, str, int]] = []
        for lineno, fields in enumerate(csv.reader(f, dialect), start=1):
            if not fields or all(not x.strip() for x in fields):
                continue
            if not seen_first:
                seen_first = True
                columns = _header_columns(fields)
                if columns is not None:
                    width = len(fields)
                    log.debug("%s: header columns %s", path, columns)
                    continue
            if len(fields) != width:
                log.debug("%s:%d: expected %d fields, got %d -- skipped", path, lineno, width, len(fields))
                continue
            i_name, i_gender, i_count = columns or (0, 1, 2)
            name, gender, count = (fields[i].strip() for i in (i_name, i_gender, i_count))
            try:
                rows.append((name, gender, int(count)))
            except ValueError:
                log.debug("%s:%d: non-integer count %r -- skipped", path, lineno, count)
        return rows


def to_frequencies(rows: Iterable[tuple[str, str, int]]) -> list[tuple[str, str, float]]:
    """Turn counts into ``count / total`` triples.

    ``total`` is taken over every row of every category.  Names and genders
    are folded to lower case first, so repeated pairs that differ only in
    case (or in year, for multi-year files) are summed; output keeps
    first-seen order.
    """
    counts: dict[tuple[str, str], int] = {}
    for name, gender, count in rows:
        k = (name.strip().lower(), gender.strip().lower())
        counts[k] = counts.get(k, 0) + count

    total = sum(counts.values())
    if not total:
        return []
    return [(name, gender, count / total) for (name, gender), count in counts.items()]


class NameDataset:
    """Name-frequency table with trie-backed lookup and prefix completion."""

    def __init__(self, data_path: str | None = None, width: int = KEY_FIELD_WIDTH):
        self.trie = Trie()
        self.width = width
        self.total = 0
        self.source: str | None = None
        self._load(data_path)

    def _load(self, data_path: str | None) -> None:
        search_paths: list[str] = []
        if data_path:
            search_paths.append(data_path)
        search_paths.extend(DATA_SEARCH_PATHS)
        env_path = os.environ.get(DATA_ENV_VAR)
        if env_path:
            search_paths.append(env_path)

        for path in search_paths:
            if not os.path.exists(path):
                continue
            try:
                rows = read_rows(path)
            except OSError as exc:
                log.warning("Could not read %s: %s", path, exc)
                continue
            triples = to_frequencies(rows)
            if triples:
                self._build(rows, triples)
                self.source = path
                log.info("Loaded %s names from %s", f"{len(self.trie):,}", path)
                return

        log.warning("No name dataset found -- using built-in sample rows.")
        log.warning("Pass --data or set %s to a name,gender,count file.", DATA_ENV_VAR)
        self._build(SAMPLE_ROWS, to_frequencies(SAMPLE_ROWS))
        self.source = "built-in"

    def _build(
        self,
        rows: list[tuple[str, str, int]],
        triples: list[tuple[str, str, float]],
    ) -> None:
        self.total = sum(count for _, _, count in rows)
        for name, gender, freq in triples:
            self.trie.insert(name, gender, freq)

    def lookup(self, name: str) -> dict[str, float] | None:
        return self.trie.search(name)

    def complete(self, prefix: str) -> list[str]:
        return self.trie.enumerate_prefix(prefix, self.width)

    def __contains__(self, name: str) -> bool:
        return name in self.trie

    def __len__(self) -> int:
        return len(self.trie)

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

_LINE_SPLIT_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class RawTable:
    """Rectangular view of a parsed export.

    Rows shorter than the first row are right-padded with empty strings so
    that positional lookups never fail on trailing commas.
    """

    rows: Tuple[Tuple[str, ...], ...] = ()

    @property
    def headers(self) -> Tuple[str, ...]:
        return self.rows[0] if self.rows else ()

    @property
    def width(self) -> int:
        return len(self.headers)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> Tuple[str, ...]:
        return self.rows[index]

    def cell(self, row_index: int, column_index: int) -> str:
        row = self.rows[row_index]
        return row[column_index] if column_index < len(row) else ""


def _unquote(value: str) -> str:
    if value.startswith('"') and value.endswith('"'):
        value = value[1:-1].replace('""', '"')
    return value.strip()


def parse_line(line: str) -> List[str]:
    """Split one line on commas that are not inside double quotes."""
    cells: List[str] = []
    start = 0
    in_quotes = False

    for index, char in enumerate(line):
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            cells.append(_unquote(line[start:index]))
            start = index + 1

    # An unclosed quote leaves the rest of the line in the last cell.
    cells.append(_unquote(line[start:]))
    return cells


def parse_table(content: str) -> RawTable:
    text = (content or "").lstrip("\ufeff")
    lines = [line for line in _LINE_SPLIT_RE.split(text) if line.strip()]
    if not lines:
        return RawTable()

    parsed = [parse_line(line) for line in lines]
    width = len(parsed[0])
    rows = tuple(tuple(row + [""] * (width - len(row))) for row in parsed)
    return RawTable(rows=rows)

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .config import FOOTER_PREFIX, HEADER_MARKERS, HEADER_SCAN_LIMIT, MAX_MARKS_OFFSET, STUDENT_OFFSET
from .numbers import parse_number
from .parser import RawTable

_NON_NUMERIC_RE = re.compile(r"[^\d.]", re.ASCII)


@dataclass(frozen=True)
class Assignment:
    name: str
    total_marks: str
    source_column_index: int

    @property
    def total_marks_value(self) -> float:
        return float(parse_number(self.total_marks) or 0.0)


def locate_header_row(table: RawTable, markers: Sequence[str] = HEADER_MARKERS, limit: int = HEADER_SCAN_LIMIT) -> int:
    """Return the index of the student/assignment header row.

    Exports pasted from the browser often carry title or metadata rows of
    unpredictable length above the real header, so the first ``limit`` rows
    are searched for a first cell containing one of ``markers``.
    """
    for index in range(min(len(table), limit)):
        first_cell = (table[index][0] if table[index] else "").strip()
        if any(marker in first_cell for marker in markers):
            return index
    return 0


def clean_max_marks(value: str) -> str:
    return _NON_NUMERIC_RE.sub("", value or "")


def extract_assignments(table: RawTable, header_index: int) -> List[Assignment]:
    """Return every column with a header and a numeric max-marks cell."""
    max_marks_index = header_index + MAX_MARKS_OFFSET
    if len(table) <= max_marks_index:
        return []

    header_row = table[header_index]
    assignments: List[Assignment] = []
    for column in range(1, len(header_row)):
        name = header_row[column]
        total_marks = clean_max_marks(table.cell(max_marks_index, column))
        if name and total_marks and parse_number(total_marks) is not None:
            assignments.append(Assignment(name=name, total_marks=total_marks, source_column_index=column))
    return assignments


def is_student_row(row: Sequence[str]) -> bool:
    student_name = row[0] if row else ""
    return bool(student_name) and not student_name.startswith(FOOTER_PREFIX)


def student_rows(table: RawTable, header_index: int) -> Iterator[Tuple[str, ...]]:
    """Yield data rows below the category row that name a student."""
    for row in table.rows[header_index + STUDENT_OFFSET :]:
        if is_student_row(row):
            yield row


def cell_value(row: Sequence[str], column: int) -> str:
    return (row[column] if column < len(row) else "").strip()

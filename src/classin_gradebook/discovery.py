from __future__ import annotations

from typing import Dict, List

from .config import BLANK_MARKER, CATEGORY_LABELS, STANDARD_GRADES
from .numbers import is_number
from .parser import RawTable, parse_table
from .structure import cell_value, extract_assignments, locate_header_row, student_rows


def discover_statuses_in_table(table: RawTable) -> List[str]:
    """Return distinct statuses found in assignment columns.

    Numbers and standard grade letters are skipped, leaving the free-text
    marks a teacher may want to give a score.
    """
    if len(table) < 2:
        return []

    header_index = locate_header_row(table)
    assignments = extract_assignments(table, header_index)
    found: Dict[str, None] = {}

    for row in student_rows(table, header_index):
        for assignment in assignments:
            raw = cell_value(row, assignment.source_column_index)
            if raw == assignment.name.strip():
                continue
            if raw == BLANK_MARKER or raw in CATEGORY_LABELS or raw.upper() in STANDARD_GRADES:
                continue
            if raw and not is_number(raw):
                found.setdefault(raw, None)

    return list(found)


def discover_statuses(content: str) -> List[str]:
    return discover_statuses_in_table(parse_table(content))

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence

from .config import BLANK_MARKER, STANDARD_GRADES
from .mapping import GradeMapping, lookup_score
from .numbers import parse_number
from .parser import RawTable
from .structure import Assignment, cell_value, student_rows


class ColumnKind(str, Enum):
    PURE_STATUS = "pure_status"
    MIXED = "mixed"


@dataclass(frozen=True)
class ColumnStat:
    kind: ColumnKind
    average_score: float = 0.0

    @property
    def is_mixed(self) -> bool:
        return self.kind is ColumnKind.MIXED


def classify_column(cells: Sequence[str], assignment: Assignment, grade_mapping: GradeMapping) -> ColumnStat:
    """Classify one assignment column from its student cells.

    A column is mixed once it holds a literal number or a standard letter
    grade anywhere; otherwise it only carries free-text statuses. Mapped
    statuses feed the average but never make a column mixed on their own.
    """
    has_numeric = False
    has_grade = False
    values: List[float] = []
    total_marks = assignment.total_marks_value
    own_name = assignment.name.strip()

    for raw in cells:
        raw = raw.strip()
        if not raw or raw == BLANK_MARKER or raw == own_name:
            continue

        numeric = parse_number(raw)
        if numeric is not None:
            has_numeric = True
            values.append(numeric)
            continue

        if raw.upper() in STANDARD_GRADES:
            has_grade = True

        score = lookup_score(grade_mapping, raw, total_marks)
        if score is not None:
            values.append(score)

    kind = ColumnKind.MIXED if (has_numeric or has_grade) else ColumnKind.PURE_STATUS
    average = sum(values) / len(values) if values else 0.0
    return ColumnStat(kind=kind, average_score=average)


def classify_columns(
    table: RawTable,
    header_index: int,
    assignments: Sequence[Assignment],
    grade_mapping: GradeMapping,
) -> Dict[str, ColumnStat]:
    rows = list(student_rows(table, header_index))
    stats: Dict[str, ColumnStat] = {}
    for assignment in assignments:
        cells = [cell_value(row, assignment.source_column_index) for row in rows]
        stats[assignment.name] = classify_column(cells, assignment, grade_mapping)
    return stats

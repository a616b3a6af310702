from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

import numpy as np

from .classify import ColumnStat, classify_columns
from .dates import DateLike, assign_dates, format_date, is_future_start, parse_start_date, working_days
from .mapping import GradeMapping
from .models import TargetRecord
from .numbers import format_mark
from .parser import RawTable, parse_table
from .resolve import resolve_mark
from .structure import Assignment, cell_value, extract_assignments, locate_header_row, student_rows

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    records: List[TargetRecord] = field(default_factory=list)
    assignments: List[Assignment] = field(default_factory=list)
    column_stats: Dict[str, ColumnStat] = field(default_factory=dict)
    header_row_index: int = 0
    student_count: int = 0
    date_pool: List[str] = field(default_factory=list)
    future_start: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def expected_rows(self) -> int:
        return self.student_count * len(self.assignments)


def convert_table(
    table: RawTable,
    start_date: DateLike,
    grade_mapping: GradeMapping,
    rng: Optional[np.random.Generator] = None,
    today: Optional[date] = None,
) -> ConversionResult:
    """Turn a parsed export into one record per student and assignment."""
    start = parse_start_date(start_date)
    today = today or date.today()
    future_start = is_future_start(start, today)
    if future_start:
        logger.warning("Start date %s is after today; every assignment gets that single date", start)

    header_index = locate_header_row(table)
    assignments = extract_assignments(table, header_index)
    logger.info("Header row at %d, %d assignment column(s) detected", header_index, len(assignments))
    if not assignments:
        logger.warning("No assignment columns with numeric max marks were found")
        return ConversionResult(header_row_index=header_index, future_start=future_start)

    stats = classify_columns(table, header_index, assignments, grade_mapping)
    dates = assign_dates(assignments, start, today, rng=rng)
    rows = list(student_rows(table, header_index))

    records: List[TargetRecord] = []
    for row in rows:
        student_name = row[0]
        for assignment in assignments:
            raw = cell_value(row, assignment.source_column_index)
            # A cell repeating the header means the rows are misaligned.
            if raw == assignment.name.strip():
                continue
            total_marks = assignment.total_marks_value
            records.append(
                TargetRecord(
                    student_name=student_name,
                    assignment_name=assignment.name,
                    assignment_date=dates.get(assignment.name, format_date(start)),
                    marks=resolve_mark(raw, total_marks, stats[assignment.name], grade_mapping),
                    total_marks_possible=format_mark(total_marks),
                )
            )

    logger.info("Converted %d student(s) into %d record(s)", len(rows), len(records))
    return ConversionResult(
        records=records,
        assignments=assignments,
        column_stats=stats,
        header_row_index=header_index,
        student_count=len(rows),
        date_pool=[format_date(day) for day in working_days(start, today)],
        future_start=future_start,
    )


def convert(
    content: str,
    start_date: DateLike,
    grade_mapping: GradeMapping,
    rng: Optional[np.random.Generator] = None,
    today: Optional[date] = None,
) -> ConversionResult:
    return convert_table(parse_table(content), start_date, grade_mapping, rng=rng, today=today)

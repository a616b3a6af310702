from __future__ import annotations

from typing import Optional

from .classify import ColumnStat
from .config import (
    BLANK_MARKER,
    LATE_SUBMISSION_PERCENT,
    STATUS_LATE_SUBMITTED,
    STATUS_NOT_SUBMITTED,
    STATUS_SUBMITTED,
)
from .mapping import GradeMapping, lookup_score
from .numbers import format_mark, parse_number


def _status_rule(raw: str, total_marks: float, stat: ColumnStat) -> Optional[float]:
    if raw == STATUS_NOT_SUBMITTED:
        return 0.0
    if stat.is_mixed:
        # Submitted without a grade counts as the class average for the column.
        if raw == STATUS_SUBMITTED:
            return stat.average_score
        return None

    if raw == STATUS_SUBMITTED:
        return total_marks
    if raw == STATUS_LATE_SUBMITTED:
        return (LATE_SUBMISSION_PERCENT / 100) * total_marks
    return None


def resolve_mark(raw: str, total_marks: float, stat: ColumnStat, grade_mapping: GradeMapping) -> str:
    """Resolve one cell to a mark string; an empty string records no mark.

    Precedence: the explicit ``-`` blank, then the submission statuses whose
    meaning depends on the column kind, then a literal number, then the
    percentage mapping.
    """
    raw = (raw or "").strip()
    if raw == BLANK_MARKER:
        return ""

    ruled = _status_rule(raw, total_marks, stat)
    if ruled is not None:
        return format_mark(ruled)

    numeric = parse_number(raw)
    if numeric is not None:
        return format_mark(numeric)

    score = lookup_score(grade_mapping, raw, total_marks)
    return format_mark(score) if score is not None else ""

from __future__ import annotations

import re
from datetime import date
from typing import Iterable

import pandas as pd

from .config import EXPORT_PREFIX, ISO_DATE_FORMAT, OUTPUT_COLUMNS
from .models import TargetRecord

SAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9._-]+")


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _record_line(record: TargetRecord) -> str:
    fields = [
        _quote(record.student_name),
        _quote(record.assignment_name),
        # Left unquoted so spreadsheet tools read it as a date, not text.
        record.assignment_date,
        _quote(record.category),
        record.marks,
        record.total_marks_possible,
    ]
    return ",".join(fields)


def generate_csv_content(records: Iterable[TargetRecord]) -> str:
    lines = [",".join(OUTPUT_COLUMNS)]
    lines.extend(_record_line(record) for record in records)
    return "\n".join(lines)


def records_to_frame(records: Iterable[TargetRecord]) -> pd.DataFrame:
    return pd.DataFrame([record.as_dict() for record in records], columns=OUTPUT_COLUMNS)


def sanitize_filename(name: str) -> str:
    """Reduce ``name`` to a bare ``.csv`` file name, falling back to the export prefix."""
    base = str(name or "").replace("\\", "/").rsplit("/", 1)[-1]
    stem = SAFE_FILENAME_RE.sub("_", base).strip("._")
    if stem.lower().endswith(".csv"):
        stem = stem[:-4].rstrip("._")
    return f"{stem or EXPORT_PREFIX}.csv"


def export_filename(start: date) -> str:
    return sanitize_filename(f"{EXPORT_PREFIX}_{start.strftime(ISO_DATE_FORMAT)}.csv")

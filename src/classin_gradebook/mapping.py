from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple

import pandas as pd

from .numbers import parse_number

GradeMapping = Mapping[str, str]

DEFAULT_GRADE_MAPPING: Dict[str, str] = {
    "A*": "100",
    "A": "90",
    "B": "80",
    "C": "70",
    "D": "60",
    "E": "50",
    "U": "0",
    "需订正": "50",
    "已补交": "60",
    "已订正": "80",
}

DEFAULT_NEW_STATUS_VALUE = "0"
EDITOR_COLUMNS = ["Status", "Percentage"]


def _clean_str(value: object) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def normalize_grade_mapping(mapping: Mapping[str, object]) -> Tuple[Dict[str, str], Dict[str, str]]:
    """Return (cleaned_mapping, invalid_entries).

    Keys are trimmed and uppercased to match how cells are looked up. Values
    are kept even when non-numeric; such entries resolve to a blank mark.
    """
    cleaned: Dict[str, str] = {}
    invalid: Dict[str, str] = {}

    for raw_key, raw_val in mapping.items():
        key = _clean_str(raw_key).upper()
        val = _clean_str(raw_val)
        if not key:
            invalid[_clean_str(raw_key)] = val
            continue
        cleaned[key] = val

    return cleaned, invalid


def percentage_of(value: Optional[str], total_marks: float) -> Optional[float]:
    """Convert a percentage string into a score out of ``total_marks``."""
    if not value:
        return None
    percentage = parse_number(value)
    if percentage is None:
        return None
    return (percentage / 100) * total_marks


def lookup_score(grade_mapping: GradeMapping, token: str, total_marks: float) -> Optional[float]:
    return percentage_of(grade_mapping.get(token.upper()), total_marks)


def propose_mapping_additions(statuses: Iterable[str], grade_mapping: GradeMapping) -> Dict[str, str]:
    """Return default entries for tokens the mapping does not know yet."""
    additions: Dict[str, str] = {}
    for status in statuses:
        key = status.upper()
        if key not in grade_mapping and key not in additions:
            additions[key] = DEFAULT_NEW_STATUS_VALUE
    return additions


def merge_mapping_additions(grade_mapping: GradeMapping, additions: Mapping[str, str]) -> Dict[str, str]:
    merged = dict(grade_mapping)
    for key, value in additions.items():
        merged.setdefault(key, value)
    return merged


def mapping_to_frame(grade_mapping: GradeMapping) -> pd.DataFrame:
    rows = [{"Status": key, "Percentage": value} for key, value in grade_mapping.items()]
    return pd.DataFrame(rows, columns=EDITOR_COLUMNS)


def mapping_from_frame(frame: pd.DataFrame) -> Dict[str, str]:
    """Read the key/value editor back into a mapping, later rows winning."""
    if frame is None or frame.empty:
        return {}
    missing = [col for col in EDITOR_COLUMNS if col not in frame.columns]
    if missing:
        raise ValueError(f"Mapping table missing columns: {missing}")

    raw = dict(zip(frame["Status"].tolist(), frame["Percentage"].tolist()))
    cleaned, _ = normalize_grade_mapping(raw)
    return cleaned

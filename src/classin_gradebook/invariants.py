from typing import Dict, List, Optional

import pandas as pd

from .config import OUTPUT_COLUMNS


def check_required_columns(df: pd.DataFrame) -> Dict[str, bool]:
    return {col: col in df.columns for col in OUTPUT_COLUMNS}


def _marks(df: pd.DataFrame) -> pd.Series:
    return df["Marks"].fillna("").astype(str).str.strip()


def check_blank_marks(df: pd.DataFrame) -> int:
    return int((_marks(df) == "").sum())


def check_numeric_marks(df: pd.DataFrame) -> int:
    marks = _marks(df)
    filled = marks[marks != ""]
    return int(pd.to_numeric(filled, errors="coerce").isna().sum())


def check_marks_over_total(df: pd.DataFrame) -> int:
    marks = pd.to_numeric(_marks(df), errors="coerce")
    totals = pd.to_numeric(df["Total Marks Possible"], errors="coerce")
    return int(((marks.notna()) & (totals.notna()) & (marks > totals)).sum())


def run_invariants(df: pd.DataFrame, expected_rows: Optional[int] = None) -> List[Dict[str, object]]:
    results = []

    required = check_required_columns(df)
    missing_required = [col for col, present in required.items() if not present]
    results.append(
        {
            "name": "required_columns",
            "ok": len(missing_required) == 0,
            "detail": ", ".join(missing_required) if missing_required else "all present",
        }
    )
    if missing_required:
        return results

    if expected_rows is not None:
        results.append(
            {
                "name": "record_count",
                "ok": len(df) == expected_rows,
                "detail": f"{len(df)} of {expected_rows}",
            }
        )

    blanks = check_blank_marks(df)
    results.append({"name": "blank_marks", "ok": blanks == 0, "detail": blanks})

    non_numeric = check_numeric_marks(df)
    results.append({"name": "non_numeric_marks", "ok": non_numeric == 0, "detail": non_numeric})

    over_total = check_marks_over_total(df)
    results.append({"name": "marks_over_total", "ok": over_total == 0, "detail": over_total})

    return results

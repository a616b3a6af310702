from typing import Dict

import pandas as pd

from .config import OUTPUT_COLUMNS


def _cast_numeric(df: pd.DataFrame) -> pd.DataFrame:
    numeric = df.copy()
    numeric["Marks"] = pd.to_numeric(numeric["Marks"], errors="coerce")
    numeric["Total Marks Possible"] = pd.to_numeric(numeric["Total Marks Possible"], errors="coerce")
    return numeric


def _percent(marks: pd.Series, totals: pd.Series) -> pd.Series:
    return marks / totals.where(totals > 0) * 100


def overall_summary(df: pd.DataFrame) -> Dict[str, float]:
    if df.empty:
        return {"records": 0, "students": 0, "assignments": 0, "blank_marks": 0, "avg_percent": float("nan")}

    data = _cast_numeric(df)
    return {
        "records": len(data),
        "students": data["Student Name"].nunique(),
        "assignments": data["Assignment Name"].nunique(),
        "blank_marks": int(data["Marks"].isna().sum()),
        "avg_percent": _percent(data["Marks"], data["Total Marks Possible"]).mean(),
    }


def assignment_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Per-assignment counts and averages, in first-seen assignment order."""
    columns = ["Assignment Name", "Assignment Date", "Total Marks Possible", "graded", "blank", "avg_marks", "avg_percent"]
    if df.empty:
        return pd.DataFrame(columns=columns)

    data = _cast_numeric(df[OUTPUT_COLUMNS])
    rows = []
    for name, subset in data.groupby("Assignment Name", sort=False):
        marks = subset["Marks"]
        rows.append(
            {
                "Assignment Name": name,
                "Assignment Date": subset["Assignment Date"].iloc[0],
                "Total Marks Possible": subset["Total Marks Possible"].iloc[0],
                "graded": int(marks.notna().sum()),
                "blank": int(marks.isna().sum()),
                "avg_marks": marks.mean(),
                "avg_percent": _percent(marks, subset["Total Marks Possible"]).mean(),
            }
        )
    return pd.DataFrame(rows, columns=columns)


def mark_distribution(df: pd.DataFrame, bins: int = 10) -> pd.DataFrame:
    """Histogram of marks as a percentage of the assignment total."""
    if df.empty:
        return pd.DataFrame(columns=["bin", "count"])

    data = _cast_numeric(df)
    metric = _percent(data["Marks"], data["Total Marks Possible"]).dropna().clip(lower=0, upper=100)
    if metric.empty:
        return pd.DataFrame(columns=["bin", "count"])

    edges = [100 * step / bins for step in range(bins + 1)]
    counts = pd.cut(metric, bins=edges, include_lowest=True)
    bucket = counts.value_counts().sort_index()
    labels = [f"{edges[i]:.0f}-{edges[i + 1]:.0f}" for i in range(bins)]
    return pd.DataFrame({"bin": labels, "count": bucket.tolist()})

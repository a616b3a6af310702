#!/usr/bin/env python3
"""Generate a synthetic ClassIn gradebook export for demos.

Usage:
    python tools/generate_sample_export.py --output data/synthetic_export.csv --students 30 --assignments 8 --seed 42

The export mimics what teachers paste out of ClassIn: a title row, the
student/assignment header, a full-marks row, a category row, one row per
student mixing scores, letter grades and submission statuses, and a footer.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, List

import numpy as np

GRADE_LETTERS = ["A*", "A", "B", "C", "D", "E", "U"]
STATUSES = ["已提交", "未提交", "已补交", "需订正", "已订正"]
FULL_MARKS = [10, 20, 25, 50, 100]
COLUMN_STYLES = ["score", "grade", "status"]


def _csv_cell(value: str) -> str:
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def _student_cell(rng: np.random.Generator, style: str, full_marks: int) -> str:
    roll = rng.random()
    if roll < 0.05:
        return "-"
    if style == "status":
        return str(rng.choice(STATUSES, p=[0.6, 0.1, 0.1, 0.1, 0.1]))
    if roll < 0.15:
        return str(rng.choice(["已提交", "未提交"]))
    if style == "grade":
        return str(rng.choice(GRADE_LETTERS))
    score = float(np.clip(rng.normal(0.75 * full_marks, 0.15 * full_marks), 0, full_marks))
    return f"{round(score * 2) / 2:g}"


def generate_sample_export(n_students: int = 30, n_assignments: int = 8, seed: int = 42) -> str:
    if n_students < 1 or n_assignments < 1:
        raise ValueError("Need at least one student and one assignment")

    rng = np.random.default_rng(seed)
    names = [f"Assignment {i}" for i in range(1, n_assignments + 1)]
    full_marks = [int(rng.choice(FULL_MARKS)) for _ in names]
    styles = [str(rng.choice(COLUMN_STYLES)) for _ in names]

    lines: List[str] = [
        "ClassIn Gradebook Export",
        ",".join(["Class: Synthetic", *[""] * n_assignments]),
        ",".join(["学生姓名", *names, "备注"]),
        ",".join(["满分", *[f"{marks}分" for marks in full_marks], ""]),
        ",".join(["成绩类别", *["Coursework"] * n_assignments, ""]),
    ]
    for idx in range(1, n_students + 1):
        cells = [_student_cell(rng, style, marks) for style, marks in zip(styles, full_marks)]
        lines.append(",".join([_csv_cell(f"Student {idx:03d}"), *cells, ""]))
    lines.append(",".join(["--- End of report ---", *[""] * n_assignments]))
    return "\n".join(lines) + "\n"


def write_sample_export(output_path: Path, n_students: int = 30, n_assignments: int = 8, seed: int = 42) -> str:
    content = generate_sample_export(n_students=n_students, n_assignments=n_assignments, seed=seed)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return content


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a synthetic ClassIn export for demos")
    parser.add_argument("--output", type=Path, default=Path("data/synthetic_export.csv"), help="Where to write the export")
    parser.add_argument("--students", type=int, default=30, help="Number of synthetic students")
    parser.add_argument("--assignments", type=int, default=8, help="Number of assignment columns")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args(list(argv) if argv is not None else None)

    write_sample_export(args.output, n_students=args.students, n_assignments=args.assignments, seed=args.seed)
    print(f"Synthetic export written to {args.output}")


if __name__ == "__main__":
    main()

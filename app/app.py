"""Streamlit UI for converting ClassIn gradebook exports.

The page only gathers inputs (file content, start date, score mapping) and
renders results; all conversion logic lives in ``src/classin_gradebook``.
"""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from app.sample_data import SAMPLE_FILENAME, load_sample_export  # noqa: E402
from app.ui import AppShell, Step, download_csv_text, kpi_row, section_header, stepper, style_fig  # noqa: E402
from classin_gradebook import ConversionResult, convert  # noqa: E402
from classin_gradebook.dates import format_date, is_future_start  # noqa: E402
from classin_gradebook.discovery import discover_statuses  # noqa: E402
from classin_gradebook.export import export_filename, generate_csv_content, records_to_frame  # noqa: E402
from classin_gradebook.invariants import run_invariants  # noqa: E402
from classin_gradebook.logging_utils import setup_logging  # noqa: E402
from classin_gradebook.mapping import (  # noqa: E402
    DEFAULT_GRADE_MAPPING,
    mapping_from_frame,
    mapping_to_frame,
    merge_mapping_additions,
    propose_mapping_additions,
)
from classin_gradebook.metrics import assignment_summary, mark_distribution, overall_summary  # noqa: E402
from classin_gradebook.plots import assignment_average_bar, mark_distribution_chart  # noqa: E402

st.set_page_config(page_title="ClassIn Gradebook Converter", layout="wide", page_icon="📝")

setup_logging()
logger = logging.getLogger(__name__)

PREVIEW_ROWS = 10
UPLOAD_TYPES = ["csv", "txt"]


def _init_state() -> None:
    defaults = {
        "raw_content": None,
        "source_label": None,
        "grade_mapping": dict(DEFAULT_GRADE_MAPPING),
        "mapping_base": dict(DEFAULT_GRADE_MAPPING),
        "mapping_version": 0,
        "date_seed": int(np.random.default_rng().integers(1_000_000)),
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


def _read_upload(upload) -> str:
    return upload.getvalue().decode("utf-8", errors="replace")


def _load_source(sample_clicked: bool, upload) -> Tuple[Optional[str], Optional[str]]:
    if sample_clicked:
        return load_sample_export(), SAMPLE_FILENAME
    if upload is not None:
        return _read_upload(upload), upload.name
    return st.session_state.get("raw_content"), st.session_state.get("source_label")


def _register_source(content: str, label: str) -> None:
    """Store a new file and extend the mapping with its unseen statuses."""
    st.session_state["raw_content"] = content
    st.session_state["source_label"] = label

    statuses = discover_statuses(content)
    additions = propose_mapping_additions(statuses, st.session_state["grade_mapping"])
    if additions:
        logger.info("Adding %d new status(es) to the score mapping: %s", len(additions), ", ".join(additions))
        st.session_state["grade_mapping"] = merge_mapping_additions(st.session_state["grade_mapping"], additions)
        st.session_state["mapping_base"] = dict(st.session_state["grade_mapping"])
        st.session_state["mapping_version"] += 1


def _date_controls(today: date) -> date:
    st.sidebar.subheader("1) Settings")
    start = st.sidebar.date_input("Start date", value=today, format="YYYY-MM-DD")
    if is_future_start(start, today):
        st.sidebar.warning("Start date is in the future. Assignments will all be assigned to this single date.")
        st.sidebar.caption(f"Generation range: single date {format_date(start)}")
    else:
        st.sidebar.caption(f"Generation range: random working days between {format_date(start)} and {format_date(today)} (today)")

    if st.sidebar.button("Reshuffle dates"):
        st.session_state["date_seed"] = int(np.random.default_rng().integers(1_000_000))
    return start


def _mapping_editor() -> Dict[str, str]:
    section_header(
        "Score mapping",
        "Text marks (A, B, 需订正, ...) convert using these values. Values are PERCENTAGES of each assignment's total marks.",
    )
    edited = st.data_editor(
        mapping_to_frame(st.session_state["mapping_base"]),
        num_rows="dynamic",
        use_container_width=True,
        hide_index=True,
        key=f"mapping_editor:{st.session_state['mapping_version']}",
    )
    try:
        return mapping_from_frame(edited)
    except ValueError as exc:
        st.error(str(exc))
        return dict(st.session_state["grade_mapping"])


def _ingestion_stepper(content: Optional[str], result: Optional[ConversionResult]) -> None:
    loaded = content is not None
    converted = result is not None and not result.is_empty
    stepper(
        [
            Step("Settings", "Pick the start date", "done"),
            Step("Upload", "ClassIn export loaded" if loaded else "Waiting for a file", "done" if loaded else "active"),
            Step("Preview", "Records ready" if converted else "Nothing to preview yet", "done" if converted else ("active" if loaded else "waiting")),
        ]
    )


def _render_checks(frame: pd.DataFrame, result: ConversionResult) -> None:
    checks: List[Dict[str, object]] = run_invariants(frame, expected_rows=result.expected_rows)
    with st.expander("Output checks", expanded=False):
        st.dataframe(pd.DataFrame(checks), use_container_width=True, hide_index=True)


def _render_summary(frame: pd.DataFrame) -> None:
    summary = overall_summary(frame)
    avg_percent = summary["avg_percent"]
    kpi_row(
        [
            {"label": "Records", "value": summary["records"]},
            {"label": "Students", "value": summary["students"]},
            {"label": "Assignments", "value": summary["assignments"]},
            {"label": "Blank marks", "value": summary["blank_marks"]},
            {"label": "Average", "value": f"{avg_percent:.1f}%" if pd.notna(avg_percent) else "-"},
        ]
    )

    per_assignment = assignment_summary(frame)
    left, right = st.columns([3, 2])
    with left:
        st.plotly_chart(style_fig(assignment_average_bar(per_assignment)), use_container_width=True)
    with right:
        st.plotly_chart(style_fig(mark_distribution_chart(mark_distribution(frame))), use_container_width=True)
    st.dataframe(per_assignment, use_container_width=True, hide_index=True)


def _render_preview(result: ConversionResult, start: date) -> None:
    frame = records_to_frame(result.records)
    section_header("Preview & download", f"Found {len(frame)} records ready for export.")
    download_csv_text("Download CSV", generate_csv_content(result.records), export_filename(start))

    st.dataframe(frame.head(PREVIEW_ROWS), use_container_width=True, hide_index=True)
    if len(frame) > PREVIEW_ROWS:
        st.caption(f"...and {len(frame) - PREVIEW_ROWS} more rows")

    _render_checks(frame, result)
    _render_summary(frame)


def _render_empty_state() -> None:
    st.warning(
        "No valid data found. The uploaded file doesn't match the expected ClassIn format or contains no "
        "assignments with valid numeric full marks. Please check the file structure."
    )


def main():
    _init_state()
    shell = AppShell("ClassIn Gradebook Converter", "Turn a ClassIn gradebook export into a flat gradebook import file.")
    shell.header()

    today = date.today()
    start = _date_controls(today)

    st.sidebar.subheader("2) Upload source file")
    upload = st.sidebar.file_uploader("ClassIn export", type=UPLOAD_TYPES)
    sample_clicked = st.sidebar.button("Load sample export")

    content, label = _load_source(sample_clicked, upload)
    if content is not None and (label != st.session_state.get("source_label") or sample_clicked):
        _register_source(content, label)
    if label:
        st.sidebar.success(f"Loaded: {label}")

    grade_mapping = _mapping_editor()
    st.session_state["grade_mapping"] = grade_mapping

    result = None
    if content is not None:
        rng = np.random.default_rng(st.session_state["date_seed"])
        result = convert(content, start, grade_mapping, rng=rng, today=today)

    _ingestion_stepper(content, result)

    if result is None:
        st.info("Upload a ClassIn export or load the sample to get started.")
        return
    if result.is_empty:
        _render_empty_state()
        return
    _render_preview(result, start)


if __name__ == "__main__":
    main()

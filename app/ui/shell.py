from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import streamlit as st

ACCENT = "#4f46e5"
SUCCESS = "#16a34a"
WARNING = "#d97706"
MUTED = "#6b7280"

GLOBAL_CSS = f"""
<style>
section.main .block-container {{ padding: 1.5rem 2rem 2rem 2rem; max-width: 1300px; }}
.app-kpi {{
    border: 1px solid rgba(79,70,229,0.18);
    background: rgba(79,70,229,0.05);
    border-radius: 12px;
    padding: 0.8rem 1rem;
}}
.app-kpi .label {{ color: {MUTED}; font-size: 0.85rem; }}
.app-kpi .value {{ font-size: 1.35rem; font-weight: 700; }}
.app-stepper {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 0.6rem; margin-bottom: 1rem; }}
.app-step {{ border: 1px solid rgba(0,0,0,0.08); border-radius: 12px; padding: 0.7rem 0.9rem; }}
.app-step .title {{ font-weight: 600; }}
.app-step .status {{ color: {MUTED}; font-size: 0.85rem; }}
.app-step.active {{ border-color: {ACCENT}; }}
.app-step.done {{ border-color: {SUCCESS}; }}
.small-muted {{ color: {MUTED}; font-size: 0.9rem; }}
.section-header {{ font-weight: 700; font-size: 1.05rem; margin-bottom: 0.35rem; }}
</style>
"""


@dataclass
class Step:
    title: str
    description: str
    status: str  # waiting | active | done


def muted(text: str):
    st.markdown(f"<div class='small-muted'>{text}</div>", unsafe_allow_html=True)


def section_header(title: str, description: Optional[str] = None):
    st.markdown(f"<div class='section-header'>{title}</div>", unsafe_allow_html=True)
    if description:
        muted(description)


def kpi_row(items: Iterable[dict]):
    items = list(items)
    cols = st.columns(len(items)) if items else []
    for col, item in zip(cols, items):
        with col:
            st.markdown(
                f"""
                <div class='app-kpi'>
                    <div class='label'>{item.get('label', '')}</div>
                    <div class='value'>{item.get('value', '-')}</div>
                    <div class='small-muted'>{item.get('hint', '')}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )


def stepper(steps: List[Step]):
    blocks = []
    for step in steps:
        indicator = "•" if step.status == "waiting" else ("✔" if step.status == "done" else "➜")
        blocks.append(
            f"<div class='app-step {step.status}'>"
            f"<div class='title'>{indicator} {step.title}</div>"
            f"<div class='status'>{step.description}</div></div>"
        )
    st.markdown(f"<div class='app-stepper'>{''.join(blocks)}</div>", unsafe_allow_html=True)


class AppShell:
    def __init__(self, title: str, subtitle: Optional[str] = None):
        self.title = title
        self.subtitle = subtitle
        st.markdown(GLOBAL_CSS, unsafe_allow_html=True)

    def header(self):
        st.title(self.title)
        if self.subtitle:
            muted(self.subtitle)

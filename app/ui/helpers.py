from __future__ import annotations

from typing import Optional

import streamlit as st

from classin_gradebook.export import sanitize_filename


def download_csv_text(label: str, content: str, filename: str, disabled: bool = False) -> None:
    """Render a download button for CSV text, keyed by the file name."""
    safe_name = sanitize_filename(filename)
    st.download_button(
        label=label,
        data=content.encode("utf-8"),
        file_name=safe_name,
        mime="text/csv",
        key=f"dl:{safe_name}",
        disabled=disabled,
    )


def style_fig(fig, title: Optional[str] = None):
    fig.update_layout(
        title=title or fig.layout.title.text,
        margin=dict(t=60, r=24, b=40, l=24),
        font=dict(family="Inter, sans-serif", size=12),
    )
    return fig

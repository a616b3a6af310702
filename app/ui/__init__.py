from .helpers import download_csv_text, style_fig
from .shell import AppShell, Step, kpi_row, muted, section_header, stepper

__all__ = [
    "AppShell",
    "Step",
    "download_csv_text",
    "kpi_row",
    "muted",
    "section_header",
    "stepper",
    "style_fig",
]

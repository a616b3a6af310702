"""Convert ClassIn gradebook exports into flat gradebook import files."""

from .pipeline import ConversionResult, convert, convert_table

__all__ = ["ConversionResult", "convert", "convert_table"]

"""Output formatting modules."""

from .formatters import (
    format_connection_error,
    format_conversion,
    format_conversion_json,
    format_grade_json,
    format_grade_report,
    format_rate_not_found,
)

__all__ = [
    "format_connection_error",
    "format_conversion",
    "format_conversion_json",
    "format_grade_json",
    "format_grade_report",
    "format_rate_not_found",
]

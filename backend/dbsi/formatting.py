"""Formatting helpers for calculation values and report file names.

Matches how the values read on a compliance sheet: whole numbers without
decimals ('2500 m²'), fractional values with at most two decimals
('4.8 m'), booleans as 'Yes'/'No'.
"""

from __future__ import annotations

import re

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9]")


def format_number(value: float) -> str:
    """Format a number with at most two decimals and no trailing zeros."""
    if float(value).is_integer():
        return f"{value:.0f}"
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_value(value: bool | float | str, unit: str | None = None) -> str:
    """Format a threshold value, appending *unit* when given."""
    if isinstance(value, bool):
        text = "Yes" if value else "No"
    elif isinstance(value, int | float):
        text = format_number(value)
    else:
        text = value
    if unit == "%":
        return f"{text}%"
    return f"{text} {unit}" if unit else text


def sanitize_filename(name: str) -> str:
    """Strip every character outside ``[A-Za-z0-9]``."""
    return _UNSAFE_FILENAME_CHARS.sub("", name)


def report_filename(project_name: str, extension: str = "pdf") -> str:
    """Build the download name '{sanitized project name}_REPORT.{extension}'."""
    stem = sanitize_filename(project_name) or "PROJECT"
    return f"{stem}_REPORT.{extension.lstrip('.')}"

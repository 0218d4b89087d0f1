"""
Formatting utility functions
"""

import re
from datetime import date, datetime
from typing import Any

# YYYY-MM-DD, optionally followed by a time part
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$")


def format_date(date_value: Any, format_str: str = "%Y-%m-%d") -> str:
    """
    Format a date value as a string

    Args:
        date_value: Date value to format (string, datetime, or other)
        format_str: Format string for strftime

    Returns:
        Formatted date string or empty string if unset
    """
    if not date_value:
        return ""

    if isinstance(date_value, str):
        try:
            dt = datetime.fromisoformat(date_value.replace('Z', '+00:00'))
            return dt.strftime(format_str)
        except ValueError:
            return date_value

    if isinstance(date_value, (datetime, date)):
        return date_value.strftime(format_str)

    return str(date_value)


def format_cell(value: Any, date_format: str = "%Y-%m-%d", max_length: int = 60) -> str:
    """
    Display text for a single table cell

    Args:
        value: Raw record value (None shows as an empty cell)
        date_format: Format used for date values and ISO date strings
        max_length: Longer text is truncated

    Returns:
        Cell text
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (datetime, date)):
        return format_date(value, date_format)
    if isinstance(value, str) and ISO_DATE_RE.match(value.strip()):
        return truncate_text(format_date(value.strip(), date_format), max_length)
    return truncate_text(str(value), max_length)


def truncate_text(text: str, max_length: int = 50, ellipsis: str = "...") -> str:
    """
    Truncate text to a maximum length

    Args:
        text: Text to truncate
        max_length: Maximum length
        ellipsis: Ellipsis string to append

    Returns:
        Truncated text
    """
    if not text:
        return ""

    if len(text) <= max_length:
        return text

    return text[:max_length-len(ellipsis)] + ellipsis

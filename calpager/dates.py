"""Date utilities for calpager.

Pure functions for parsing user input and formatting month titles.
"""

import calendar
from datetime import datetime

from calpager.domain.models import CalendarDate


def parse_date(text: str) -> CalendarDate:
    """Parse a YYYY-MM-DD string.

    Raises:
        ValueError: If the text is not a valid date.
    """
    try:
        return CalendarDate.from_date(datetime.strptime(text, "%Y-%m-%d"))
    except ValueError as e:
        raise ValueError(f"Could not parse date '{text}': {e}") from e


def parse_month(text: str) -> CalendarDate:
    """Parse a YYYY-MM string into a month start.

    Raises:
        ValueError: If the text is not a valid month.
    """
    try:
        return CalendarDate.from_date(datetime.strptime(text, "%Y-%m"))
    except ValueError as e:
        raise ValueError(f"Could not parse month '{text}': {e}") from e


def month_title(month: CalendarDate) -> str:
    """Human-readable month (e.g., "January 2025")."""
    return f"{calendar.month_name[month.month]} {month.year}"

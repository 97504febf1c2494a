"""Domain core for calpager.

This package contains the functional core:
- No I/O operations
- No console output
- Range, paging and selection logic only
"""

from calpager.domain.controller import CalendarController, SelectionListener
from calpager.domain.models import CalendarDate, DateRange, InvalidRangeError
from calpager.domain.months import DEFAULT_SPAN_YEARS, MonthSequence
from calpager.domain.state import CalendarState

__all__ = [
    "DEFAULT_SPAN_YEARS",
    "CalendarController",
    "CalendarDate",
    "CalendarState",
    "DateRange",
    "InvalidRangeError",
    "MonthSequence",
    "SelectionListener",
]

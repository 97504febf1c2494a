"""The page model: one month start per page, spanning a DateRange."""

import logging
from collections.abc import Iterator, Sequence
from typing import overload

from calpager.domain.models import CalendarDate, DateRange

logger = logging.getLogger(__name__)

# Unbounded sides of a range extend this many years from "today"
DEFAULT_SPAN_YEARS = 200


def resolve_bounds(
    date_range: DateRange,
    today: CalendarDate,
    span_years: int = DEFAULT_SPAN_YEARS,
) -> tuple[CalendarDate, CalendarDate]:
    """Resolve the effective first and last month of a range.

    Args:
        date_range: Range whose sides may be unbounded.
        today: The construction moment used for unbounded sides.
        span_years: Years before/after today used for unbounded sides.

    Returns:
        Tuple of (first_month, last_month), both month starts, first <= last.
    """
    default_first = today.add_months(-12 * span_years)
    default_last = today.add_months(12 * span_years)

    if date_range.minimum is not None:
        first = date_range.minimum.month_start()
    else:
        first = default_first
    if date_range.maximum is not None:
        last = date_range.maximum.month_start()
    else:
        last = default_last

    # A single bound beyond the default span on the other side
    if last < first:
        if date_range.maximum is None:
            last = first
        else:
            first = last
    return first, last


class MonthSequence(Sequence[CalendarDate]):
    """Ordered, gap-free month starts; never empty."""

    def __init__(self, first: CalendarDate, last: CalendarDate) -> None:
        count = first.months_until(last) + 1
        self._months: tuple[CalendarDate, ...] = tuple(first.add_months(i) for i in range(max(count, 1)))

    @classmethod
    def build(
        cls,
        date_range: DateRange,
        today: CalendarDate,
        span_years: int = DEFAULT_SPAN_YEARS,
    ) -> "MonthSequence":
        """Build the sequence for a range, filling unbounded sides from today."""
        first, last = resolve_bounds(date_range, today, span_years)
        sequence = cls(first, last)
        logger.debug("Built month sequence %s..%s (%d pages)", first, last, len(sequence))
        return sequence

    @overload
    def __getitem__(self, index: int) -> CalendarDate: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[CalendarDate, ...]: ...

    def __getitem__(self, index: int | slice) -> CalendarDate | tuple[CalendarDate, ...]:
        return self._months[index]

    def __len__(self) -> int:
        return len(self._months)

    def __iter__(self) -> Iterator[CalendarDate]:
        return iter(self._months)

    def __repr__(self) -> str:
        return f"MonthSequence({self.first}..{self.last}, {len(self)} months)"

    @property
    def first(self) -> CalendarDate:
        return self._months[0]

    @property
    def last(self) -> CalendarDate:
        return self._months[-1]

    @property
    def middle_index(self) -> int:
        return len(self._months) // 2

    def index_of_month_containing(self, value: CalendarDate | None) -> int:
        """Page position for the month containing value.

        Args:
            value: Any day, or None.

        Returns:
            The matching position; 0 if value is before the first month;
            the last position if after the last month; the middle position
            if value is None or (unreachably) no month matches.
        """
        if value is None:
            return self.middle_index
        month = value.month_start()
        if month < self.first:
            return 0
        if month > self.last:
            return len(self._months) - 1
        for position, candidate in enumerate(self._months):
            if candidate.is_same_month(month):
                return position
        logger.warning("No page for in-span month %s, falling back to middle", month)
        return self.middle_index

    def position_of(self, month: CalendarDate) -> int | None:
        """Exact lookup by (year, month); None when the month has no page."""
        if month.month_start() < self.first or month.month_start() > self.last:
            return None
        position = self.first.months_until(month)
        if self._months[position].is_same_month(month):
            return position
        return None

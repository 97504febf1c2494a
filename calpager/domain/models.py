"""Value types for the calendar paging core.

- CalendarDate: immutable year/month/day, month is 1-based (January = 1)
- DateRange: optional [minimum, maximum] bounds over CalendarDate
- InvalidRangeError: raised when a range is structurally inverted
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime


class InvalidRangeError(ValueError):
    """Raised when both bounds are set and the minimum is after the maximum."""

    def __init__(self, minimum: "CalendarDate", maximum: "CalendarDate") -> None:
        super().__init__(f"Minimum date {minimum} is after maximum date {maximum}")
        self.minimum = minimum
        self.maximum = maximum


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable day-granularity date.

    The fields are not validated against the real calendar; paging only
    relies on (year, month) identity. Ordering is lexicographic on
    (year, month, day).
    """

    year: int
    month: int
    day: int = 1

    @classmethod
    def from_date(cls, value: date | datetime) -> "CalendarDate":
        """Build from a date or datetime, dropping any time component."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls, clock: Callable[[], date] | None = None) -> "CalendarDate":
        """Current day according to clock (defaults to the local date)."""
        return cls.from_date(clock() if clock is not None else date.today())

    def to_date(self) -> date:
        """Convert to datetime.date.

        Raises:
            ValueError: If the fields do not name a real calendar day.
        """
        return date(self.year, self.month, self.day)

    def is_before(self, other: "CalendarDate") -> bool:
        return self < other

    def is_after(self, other: "CalendarDate") -> bool:
        return self > other

    def is_same_month(self, other: "CalendarDate") -> bool:
        return self.year == other.year and self.month == other.month

    def month_start(self) -> "CalendarDate":
        return CalendarDate(self.year, self.month, 1)

    def add_months(self, months: int) -> "CalendarDate":
        """Month start of the month `months` calendar months away.

        Args:
            months: Offset in months, may be negative.

        Returns:
            CalendarDate normalized to day 1.
        """
        index = self.year * 12 + (self.month - 1) + months
        return CalendarDate(index // 12, index % 12 + 1, 1)

    def months_until(self, other: "CalendarDate") -> int:
        """Whole months from this date's month to other's month."""
        return (other.year - self.year) * 12 + (other.month - self.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class DateRange:
    """Optional [minimum, maximum] bound; None on a side means unbounded.

    Raises:
        InvalidRangeError: If both bounds are set and minimum > maximum.
    """

    minimum: CalendarDate | None = None
    maximum: CalendarDate | None = None

    def __post_init__(self) -> None:
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise InvalidRangeError(self.minimum, self.maximum)

    @classmethod
    def unbounded(cls) -> "DateRange":
        return cls(None, None)

    def contains(self, value: CalendarDate) -> bool:
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True

    def clamp(self, value: CalendarDate) -> CalendarDate:
        """Return value if inside the range, else the nearest bound."""
        if self.minimum is not None and value < self.minimum:
            return self.minimum
        if self.maximum is not None and value > self.maximum:
            return self.maximum
        return value

"""Immutable snapshot of the persisted calendar state.

Only three fields round-trip through the controller: the range bounds and
the selection. Each is independently optional.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from calpager.domain.models import CalendarDate

STATE_FIELDS = ("minimum", "maximum", "selected")


def coerce_date(value: Any) -> CalendarDate:
    """Accept a CalendarDate, datetime.date or ISO string."""
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, date):
        return CalendarDate.from_date(value)
    if isinstance(value, str):
        try:
            return CalendarDate.from_date(date.fromisoformat(value))
        except ValueError as e:
            raise ValueError(f"Could not parse date '{value}': {e}") from e
    raise ValueError(f"Unsupported date value: {value!r}")


@dataclass(frozen=True)
class CalendarState:
    """Immutable {minimum, maximum, selected} snapshot."""

    minimum: CalendarDate | None = None
    maximum: CalendarDate | None = None
    selected: CalendarDate | None = None

    def to_dict(self) -> dict[str, date]:
        """Serialize present fields as datetime.date values.

        Returns:
            Dictionary with a subset of "minimum", "maximum", "selected".
        """
        result: dict[str, date] = {}
        for name in STATE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                result[name] = value.to_date()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CalendarState":
        """Deserialize from date objects or ISO strings; missing keys are None.

        Raises:
            ValueError: If a present value is not a date.
        """
        values = {name: coerce_date(data[name]) for name in STATE_FIELDS if data.get(name) is not None}
        return cls(**values)

"""Stateful paging/selection core.

The controller owns the active range, the month sequence, the current page
and the selected date. All mutation goes through its methods; listeners are
told about selection changes synchronously, at the end of the transition
that caused them.

A mutation requested while another one is running (typically from a
listener) is queued and applied after the running transition completes.
"""

import logging
from collections import deque
from collections.abc import Callable
from datetime import date
from typing import Protocol

from calpager.domain.models import CalendarDate, DateRange
from calpager.domain.months import DEFAULT_SPAN_YEARS, MonthSequence
from calpager.domain.state import CalendarState

logger = logging.getLogger(__name__)


class SelectionListener(Protocol):
    """Receives the resolved selection (or None) after it changes."""

    def on_selection_changed(self, selected: CalendarDate | None) -> None: ...


Listener = SelectionListener | Callable[[CalendarDate | None], None]


class CalendarController:
    """Paging and selection state for one calendar view."""

    def __init__(
        self,
        span_years: int = DEFAULT_SPAN_YEARS,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self._span_years = span_years
        self._range = DateRange.unbounded()
        # Unbounded sides are always measured from the construction day
        self._anchor = CalendarDate.today(clock)
        self._months = MonthSequence.build(self._range, self._anchor, span_years)
        self._position = self._months.index_of_month_containing(self._anchor)
        self._selected: CalendarDate | None = None
        self._listeners: list[Listener] = []
        self._in_transition = False
        self._pending: deque[Callable[[], None]] = deque()

    # ── queries ──────────────────────────────────────────────────────────

    @property
    def active_range(self) -> DateRange:
        return self._range

    @property
    def minimum_date(self) -> CalendarDate | None:
        return self._range.minimum

    @property
    def maximum_date(self) -> CalendarDate | None:
        return self._range.maximum

    @property
    def months(self) -> MonthSequence:
        return self._months

    @property
    def page_count(self) -> int:
        return len(self._months)

    @property
    def current_month(self) -> CalendarDate:
        return self._months[self._position]

    def get_current_position(self) -> int:
        return self._position

    def get_selected_date(self) -> CalendarDate | None:
        return self._selected

    def get_month_at(self, position: int) -> CalendarDate:
        """Month start shown at a page; out-of-bounds positions are clamped."""
        return self._months[self._clamp_position(position)]

    def can_page_backward(self) -> bool:
        return self._position > 0

    def can_page_forward(self) -> bool:
        return self._position < len(self._months) - 1

    # ── listeners ────────────────────────────────────────────────────────

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unregister a listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, selected: CalendarDate | None) -> None:
        for listener in tuple(self._listeners):
            if hasattr(listener, "on_selection_changed"):
                listener.on_selection_changed(selected)
            else:
                listener(selected)

    # ── transitions ──────────────────────────────────────────────────────

    def _run(self, step: Callable[[], None]) -> None:
        if self._in_transition:
            logger.debug("Deferring %s until the running transition completes", step.__name__)
            self._pending.append(step)
            return
        self._in_transition = True
        try:
            step()
            while self._pending:
                self._pending.popleft()()
        finally:
            self._in_transition = False
            self._pending.clear()

    def _clamp_position(self, position: int) -> int:
        return max(0, min(position, len(self._months) - 1))

    def set_range(self, minimum: CalendarDate | None, maximum: CalendarDate | None) -> None:
        """Replace the active range.

        The current month is kept when it still has a page; the selection is
        clamped into the new range, notifying listeners if that changed it.

        Raises:
            InvalidRangeError: If minimum is after maximum. State is unchanged.
        """
        new_range = DateRange(minimum, maximum)

        def apply_range() -> None:
            previous_month = self.current_month
            self._range = new_range
            self._months = MonthSequence.build(new_range, self._anchor, self._span_years)
            self._position = self._months.index_of_month_containing(previous_month)
            logger.debug("Range set to %s..%s, current page %d", minimum, maximum, self._position)

            previous = self._selected
            if previous is None:
                return
            self._selected = new_range.clamp(previous)
            if self._selected != previous:
                logger.debug("Selection %s re-homed to %s", previous, self._selected)
                self._notify(self._selected)

        self._run(apply_range)

    def set_minimum_date(self, minimum: CalendarDate | None) -> None:
        self.set_range(minimum, self._range.maximum)

    def set_maximum_date(self, maximum: CalendarDate | None) -> None:
        self.set_range(self._range.minimum, maximum)

    def set_selected_date(self, selected: CalendarDate | None) -> None:
        """Select a date, clamped into the active range, and show its month.

        Listeners always receive the clamped date, even when it equals the
        previous selection. None clears the selection and leaves the page
        alone, notifying only if something was selected.
        """

        def apply_selection() -> None:
            previous = self._selected
            if selected is None:
                self._selected = None
                if previous is not None:
                    self._notify(None)
                return
            self._selected = self._range.clamp(selected)
            self._position = self._months.index_of_month_containing(self._selected)
            self._notify(self._selected)

        self._run(apply_selection)

    def set_current_position(self, position: int) -> None:
        """Navigate to a page; out-of-bounds positions are clamped."""

        def apply_position() -> None:
            self._position = self._clamp_position(position)

        self._run(apply_position)

    def set_current_month(self, month: CalendarDate | None) -> None:
        def apply_month() -> None:
            self._position = self._months.index_of_month_containing(month)

        self._run(apply_month)

    def page_forward(self) -> None:
        def apply_forward() -> None:
            self._position = self._clamp_position(self._position + 1)

        self._run(apply_forward)

    def page_backward(self) -> None:
        def apply_backward() -> None:
            self._position = self._clamp_position(self._position - 1)

        self._run(apply_backward)

    # ── snapshots ────────────────────────────────────────────────────────

    def snapshot(self) -> CalendarState:
        return CalendarState(
            minimum=self._range.minimum,
            maximum=self._range.maximum,
            selected=self._selected,
        )

    def restore(self, state: CalendarState) -> None:
        """Apply a snapshot: the range first, so the selection is validated."""
        self.set_range(state.minimum, state.maximum)
        self.set_selected_date(state.selected)

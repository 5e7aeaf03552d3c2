from __future__ import annotations

import logging
from dataclasses import dataclass, field

from calendrical._exceptions import (
    InvalidCalendarError,
    ReformError,
    YearOutOfRangeError,
)
from calendrical.calendars import GREGORIAN, JULIAN, Calendar, CalendarDate, DayNumber, OrdinalDate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reform:
    """
    Switch from an old calendar to a new one.

    ``last_old_date`` is the last day governed by the old calendar and
    ``first_new_date`` the first day governed by the new one; they must
    belong to different calendars and be exactly one day apart.  The
    switchover is the day number of ``first_new_date``.
    """

    last_old_date: CalendarDate
    first_new_date: CalendarDate
    switchover: DayNumber = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.last_old_date, CalendarDate) or not isinstance(
            self.first_new_date, CalendarDate
        ):
            raise TypeError("Reform boundaries must be CalendarDate instances.")
        if self.last_old_date.calendar is self.first_new_date.calendar:
            raise ReformError(
                f"Old and new calendars must differ; both are {self.last_old_date.calendar.name}."
            )
        last = self.last_old_date.to_day_number()
        switchover = self.first_new_date.to_day_number()
        if switchover - last != 1:
            raise ReformError(
                f"{self.last_old_date} and {self.first_new_date} must be one day apart; "
                f"got {switchover - last} days."
            )
        object.__setattr__(self, "switchover", switchover)
        logger.debug(
            f"Reform {self.last_old_date} -> {self.first_new_date}, "
            f"switchover={switchover.days_since_zero}"
        )

    # ── Julian → Gregorian factories ─────────────────────────────────────

    @classmethod
    def official(cls) -> Reform:
        """The 1582 papal reform; one shared instance."""
        return _OFFICIAL

    @classmethod
    def from_last_julian_date(cls, year: int, month: int, day: int) -> Reform:
        last = JULIAN.date(year, month, day)
        if last < _OFFICIAL.last_old_date:
            raise YearOutOfRangeError(f"A reform cannot precede the official one; got {last}.")
        return cls(last, GREGORIAN.get_calendar_date(last.to_day_number() + 1))

    @classmethod
    def from_first_gregorian_date(cls, year: int, month: int, day: int) -> Reform:
        first = GREGORIAN.date(year, month, day)
        if first < _OFFICIAL.first_new_date:
            raise YearOutOfRangeError(f"A reform cannot precede the official one; got {first}.")
        return cls(JULIAN.get_calendar_date(first.to_day_number() - 1), first)

    # ── derived ──────────────────────────────────────────────────────────

    @property
    def old_calendar(self) -> Calendar:
        return self.last_old_date.calendar

    @property
    def new_calendar(self) -> Calendar:
        return self.first_new_date.calendar

    @property
    def secular_shift(self) -> int:
        """Days skipped: the old-calendar reading of the first new date, minus the switchover."""
        y, m, d = self.first_new_date.year, self.first_new_date.month, self.first_new_date.day
        old = self.old_calendar
        kernel = old.kernel
        days = kernel.count_days_before_year(y) + kernel.count_days_in_year_before_month(y, m) + d - 1
        return (old.epoch + days) - self.switchover


# Thursday 4 October 1582 (Julian) is followed by Friday 15 October 1582.
_OFFICIAL = Reform(JULIAN.date(1582, 10, 4), GREGORIAN.date(1582, 10, 15))


class ReformResolver:
    """
    Picks the calendar that governs a given day.

    Days before the switchover belong to the old calendar, the switchover
    and later days to the new one.  A date written in the wrong calendar for
    its position is re-expressed, at the same day number, in the right one.
    """

    __slots__ = (
        "_reform",
        "_old",
        "_new",
        "_switchover",
        "_last_old_ordinal",
        "_first_new_ordinal",
    )

    def __init__(self, reform: Reform | None = None) -> None:
        if reform is None:
            reform = _OFFICIAL
        self._reform = reform
        self._old: Calendar = reform.old_calendar
        self._new: Calendar = reform.new_calendar
        self._switchover: DayNumber = reform.switchover
        self._last_old_ordinal: OrdinalDate = reform.last_old_date.to_ordinal_date()
        self._first_new_ordinal: OrdinalDate = reform.first_new_date.to_ordinal_date()

    # ── classification ───────────────────────────────────────────────────

    def get_calendar(self, day_number: DayNumber) -> Calendar:
        return self._old if day_number < self._switchover else self._new

    def get_day_number(self, date: CalendarDate | OrdinalDate) -> DayNumber:
        self._check_calendar(date)
        return date.to_day_number()

    def is_in_gap(self, date: CalendarDate) -> bool:
        """True for new-calendar dates whose labels the reform skipped."""
        if date.calendar is not self._new:
            return False
        last, first = self._reform.last_old_date, self._reform.first_new_date
        ymd = (date.year, date.month, date.day)
        return (last.year, last.month, last.day) < ymd < (first.year, first.month, first.day)

    # ── resolution ───────────────────────────────────────────────────────

    def resolve(self, value: DayNumber | CalendarDate | OrdinalDate) -> CalendarDate | OrdinalDate:
        if isinstance(value, DayNumber):
            return self.resolve_day_number(value)
        if isinstance(value, CalendarDate):
            return self.resolve_date(value)
        if isinstance(value, OrdinalDate):
            return self.resolve_ordinal(value)
        raise TypeError(
            f"Expected DayNumber, CalendarDate or OrdinalDate; got {type(value).__name__}."
        )

    def resolve_day_number(self, day_number: DayNumber) -> CalendarDate:
        return self.get_calendar(day_number).get_calendar_date(day_number)

    def resolve_ordinal_day_number(self, day_number: DayNumber) -> OrdinalDate:
        return self.get_calendar(day_number).get_ordinal_date(day_number)

    def resolve_date(self, date: CalendarDate) -> CalendarDate:
        self._check_calendar(date)
        day_number = date.to_day_number()
        target = self.get_calendar(day_number)
        if target is date.calendar:
            return date
        resolved = target.get_calendar_date(day_number)
        logger.debug(f"Re-expressed {date} as {resolved}")
        return resolved

    def resolve_ordinal(self, date: OrdinalDate) -> OrdinalDate:
        # Compared against the cached boundaries: no day number needed when
        # the date is already in the right calendar.
        self._check_calendar(date)
        if date.calendar is self._new:
            if date >= self._first_new_ordinal:
                return date
            target = self._old
        else:
            if date <= self._last_old_ordinal:
                return date
            target = self._new
        resolved = target.get_ordinal_date(date.to_day_number())
        logger.debug(f"Re-expressed {date} as {resolved}")
        return resolved

    def _check_calendar(self, date: CalendarDate | OrdinalDate) -> None:
        if date.calendar is not self._old and date.calendar is not self._new:
            raise InvalidCalendarError(
                f"Expected a {self._old.name} or {self._new.name} date; "
                f"got a {date.calendar.name} date."
            )

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def reform(self) -> Reform:
        return self._reform

    @property
    def switchover(self) -> DayNumber:
        return self._switchover

    @property
    def old_calendar(self) -> Calendar:
        return self._old

    @property
    def new_calendar(self) -> Calendar:
        return self._new

    @property
    def last_old_ordinal(self) -> OrdinalDate:
        return self._last_old_ordinal

    @property
    def first_new_ordinal(self) -> OrdinalDate:
        return self._first_new_ordinal

    def __repr__(self) -> str:
        return (
            f"ReformResolver(old={self._old.name!r}, "
            f"new={self._new.name!r}, "
            f"switchover={self._switchover.days_since_zero})"
        )

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

from calendrical._exceptions import InvalidCalendarError

if TYPE_CHECKING:
    from .calendar import Calendar


class DayOfWeek(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@dataclass(frozen=True, order=True, slots=True)
class DayNumber:
    """
    Position on the single day axis shared by every calendar.

    ``DayNumber.ZERO`` is Monday, January 1st, 1 CE in the Gregorian
    calendar.  Adding an int gives a day number; subtracting two day numbers
    gives a count of days.
    """

    days_since_zero: int

    ZERO: ClassVar[DayNumber]

    def __add__(self, days: int) -> DayNumber:
        if not isinstance(days, int):
            return NotImplemented
        return DayNumber(self.days_since_zero + days)

    __radd__ = __add__

    def __sub__(self, other: DayNumber | int) -> DayNumber | int:
        if isinstance(other, DayNumber):
            return self.days_since_zero - other.days_since_zero
        if isinstance(other, int):
            return DayNumber(self.days_since_zero - other)
        return NotImplemented

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek(self.days_since_zero % 7 + 1)


DayNumber.ZERO = DayNumber(0)


def _check_same_calendar(a: CalendarDate | OrdinalDate, b: CalendarDate | OrdinalDate) -> None:
    if a.calendar is not b.calendar:
        raise InvalidCalendarError(
            f"Cannot order dates of different calendars: "
            f"{a.calendar.name} and {b.calendar.name}."
        )


@total_ordering
@dataclass(frozen=True, slots=True)
class CalendarDate:
    """(year, month, day) in a given calendar; validated on construction."""

    year: int
    month: int
    day: int
    calendar: Calendar

    def __post_init__(self) -> None:
        self.calendar.schema.validate_year_month_day(self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        _check_same_calendar(self, other)
        return (self.year, self.month, self.day) < (other.year, other.month, other.day)

    @property
    def day_of_year(self) -> int:
        return self.calendar.schema.date_to_day_of_year(self.year, self.month, self.day)

    @property
    def is_intercalary(self) -> bool:
        return self.calendar.kernel.is_intercalary_day(self.year, self.month, self.day)

    @property
    def is_supplementary(self) -> bool:
        return self.calendar.kernel.is_supplementary_day(self.year, self.month, self.day)

    @property
    def day_of_week(self) -> DayOfWeek:
        return self.to_day_number().day_of_week

    def to_day_number(self) -> DayNumber:
        return self.calendar.get_day_number(self)

    def to_ordinal_date(self) -> OrdinalDate:
        return OrdinalDate(self.year, self.day_of_year, self.calendar)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d} ({self.calendar.name})"


@total_ordering
@dataclass(frozen=True, slots=True)
class OrdinalDate:
    """(year, day-of-year) in a given calendar; validated on construction."""

    year: int
    day_of_year: int
    calendar: Calendar

    def __post_init__(self) -> None:
        self.calendar.schema.validate_ordinal(self.year, self.day_of_year)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OrdinalDate):
            return NotImplemented
        _check_same_calendar(self, other)
        return (self.year, self.day_of_year) < (other.year, other.day_of_year)

    @property
    def day_of_week(self) -> DayOfWeek:
        return self.to_day_number().day_of_week

    def to_day_number(self) -> DayNumber:
        return self.calendar.get_day_number(self)

    def to_calendar_date(self) -> CalendarDate:
        month, day = self.calendar.schema.day_of_year_to_date(self.year, self.day_of_year)
        return CalendarDate(self.year, month, day, self.calendar)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.day_of_year:03d} ({self.calendar.name})"

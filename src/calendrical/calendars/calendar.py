from __future__ import annotations

from calendrical._config import DEFAULT_STRATEGY_NAME
from calendrical._exceptions import DayNumberOutOfRangeError, InvalidCalendarError
from calendrical.kernels import COPTIC12_KERNEL, GREGORIAN_KERNEL, JULIAN_KERNEL, Kernel
from calendrical.schemas import Schema, get_schema

from .dates import CalendarDate, DayNumber, OrdinalDate


class Calendar:
    """
    A schema anchored on the day axis.

    ``epoch`` is the day number of the 1st day of year 1 in this calendar.
    Calendars compare by identity: every date carries the calendar that
    validated it, and the built-in ones are module-level singletons.
    """

    __slots__ = ("_name", "_schema", "_epoch", "_domain")

    def __init__(self, name: str, schema: Schema, epoch: DayNumber) -> None:
        self._name = name
        self._schema = schema
        self._epoch = epoch
        lo, hi = schema.supported_days
        self._domain: tuple[DayNumber, DayNumber] = (epoch + lo, epoch + hi)

    # ── factories ────────────────────────────────────────────────────────

    def date(self, year: int, month: int, day: int) -> CalendarDate:
        return CalendarDate(year, month, day, self)

    def ordinal(self, year: int, day_of_year: int) -> OrdinalDate:
        return OrdinalDate(year, day_of_year, self)

    # ── conversions ──────────────────────────────────────────────────────

    def get_day_number(self, date: CalendarDate | OrdinalDate) -> DayNumber:
        if isinstance(date, CalendarDate):
            self._check_calendar(date)
            days = self._schema.count_days_since_epoch(date.year, date.month, date.day)
        elif isinstance(date, OrdinalDate):
            self._check_calendar(date)
            days = self._schema.count_days_since_epoch_ordinal(date.year, date.day_of_year)
        else:
            raise TypeError(f"Expected CalendarDate or OrdinalDate; got {type(date).__name__}.")
        return self._epoch + days

    def get_calendar_date(self, day_number: DayNumber) -> CalendarDate:
        self.validate_day_number(day_number)
        year, month, day = self._schema.get_date_parts(day_number - self._epoch)
        return CalendarDate(year, month, day, self)

    def get_ordinal_date(self, day_number: DayNumber) -> OrdinalDate:
        self.validate_day_number(day_number)
        year, day_of_year = self._schema.get_ordinal_parts(day_number - self._epoch)
        return OrdinalDate(year, day_of_year, self)

    def validate_day_number(self, day_number: DayNumber) -> None:
        if not isinstance(day_number, DayNumber):
            raise TypeError(f"Expected DayNumber; got {type(day_number).__name__}.")
        lo, hi = self._domain
        if not lo <= day_number <= hi:
            raise DayNumberOutOfRangeError(
                f"{day_number} is outside the {self._name} domain "
                f"[{lo.days_since_zero}, {hi.days_since_zero}]."
            )

    def _check_calendar(self, date: CalendarDate | OrdinalDate) -> None:
        if date.calendar is not self:
            raise InvalidCalendarError(
                f"Expected a {self._name} date; got a {date.calendar.name} date."
            )

    # ── year / month infos ───────────────────────────────────────────────

    def is_leap_year(self, year: int) -> bool:
        self._schema.validate_year(year)
        return self._schema.kernel.is_leap_year(year)

    def count_days_in_year(self, year: int) -> int:
        self._schema.validate_year(year)
        return self._schema.kernel.count_days_in_year(year)

    def count_days_in_month(self, year: int, month: int) -> int:
        self._schema.validate_year_month(year, month)
        return self._schema.kernel.count_days_in_month(year, month)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def kernel(self) -> Kernel:
        return self._schema.kernel

    @property
    def epoch(self) -> DayNumber:
        return self._epoch

    @property
    def domain(self) -> tuple[DayNumber, DayNumber]:
        return self._domain

    def __repr__(self) -> str:
        return (
            f"Calendar(name={self._name!r}, "
            f"schema={type(self._schema).__name__}, "
            f"epoch={self._epoch.days_since_zero})"
        )


_strategy = DEFAULT_STRATEGY_NAME

GREGORIAN = Calendar("Gregorian", get_schema(GREGORIAN_KERNEL, _strategy), DayNumber.ZERO)
# Julian 0001-01-01 is Gregorian 0000-12-30.
JULIAN = Calendar("Julian", get_schema(JULIAN_KERNEL, _strategy), DayNumber.ZERO - 2)
# Coptic 0001-01-01 is Julian 0284-08-29.
COPTIC = Calendar("Coptic", get_schema(COPTIC12_KERNEL, _strategy), DayNumber(103_604))

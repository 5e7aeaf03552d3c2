"""
tests/calendars/test_calendars.py

Covers:
  - DayNumber arithmetic, ordering and day of week
  - CalendarDate / OrdinalDate validation, equality and ordering
  - Calendar conversions against datetime
  - Julian and Coptic epochs on the shared axis
  - Domain checks and calendar identity checks
"""

import datetime

import numpy as np
import pytest

from calendrical import (
    DayNumberOutOfRangeError,
    DayOutOfRangeError,
    InvalidCalendarError,
    MonthOutOfRangeError,
    YearOutOfRangeError,
)
from calendrical.calendars import (
    COPTIC,
    GREGORIAN,
    JULIAN,
    Calendar,
    CalendarDate,
    DayNumber,
    DayOfWeek,
    OrdinalDate,
)
from calendrical.kernels import GREGORIAN_KERNEL
from calendrical.schemas import get_schema


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture(params=[GREGORIAN, JULIAN, COPTIC], ids=lambda c: c.name)
def calendar(request):
    return request.param


@pytest.fixture
def reform_day():
    """First Gregorian day of the 1582 reform."""
    return DayNumber(577_735)


# ── DayNumber ─────────────────────────────────────────────────────────────────

class TestDayNumber:

    def test_zero(self):
        assert DayNumber.ZERO == DayNumber(0)

    def test_add_and_subtract(self):
        d = DayNumber(10)
        assert d + 5 == DayNumber(15)
        assert 5 + d == DayNumber(15)
        assert d - 3 == DayNumber(7)
        assert DayNumber(15) - d == 5

    def test_ordering(self):
        assert DayNumber(-1) < DayNumber.ZERO < DayNumber(1)
        assert sorted([DayNumber(3), DayNumber(-2), DayNumber(0)]) == [
            DayNumber(-2), DayNumber(0), DayNumber(3)
        ]

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DayNumber(1).days_since_zero = 2

    def test_hashable(self):
        assert len({DayNumber(1), DayNumber(1), DayNumber(2)}) == 2

    def test_day_of_week(self):
        assert DayNumber.ZERO.day_of_week is DayOfWeek.MONDAY
        assert DayNumber(-1).day_of_week is DayOfWeek.SUNDAY
        assert DayNumber(6).day_of_week is DayOfWeek.SUNDAY

    def test_day_of_week_against_datetime(self):
        rng = np.random.default_rng(3)
        for ordinal in rng.integers(1, 3_000_000, size=200):
            expected = datetime.date.fromordinal(int(ordinal)).isoweekday()
            assert DayNumber(int(ordinal) - 1).day_of_week == expected

    def test_add_rejects_non_int(self):
        with pytest.raises(TypeError):
            DayNumber(1) + 1.5


# ── Dates ─────────────────────────────────────────────────────────────────────

class TestDates:

    def test_invalid_dates_fault(self):
        with pytest.raises(DayOutOfRangeError):
            GREGORIAN.date(2023, 2, 29)
        with pytest.raises(MonthOutOfRangeError):
            GREGORIAN.date(2023, 13, 1)
        with pytest.raises(YearOutOfRangeError):
            COPTIC.date(0, 1, 1)
        with pytest.raises(DayOutOfRangeError):
            JULIAN.ordinal(2023, 366)

    def test_julian_accepts_gregorian_common_leap_day(self):
        assert JULIAN.date(1900, 2, 29).is_intercalary

    def test_equality_includes_calendar(self):
        assert GREGORIAN.date(2000, 1, 1) == CalendarDate(2000, 1, 1, GREGORIAN)
        assert GREGORIAN.date(2000, 1, 1) != JULIAN.date(2000, 1, 1)
        assert GREGORIAN.ordinal(2000, 1) != JULIAN.ordinal(2000, 1)

    def test_ordering_within_calendar(self):
        assert GREGORIAN.date(2000, 1, 1) < GREGORIAN.date(2000, 1, 2)
        assert GREGORIAN.date(1999, 12, 31) <= GREGORIAN.date(2000, 1, 1)
        assert GREGORIAN.ordinal(2000, 366) > GREGORIAN.ordinal(2000, 1)

    def test_ordering_across_calendars_faults(self):
        with pytest.raises(InvalidCalendarError):
            GREGORIAN.date(2000, 1, 1) < JULIAN.date(2000, 1, 1)
        with pytest.raises(InvalidCalendarError):
            GREGORIAN.ordinal(2000, 1) >= JULIAN.ordinal(2000, 1)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            GREGORIAN.date(2000, 1, 1).day = 2

    def test_ordinal_round_trip(self, calendar):
        date = calendar.date(1740, 12, 30)
        ordinal = date.to_ordinal_date()
        assert isinstance(ordinal, OrdinalDate)
        assert ordinal.to_calendar_date() == date
        assert ordinal.to_day_number() == date.to_day_number()

    def test_day_of_year(self):
        assert GREGORIAN.date(2024, 3, 1).day_of_year == 61
        assert GREGORIAN.date(2023, 12, 31).day_of_year == 365

    def test_day_of_week(self):
        assert GREGORIAN.date(1582, 10, 15).day_of_week is DayOfWeek.FRIDAY
        assert JULIAN.date(1582, 10, 4).day_of_week is DayOfWeek.THURSDAY
        assert GREGORIAN.ordinal(2024, 1).day_of_week is DayOfWeek.MONDAY

    def test_coptic_supplementary(self):
        assert COPTIC.date(1739, 12, 36).is_intercalary
        assert COPTIC.date(1739, 12, 31).is_supplementary
        assert not COPTIC.date(1739, 12, 30).is_supplementary
        with pytest.raises(DayOutOfRangeError):
            COPTIC.date(1740, 12, 36)

    def test_str(self):
        assert str(GREGORIAN.date(1582, 10, 15)) == "1582-10-15 (Gregorian)"
        assert str(JULIAN.ordinal(1582, 277)) == "1582-277 (Julian)"


# ── Calendar conversions ──────────────────────────────────────────────────────

class TestConversions:

    def test_gregorian_against_datetime(self):
        rng = np.random.default_rng(5)
        for ordinal in rng.integers(1, datetime.date.max.toordinal(), size=500, endpoint=True):
            ordinal = int(ordinal)
            expected = datetime.date.fromordinal(ordinal)
            date = GREGORIAN.get_calendar_date(DayNumber(ordinal - 1))
            assert (date.year, date.month, date.day) == (expected.year, expected.month, expected.day)
            assert date.to_day_number() == DayNumber(ordinal - 1)

    def test_round_trip_sampled(self, calendar):
        lo, hi = calendar.domain
        rng = np.random.default_rng(17)
        for n in rng.integers(lo.days_since_zero, hi.days_since_zero, size=300, endpoint=True):
            day = DayNumber(int(n))
            assert calendar.get_calendar_date(day).to_day_number() == day
            assert calendar.get_ordinal_date(day).to_day_number() == day
            assert calendar.get_ordinal_date(day) == calendar.get_calendar_date(day).to_ordinal_date()

    def test_julian_epoch(self):
        assert JULIAN.epoch == DayNumber(-2)
        assert JULIAN.date(1, 1, 1).to_day_number() == GREGORIAN.date(0, 12, 30).to_day_number()

    def test_julian_gregorian_offset_in_1582(self, reform_day):
        assert GREGORIAN.date(1582, 10, 15).to_day_number() == reform_day
        assert JULIAN.date(1582, 10, 5).to_day_number() == reform_day
        assert JULIAN.date(1582, 10, 4).to_day_number() == reform_day - 1

    def test_coptic_epoch(self):
        assert COPTIC.date(1, 1, 1).to_day_number() == JULIAN.date(284, 8, 29).to_day_number()

    def test_coptic_new_years(self):
        assert COPTIC.date(1739, 1, 1).to_day_number() == GREGORIAN.date(2022, 9, 11).to_day_number()
        assert COPTIC.date(1740, 1, 1).to_day_number() == GREGORIAN.date(2023, 9, 12).to_day_number()

    def test_domain_edges(self, calendar):
        lo, hi = calendar.domain
        min_year, max_year = calendar.schema.supported_years
        assert calendar.get_calendar_date(lo) == calendar.date(min_year, 1, 1)
        assert calendar.get_calendar_date(hi).year == max_year
        with pytest.raises(DayNumberOutOfRangeError):
            calendar.get_calendar_date(hi + 1)
        with pytest.raises(DayNumberOutOfRangeError):
            calendar.get_ordinal_date(lo - 1)

    def test_get_day_number_checks_calendar(self):
        with pytest.raises(InvalidCalendarError):
            GREGORIAN.get_day_number(JULIAN.date(2000, 1, 1))
        with pytest.raises(InvalidCalendarError):
            JULIAN.get_day_number(GREGORIAN.ordinal(2000, 1))

    def test_get_day_number_rejects_other_types(self):
        with pytest.raises(TypeError):
            GREGORIAN.get_day_number((2000, 1, 1))
        with pytest.raises(TypeError):
            GREGORIAN.get_calendar_date(730_119)


# ── Calendar infos ────────────────────────────────────────────────────────────

class TestCalendarInfos:

    def test_leap_years(self):
        assert JULIAN.is_leap_year(1900)
        assert not GREGORIAN.is_leap_year(1900)

    def test_days_in_month_and_year(self):
        assert GREGORIAN.count_days_in_month(2024, 2) == 29
        assert GREGORIAN.count_days_in_year(2023) == 365
        assert COPTIC.count_days_in_month(1739, 12) == 36

    def test_year_range_checked(self):
        with pytest.raises(YearOutOfRangeError):
            GREGORIAN.count_days_in_month(5_000_001, 1)
        with pytest.raises(YearOutOfRangeError):
            COPTIC.is_leap_year(10_000)

    def test_custom_calendar(self):
        proleptic = Calendar("Proleptic", get_schema(GREGORIAN_KERNEL, "arithmetical"), DayNumber.ZERO)
        date = proleptic.date(2000, 1, 1)
        assert date.to_day_number() == GREGORIAN.date(2000, 1, 1).to_day_number()
        assert date != GREGORIAN.date(2000, 1, 1)

    def test_repr(self):
        assert repr(JULIAN).startswith("Calendar(name='Julian'")
        assert "epoch=-2" in repr(JULIAN)

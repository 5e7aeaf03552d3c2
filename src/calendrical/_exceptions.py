from __future__ import annotations


class CalendricalError(Exception):
    """Base exception for all calendrical errors."""


class OutOfRangeError(CalendricalError, ValueError):
    """A year, month, day or day number lies outside the supported domain."""


class YearOutOfRangeError(OutOfRangeError):
    pass


class MonthOutOfRangeError(OutOfRangeError):
    pass


class DayOutOfRangeError(OutOfRangeError):
    pass


class DayNumberOutOfRangeError(OutOfRangeError):
    pass


class InvalidCalendarError(CalendricalError, ValueError):
    """A date is tagged with a calendar the operation does not accept."""


class ReformError(CalendricalError, ValueError):
    """The boundary dates of a reform are inconsistent."""

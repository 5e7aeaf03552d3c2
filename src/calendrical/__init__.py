"""
calendrical
~~~~~~~~~~~

Calendar arithmetic on a single linear day axis.  Kernels hold the rules of
a calendar family, schemas turn those rules into day offsets, calendars
anchor schemas on the axis, and a reform resolver picks the governing
calendar on either side of a switchover day.

Basic usage::

    from calendrical import GREGORIAN, JULIAN, ReformResolver

    resolver = ReformResolver()                  # Julian → Gregorian, 1582
    day = GREGORIAN.date(1582, 10, 15).to_day_number()
    resolver.resolve(day - 1)                    # → 1582-10-04 (Julian)
    resolver.resolve(day)                        # → 1582-10-15 (Gregorian)

Public API
----------
Kernel, GREGORIAN_KERNEL, JULIAN_KERNEL, COPTIC12_KERNEL   Calendar rules.
Schema, ArithmeticalSchema, LookupSchema, get_schema       Day offsets.
DayNumber, CalendarDate, OrdinalDate, Calendar             Dates.
GREGORIAN, JULIAN, COPTIC                                  Built-in calendars.
Reform, ReformResolver                                     Calendar reforms.
CalendricalError                                           Base exception.
"""

from __future__ import annotations

from calendrical._exceptions import (
    CalendricalError,
    DayNumberOutOfRangeError,
    DayOutOfRangeError,
    InvalidCalendarError,
    MonthOutOfRangeError,
    OutOfRangeError,
    ReformError,
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
from calendrical.kernels import COPTIC12_KERNEL, GREGORIAN_KERNEL, JULIAN_KERNEL, Kernel
from calendrical.reform import Reform, ReformResolver
from calendrical.schemas import ArithmeticalSchema, LookupSchema, Schema, Strategy, get_schema

__all__ = [
    "Kernel",
    "GREGORIAN_KERNEL",
    "JULIAN_KERNEL",
    "COPTIC12_KERNEL",
    "Schema",
    "Strategy",
    "ArithmeticalSchema",
    "LookupSchema",
    "get_schema",
    "DayNumber",
    "DayOfWeek",
    "CalendarDate",
    "OrdinalDate",
    "Calendar",
    "GREGORIAN",
    "JULIAN",
    "COPTIC",
    "Reform",
    "ReformResolver",
    "CalendricalError",
    "OutOfRangeError",
    "YearOutOfRangeError",
    "MonthOutOfRangeError",
    "DayOutOfRangeError",
    "DayNumberOutOfRangeError",
    "InvalidCalendarError",
    "ReformError",
]

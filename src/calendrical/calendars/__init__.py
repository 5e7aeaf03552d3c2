"""
calendrical.calendars
~~~~~~~~~~~~~~~~~~~~~

Dates on a shared day axis.  A ``Calendar`` anchors a schema at an epoch
day number; ``CalendarDate`` and ``OrdinalDate`` are immutable values tagged
with the calendar that validated them.

Basic usage::

    from calendrical.calendars import GREGORIAN, JULIAN

    d = GREGORIAN.date(1582, 10, 15)
    n = d.to_day_number()                 # → DayNumber(days_since_zero=577735)
    JULIAN.get_calendar_date(n)           # → 1582-10-05 (Julian)

Public API
----------
DayNumber      Point on the day axis.
DayOfWeek      Monday = 1 .. Sunday = 7.
CalendarDate   (year, month, day) in a calendar.
OrdinalDate    (year, day-of-year) in a calendar.
Calendar       Schema + epoch.
GREGORIAN, JULIAN, COPTIC   Built-in calendars.
"""

from __future__ import annotations

from calendrical.calendars.calendar import COPTIC, GREGORIAN, JULIAN, Calendar
from calendrical.calendars.dates import CalendarDate, DayNumber, DayOfWeek, OrdinalDate

__all__ = [
    "DayNumber",
    "DayOfWeek",
    "CalendarDate",
    "OrdinalDate",
    "Calendar",
    "GREGORIAN",
    "JULIAN",
    "COPTIC",
]

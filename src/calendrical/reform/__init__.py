"""
calendrical.reform
~~~~~~~~~~~~~~~~~~

Calendar reforms.  A ``Reform`` fixes the switchover day at which authority
passes from an old calendar to a new one; a ``ReformResolver`` decides which
calendar governs any day and re-expresses dates written in the wrong one.

Basic usage::

    from calendrical.calendars import GREGORIAN
    from calendrical.reform import Reform, ReformResolver

    resolver = ReformResolver(Reform.official())
    resolver.resolve(resolver.switchover - 1)     # → 1582-10-04 (Julian)
    resolver.resolve(GREGORIAN.date(1582, 10, 10))  # → 1582-09-30 (Julian)

Public API
----------
Reform           Boundary dates and derived switchover.
ReformResolver   Per-query calendar selection.
"""

from __future__ import annotations

from calendrical.reform.reform import Reform, ReformResolver

__all__ = [
    "Reform",
    "ReformResolver",
]

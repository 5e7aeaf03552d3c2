from __future__ import annotations

from .schema import Schema, Strategy


class ArithmeticalSchema(Schema):
    """Within-year offsets from the kernel's closed-form formula."""

    strategy = Strategy.ARITHMETICAL

    def _days_before_month(self, year: int, month: int) -> int:
        return self._kernel.count_days_in_year_before_month(year, month)

    def _month_day(self, year: int, day_of_year: int) -> tuple[int, int]:
        before = self._kernel.count_days_in_year_before_month
        months = self._kernel.count_months_in_year(year)
        month = 1
        while month < months and before(year, month + 1) < day_of_year:
            month += 1
        return month, day_of_year - before(year, month)

from __future__ import annotations

from .kernel import Kernel


class Coptic12Kernel(Kernel):
    """
    Coptic rules in twelve-month form.

    The five (six in a leap year) epagomenal days are appended to the twelfth
    month, which therefore has 35 or 36 days.  Days 31 and later of month 12
    are supplementary days; day 36 is the intercalary day.
    """

    name = "Coptic"
    supported_years = (1, 9999)
    mean_year = (1461, 4)

    _COMMON: tuple[int, ...] = (30,) * 11 + (35,)
    _LEAP: tuple[int, ...] = (30,) * 11 + (36,)

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 3

    def get_days_in_month_distribution(self, leap: bool) -> tuple[int, ...]:
        return self._LEAP if leap else self._COMMON

    def is_regular(self) -> tuple[bool, int]:
        return True, 12

    def count_months_in_year(self, year: int) -> int:
        return 12

    def count_days_in_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def count_days_in_year_before_month(self, year: int, month: int) -> int:
        return 30 * (month - 1)

    def count_days_before_year(self, year: int) -> int:
        return 365 * (year - 1) + year // 4

    def is_intercalary_day(self, year: int, month: int, day: int) -> bool:
        return month == 12 and day == 36

    def is_supplementary_day(self, year: int, month: int, day: int) -> bool:
        return month == 12 and day > 30


COPTIC12_KERNEL = Coptic12Kernel()

from __future__ import annotations

from .kernel import GJKernel


class GregorianKernel(GJKernel):

    name = "Gregorian"
    mean_year = (146_097, 400)

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def count_days_before_year(self, year: int) -> int:
        y = year - 1
        return 365 * y + y // 4 - y // 100 + y // 400


GREGORIAN_KERNEL = GregorianKernel()

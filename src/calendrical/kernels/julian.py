from __future__ import annotations

from .kernel import GJKernel


class JulianKernel(GJKernel):

    name = "Julian"
    mean_year = (1461, 4)

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0

    def count_days_before_year(self, year: int) -> int:
        y = year - 1
        return 365 * y + y // 4


JULIAN_KERNEL = JulianKernel()

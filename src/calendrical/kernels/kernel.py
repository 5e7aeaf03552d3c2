from __future__ import annotations

from abc import ABC, abstractmethod

from calendrical._exceptions import MonthOutOfRangeError


class Kernel(ABC):
    """
    Rule set of one calendar family: leap years and month lengths.

    A kernel has no state beyond class constants, so one instance per family
    is shared by every schema and calendar.  Kernels do not check the year
    range; that is the job of the schema built on top of them.
    """

    name: str = ""

    # Closed interval of supported years.
    supported_years: tuple[int, int] = (-4_999_999, 5_000_000)

    # Exact mean year length as (days_per_cycle, years_per_cycle).
    mean_year: tuple[int, int] = (1461, 4)

    # ── rules every family must provide ──────────────────────────────────

    @abstractmethod
    def is_leap_year(self, year: int) -> bool: ...

    @abstractmethod
    def get_days_in_month_distribution(self, leap: bool) -> tuple[int, ...]:
        """Month lengths of a leap (or common) year, month 1 first."""

    @abstractmethod
    def count_days_in_year_before_month(self, year: int, month: int) -> int:
        """Closed-form count of the days in `year` before the 1st of `month`."""

    @abstractmethod
    def count_days_before_year(self, year: int) -> int:
        """Days from the 1st day of year 1 to the 1st day of `year`."""

    @abstractmethod
    def is_intercalary_day(self, year: int, month: int, day: int) -> bool: ...

    # ── derived rules ────────────────────────────────────────────────────

    def is_regular(self) -> tuple[bool, int]:
        common = len(self.get_days_in_month_distribution(False))
        leap = len(self.get_days_in_month_distribution(True))
        return (True, common) if common == leap else (False, 0)

    def count_months_in_year(self, year: int) -> int:
        return len(self.get_days_in_month_distribution(self.is_leap_year(year)))

    def count_days_in_year(self, year: int) -> int:
        return sum(self.get_days_in_month_distribution(self.is_leap_year(year)))

    def count_days_in_month(self, year: int, month: int) -> int:
        table = self.get_days_in_month_distribution(self.is_leap_year(year))
        # Python would silently wrap a negative index.
        if not 1 <= month <= len(table):
            raise MonthOutOfRangeError(
                f"Month must be in [1, {len(table)}]; got {month}."
            )
        return table[month - 1]

    def is_intercalary_month(self, year: int, month: int) -> bool:
        return False

    def is_supplementary_day(self, year: int, month: int, day: int) -> bool:
        return False

    # ── value semantics ──────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class GJKernel(Kernel):
    """Month layout shared by the Julian and Gregorian families."""

    DAYS_IN_COMMON_YEAR: int = 365
    DAYS_IN_LEAP_YEAR: int = 366

    _COMMON: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    _LEAP: tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

    def get_days_in_month_distribution(self, leap: bool) -> tuple[int, ...]:
        return self._LEAP if leap else self._COMMON

    def is_regular(self) -> tuple[bool, int]:
        return True, 12

    def count_months_in_year(self, year: int) -> int:
        return 12

    def count_days_in_year(self, year: int) -> int:
        return self.DAYS_IN_LEAP_YEAR if self.is_leap_year(year) else self.DAYS_IN_COMMON_YEAR

    def count_days_in_year_before_month(self, year: int, month: int) -> int:
        # (153 * m + 2) // 5 counts from March 1st; offset by 59 or 60 days.
        if month < 3:
            return 31 * (month - 1)
        if self.is_leap_year(year):
            return (153 * month - 157) // 5
        return (153 * month - 162) // 5

    def is_intercalary_day(self, year: int, month: int, day: int) -> bool:
        return month == 2 and day == 29

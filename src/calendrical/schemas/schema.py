from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from calendrical._exceptions import (
    DayNumberOutOfRangeError,
    DayOutOfRangeError,
    MonthOutOfRangeError,
    YearOutOfRangeError,
)
from calendrical.kernels import Kernel


class Strategy(str, Enum):
    ARITHMETICAL = "arithmetical"
    LOOKUP = "lookup"


class Schema(ABC):
    """
    Day-offset arithmetic on top of a kernel.

    Converts between (year, month, day), (year, day-of-year) and the count
    of days since the epoch of the family (the 1st day of year 1).  The
    public methods validate their arguments; subclasses only supply the
    within-year strategy through ``_days_before_month`` and ``_month_day``.
    """

    strategy: Strategy

    def __init__(self, kernel: Kernel) -> None:
        self._kernel = kernel
        self._min_year, self._max_year = kernel.supported_years
        self._supported_days = (
            kernel.count_days_before_year(self._min_year),
            kernel.count_days_before_year(self._max_year + 1) - 1,
        )

    # ── strategy hooks ───────────────────────────────────────────────────

    @abstractmethod
    def _days_before_month(self, year: int, month: int) -> int: ...

    @abstractmethod
    def _month_day(self, year: int, day_of_year: int) -> tuple[int, int]: ...

    # ── validation ───────────────────────────────────────────────────────

    def validate_year(self, year: int) -> None:
        if not self._min_year <= year <= self._max_year:
            raise YearOutOfRangeError(
                f"Year must be in [{self._min_year}, {self._max_year}]; got {year}."
            )

    def validate_year_month(self, year: int, month: int) -> None:
        self.validate_year(year)
        months = self._kernel.count_months_in_year(year)
        if not 1 <= month <= months:
            raise MonthOutOfRangeError(f"Month must be in [1, {months}]; got {month}.")

    def validate_year_month_day(self, year: int, month: int, day: int) -> None:
        self.validate_year_month(year, month)
        days = self._kernel.count_days_in_month(year, month)
        if not 1 <= day <= days:
            raise DayOutOfRangeError(
                f"Day must be in [1, {days}] for {year}-{month:02d}; got {day}."
            )

    def validate_ordinal(self, year: int, day_of_year: int) -> None:
        self.validate_year(year)
        days = self._kernel.count_days_in_year(year)
        if not 1 <= day_of_year <= days:
            raise DayOutOfRangeError(
                f"Day of year must be in [1, {days}] for {year}; got {day_of_year}."
            )

    def validate_days_since_epoch(self, days_since_epoch: int) -> None:
        lo, hi = self._supported_days
        if not lo <= days_since_epoch <= hi:
            raise DayNumberOutOfRangeError(
                f"Days since epoch must be in [{lo}, {hi}]; got {days_since_epoch}."
            )

    # ── within a year ────────────────────────────────────────────────────

    def count_days_in_year_before_month(self, year: int, month: int) -> int:
        self.validate_year_month(year, month)
        return self._days_before_month(year, month)

    def date_to_day_of_year(self, year: int, month: int, day: int) -> int:
        self.validate_year_month_day(year, month, day)
        return self._days_before_month(year, month) + day

    def day_of_year_to_date(self, year: int, day_of_year: int) -> tuple[int, int]:
        """Inverse of ``date_to_day_of_year``: returns (month, day)."""
        self.validate_ordinal(year, day_of_year)
        return self._month_day(year, day_of_year)

    # ── whole axis ───────────────────────────────────────────────────────

    def get_start_of_year(self, year: int) -> int:
        self.validate_year(year)
        return self._kernel.count_days_before_year(year)

    def get_end_of_year(self, year: int) -> int:
        self.validate_year(year)
        return self._kernel.count_days_before_year(year + 1) - 1

    def count_days_since_epoch(self, year: int, month: int, day: int) -> int:
        self.validate_year_month_day(year, month, day)
        return (
            self._kernel.count_days_before_year(year)
            + self._days_before_month(year, month)
            + day - 1
        )

    def count_days_since_epoch_ordinal(self, year: int, day_of_year: int) -> int:
        self.validate_ordinal(year, day_of_year)
        return self._kernel.count_days_before_year(year) + day_of_year - 1

    def get_year(self, days_since_epoch: int) -> int:
        self.validate_days_since_epoch(days_since_epoch)
        return self._year(days_since_epoch)

    def get_ordinal_parts(self, days_since_epoch: int) -> tuple[int, int]:
        self.validate_days_since_epoch(days_since_epoch)
        year = self._year(days_since_epoch)
        return year, 1 + days_since_epoch - self._kernel.count_days_before_year(year)

    def get_date_parts(self, days_since_epoch: int) -> tuple[int, int, int]:
        year, day_of_year = self.get_ordinal_parts(days_since_epoch)
        month, day = self._month_day(year, day_of_year)
        return year, month, day

    def _year(self, days_since_epoch: int) -> int:
        # Estimate from the exact mean year, then correct by at most a year.
        cycle_days, cycle_years = self._kernel.mean_year
        year = 1 + (days_since_epoch * cycle_years) // cycle_days
        start = self._kernel.count_days_before_year
        while start(year) > days_since_epoch:
            year -= 1
        while start(year + 1) <= days_since_epoch:
            year += 1
        return year

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def kernel(self) -> Kernel:
        return self._kernel

    @property
    def supported_years(self) -> tuple[int, int]:
        return self._min_year, self._max_year

    @property
    def supported_days(self) -> tuple[int, int]:
        return self._supported_days

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kernel={self._kernel!r})"

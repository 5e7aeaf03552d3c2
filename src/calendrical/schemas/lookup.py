from __future__ import annotations

import logging

import numpy as np

from calendrical._exceptions import CalendricalError
from calendrical.kernels import Kernel

from .schema import Schema, Strategy

logger = logging.getLogger(__name__)


class LookupSchema(Schema):
    """
    Within-year offsets read from precomputed cumulative tables.

    One table per leap/common class.  ``table[month]`` is the count of days
    in the year before the 1st of ``month``; slot 0 is a zero sentinel kept
    so that the index equals the month number.
    """

    strategy = Strategy.LOOKUP

    def __init__(self, kernel: Kernel) -> None:
        regular, months = kernel.is_regular()
        if not regular:
            raise CalendricalError(
                f"Lookup tables require a fixed number of months; {kernel!r} is not regular."
            )
        super().__init__(kernel)
        self._months: int = months
        self._common: np.ndarray = self._build_table(kernel.get_days_in_month_distribution(False))
        self._leap: np.ndarray = self._build_table(kernel.get_days_in_month_distribution(True))
        logger.debug(
            f"Built lookup tables for {kernel.name}: "
            f"common={self._common.tolist()}, leap={self._leap.tolist()}"
        )

    @staticmethod
    def _build_table(distribution: tuple[int, ...]) -> np.ndarray:
        n = len(distribution)
        table = np.zeros(n + 1, dtype=np.int64)
        for month in range(1, n):
            table[month + 1] = table[month] + distribution[month - 1]
        table.setflags(write=False)
        return table

    def _table(self, year: int) -> np.ndarray:
        return self._leap if self._kernel.is_leap_year(year) else self._common

    def _days_before_month(self, year: int, month: int) -> int:
        return int(self._table(year)[month])

    def _month_day(self, year: int, day_of_year: int) -> tuple[int, int]:
        table = self._table(year)
        # First slot holding at least day_of_year is the month after.
        month = int(np.searchsorted(table, day_of_year, side="left")) - 1
        return month, day_of_year - int(table[month])

    def days_before_month_table(self, leap: bool) -> np.ndarray:
        """Read-only cumulative table of the leap (or common) class."""
        return self._leap if leap else self._common

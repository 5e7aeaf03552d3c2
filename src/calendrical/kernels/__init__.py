"""
calendrical.kernels
~~~~~~~~~~~~~~~~~~~

Calendar families reduced to their rules: which years are leap years and how
many days each month has.  Everything else in the package is derived from a
kernel, so a new family only has to implement the ``Kernel`` interface.

Basic usage::

    from calendrical.kernels import GREGORIAN_KERNEL

    GREGORIAN_KERNEL.is_leap_year(1900)          # → False
    GREGORIAN_KERNEL.count_days_in_month(2024, 2)   # → 29

Public API
----------
Kernel            Abstract rule set.
GJKernel          Month layout shared by the Julian and Gregorian families.
GregorianKernel   Gregorian rules; ``GREGORIAN_KERNEL`` is the shared instance.
JulianKernel      Julian rules; ``JULIAN_KERNEL`` is the shared instance.
Coptic12Kernel    Coptic rules, epagomenal days folded into month 12.
"""

from __future__ import annotations

from calendrical.kernels.coptic import COPTIC12_KERNEL, Coptic12Kernel
from calendrical.kernels.gregorian import GREGORIAN_KERNEL, GregorianKernel
from calendrical.kernels.julian import JULIAN_KERNEL, JulianKernel
from calendrical.kernels.kernel import GJKernel, Kernel

__all__ = [
    "Kernel",
    "GJKernel",
    "GregorianKernel",
    "JulianKernel",
    "Coptic12Kernel",
    "GREGORIAN_KERNEL",
    "JULIAN_KERNEL",
    "COPTIC12_KERNEL",
]

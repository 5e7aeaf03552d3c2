"""
calendrical.schemas
~~~~~~~~~~~~~~~~~~~

Day-offset arithmetic for a calendar family.  A schema converts between
(year, month, day), (year, day-of-year) and a count of days since the epoch,
using one of two interchangeable strategies:

* ``ArithmeticalSchema`` evaluates the kernel's closed-form formula.
* ``LookupSchema`` reads cumulative tables precomputed from month lengths.

Basic usage::

    from calendrical.kernels import GREGORIAN_KERNEL
    from calendrical.schemas import get_schema

    schema = get_schema(GREGORIAN_KERNEL, "lookup")
    schema.date_to_day_of_year(2024, 3, 1)     # → 61
    schema.day_of_year_to_date(2024, 61)       # → (3, 1)

``get_schema`` hands out one shared instance per (kernel, strategy) pair.
When no strategy is given, ``CALENDRICAL_SCHEMA_STRATEGY`` (read once, at
import) decides.
"""

from __future__ import annotations

import logging
from threading import Lock

from calendrical import _config
from calendrical.kernels import Kernel

from .arithmetical import ArithmeticalSchema
from .lookup import LookupSchema
from .schema import Schema, Strategy

logger = logging.getLogger(__name__)

registry: dict[Strategy, type[Schema]] = {
    Strategy.ARITHMETICAL: ArithmeticalSchema,
    Strategy.LOOKUP: LookupSchema,
}

_schemas: dict[tuple[Kernel, Strategy], Schema] = {}
_lock = Lock()


def get_schema(kernel: Kernel, strategy: Strategy | str | None = None) -> Schema:
    strategy = Strategy(strategy if strategy is not None else _config.DEFAULT_STRATEGY_NAME)
    key = (kernel, strategy)
    schema = _schemas.get(key)
    if schema is None:
        with _lock:
            schema = _schemas.get(key)
            if schema is None:
                schema = registry[strategy](kernel)
                _schemas[key] = schema
                logger.debug(f"Created {schema!r} ({strategy.value})")
    return schema


__all__ = [
    "Schema",
    "Strategy",
    "ArithmeticalSchema",
    "LookupSchema",
    "get_schema",
]

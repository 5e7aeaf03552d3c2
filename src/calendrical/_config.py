from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

STRATEGY_ENV_VAR = "CALENDRICAL_SCHEMA_STRATEGY"
DEFAULT_STRATEGY = "lookup"
_KNOWN_STRATEGIES = ("lookup", "arithmetical")


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    return v if v else default


def default_strategy_name() -> str:
    """Strategy used by the built-in calendars, from the environment."""
    name = _env_str(STRATEGY_ENV_VAR, DEFAULT_STRATEGY)
    if name not in _KNOWN_STRATEGIES:
        logger.warning(
            f"Unknown {STRATEGY_ENV_VAR}={name!r}, defaulting to {DEFAULT_STRATEGY!r}"
        )
        return DEFAULT_STRATEGY
    return name


# Resolved once; get_schema and the built-in calendars share it.
DEFAULT_STRATEGY_NAME = default_strategy_name()

"""
Centralized configuration for the grouping core.

Settings come from environment variables. Loading .env files is left to the
caller (see the root conftest.py), this module only reads os.environ.
"""

import logging
import os
from typing import Optional

from .enums import Strategy

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = Strategy.hill_climbing


def get_worker_count() -> int:
    """Worker threads per strategy run from TZGROUPS_WORKERS (default: CPU count)."""
    value = os.getenv("TZGROUPS_WORKERS")
    if value:
        try:
            return max(1, int(value))
        except ValueError:
            logger.warning(f"Ignoring invalid TZGROUPS_WORKERS={value!r}")
    return max(1, os.cpu_count() or 1)


def get_default_strategy() -> Strategy:
    """Strategy used when a caller doesn't pick one (TZGROUPS_DEFAULT_STRATEGY)."""
    value = os.getenv("TZGROUPS_DEFAULT_STRATEGY", "").strip().lower()
    if not value:
        return DEFAULT_STRATEGY
    try:
        return Strategy(value)
    except ValueError:
        logger.warning(
            f"Unknown TZGROUPS_DEFAULT_STRATEGY={value!r}, using {DEFAULT_STRATEGY.value}"
        )
        return DEFAULT_STRATEGY


def get_seed() -> Optional[int]:
    """Fixed random seed from TZGROUPS_SEED, for reproducible runs."""
    value = os.getenv("TZGROUPS_SEED")
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring invalid TZGROUPS_SEED={value!r}")
        return None


def configure_logging(level: Optional[str] = None) -> None:
    """
    Set up basic logging for scripts and services embedding the core.

    The library itself never installs handlers. Level comes from the argument,
    then TZGROUPS_LOG_LEVEL, then INFO.
    """
    level = (level or os.getenv("TZGROUPS_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

"""Enum definitions for the grouping core."""

import enum


class Strategy(str, enum.Enum):
    """Assignment strategies available to create_groups."""
    random_search = "random_search"
    hill_climbing = "hill_climbing"
    min_max = "min_max"

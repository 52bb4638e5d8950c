"""Assignment strategies that partition a roster into groups."""

from .base import AssignmentStrategy, Group, SearchResult
from .hill_climbing import HillClimbingStrategy
from .min_max import MinMaxStrategy
from .random_search import RandomSearchStrategy

__all__ = [
    "AssignmentStrategy",
    "Group",
    "SearchResult",
    "HillClimbingStrategy",
    "MinMaxStrategy",
    "RandomSearchStrategy",
]

"""
Timezone-aware group formation - platform-agnostic.
Can be used by a web API, a bot, or any other interface that passes tokens.
"""

# Constants
from .constants import DAY_NAMES, HOURS_PER_WEEK

# Errors
from .errors import (
    GroupingError, InvalidAvailabilityError, InvalidNameError,
    UnknownStrategyError, UnknownTimezoneError,
)

# Availability and people
from .availability import WeekAvailability, week_hour
from .person import Person

# Timezone utilities
from .timezone import is_valid_timezone, offset_hours, timezones, utc_offset_hours

# Scoring heuristics
from .scoring import compliance_score, overlap_consecutive_score, team_compliance

# Strategies
from .enums import Strategy
from .scheduling import (
    AssignmentStrategy, Group, SearchResult,
    HillClimbingStrategy, MinMaxStrategy, RandomSearchStrategy,
)

# Entry points
from .grouping import create_groups, get_strategy, schedule_groups

__all__ = [
    # Constants
    'DAY_NAMES', 'HOURS_PER_WEEK',
    # Errors
    'GroupingError', 'InvalidAvailabilityError', 'InvalidNameError',
    'UnknownStrategyError', 'UnknownTimezoneError',
    # Availability and people
    'WeekAvailability', 'week_hour', 'Person',
    # Timezone
    'is_valid_timezone', 'offset_hours', 'timezones', 'utc_offset_hours',
    # Scoring
    'compliance_score', 'overlap_consecutive_score', 'team_compliance',
    # Strategies
    'Strategy', 'AssignmentStrategy', 'Group', 'SearchResult',
    'HillClimbingStrategy', 'MinMaxStrategy', 'RandomSearchStrategy',
    # Entry points
    'create_groups', 'get_strategy', 'schedule_groups',
]

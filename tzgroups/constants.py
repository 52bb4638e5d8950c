"""
Shared constants used across the grouping core.
"""

# Day name list for ordering (week-hour 0 is Monday 00:00)
DAY_NAMES = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

HOURS_PER_DAY = 24
DAYS_PER_WEEK = len(DAY_NAMES)
HOURS_PER_WEEK = HOURS_PER_DAY * DAYS_PER_WEEK  # 168

# Storage layout of an availability bitset inside an encoded token.
# Hour i lives in word i // WORD_BITS at bit i % WORD_BITS (LSB first).
# Changing either value breaks every token already handed out.
WORD_BITS = 32
WORD_COUNT = -(-HOURS_PER_WEEK // WORD_BITS)  # 6
WORD_MAX = (1 << WORD_BITS) - 1

# Separator between fields of a decoded token payload
TOKEN_SEPARATOR = "|"
TOKEN_FIELD_COUNT = 2 + WORD_COUNT  # name, timezone, words

# Overlap-consecutive score: runs of fully-attended hours are rewarded up to
# this length; anything shorter counts as a single hour.
MAX_REWARDED_CONSECUTIVE_HOURS = 4

# Compliance score: common hours beyond this add nothing.
SUFFICIENT_COMMON_HOURS = 40

# Search budgets
RANDOM_SEARCH_ITERATIONS = 100_000
HILL_CLIMBING_STARTING_POINTS = 100
HILL_CLIMBING_PATIENCE = 1_000
MIN_MAX_RESTARTS = 100
MIN_MAX_MAX_PASSES = 20

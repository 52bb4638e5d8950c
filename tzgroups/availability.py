"""
Weekly availability bitsets.

A profile is 168 bits, one per hour of the week, starting Monday 00:00 in the
timezone the profile was declared in. Bit set = available.

Handles conversion between:
- Binary strings: "1000...0" (168 chars, Monday 00:00 first)
- Storage words: 6 unsigned 32-bit integers, LSB first (the token layout)
- Hour lists: [0, 7, 8, 9]

Shifting a profile into another timezone is a circular rotation, so hours
pushed past Sunday 23:00 come back in on Monday 00:00 instead of falling off.
"""

from dataclasses import dataclass
from typing import Iterable

from .constants import DAY_NAMES, HOURS_PER_DAY, HOURS_PER_WEEK, WORD_BITS, WORD_COUNT, WORD_MAX
from .errors import InvalidAvailabilityError

FULL_WEEK_MASK = (1 << HOURS_PER_WEEK) - 1


def week_hour(day_name: str, hour: int) -> int:
    """
    Convert a day name and hour of day into a week-hour index.

    Args:
        day_name: Name of the day (e.g., "Tuesday")
        hour: Hour in 24-hour format (0-23)

    Returns:
        Week-hour index (Monday 00:00 = 0, Tuesday 09:00 = 33)
    """
    return DAY_NAMES.index(day_name) * HOURS_PER_DAY + hour


def _rotate_left(mask: int, positions: int) -> int:
    positions %= HOURS_PER_WEEK
    if positions == 0:
        return mask
    return ((mask >> positions) | (mask << (HOURS_PER_WEEK - positions))) & FULL_WEEK_MASK


@dataclass(frozen=True)
class WeekAvailability:
    """One week of hourly availability, stored as a 168-bit integer."""

    mask: int = 0

    def __post_init__(self):
        if not isinstance(self.mask, int) or isinstance(self.mask, bool):
            raise InvalidAvailabilityError(f"Availability mask must be an int, got {type(self.mask).__name__}")
        if self.mask < 0 or self.mask > FULL_WEEK_MASK:
            raise InvalidAvailabilityError("Availability mask has bits outside the week")

    @classmethod
    def from_binary_string(cls, availability: str) -> "WeekAvailability":
        """
        Parse a 168-character string of '0'/'1' (Monday 00:00 first).

        Raises:
            InvalidAvailabilityError: wrong length or a character other than '0'/'1'
        """
        if not isinstance(availability, str) or len(availability) != HOURS_PER_WEEK:
            raise InvalidAvailabilityError(
                f"Availability must be exactly {HOURS_PER_WEEK} characters"
            )
        if not set(availability) <= {"0", "1"}:
            raise InvalidAvailabilityError("Availability may only contain '0' and '1'")

        # Character i is bit i, so the string reads least-significant bit first
        return cls(int(availability[::-1], 2))

    @classmethod
    def from_words(cls, words: Iterable[int]) -> "WeekAvailability":
        """
        Rebuild a profile from its storage words.

        Raises:
            InvalidAvailabilityError: wrong word count, a word outside 32 bits,
                or bits set past the last hour of the week
        """
        words = list(words)
        if len(words) != WORD_COUNT:
            raise InvalidAvailabilityError(f"Expected {WORD_COUNT} words, got {len(words)}")

        mask = 0
        for index, word in enumerate(words):
            if not isinstance(word, int) or word < 0 or word > WORD_MAX:
                raise InvalidAvailabilityError(f"Word {index} is not a {WORD_BITS}-bit unsigned integer")
            mask |= word << (index * WORD_BITS)

        if mask > FULL_WEEK_MASK:
            raise InvalidAvailabilityError("Availability has bits set past the end of the week")
        return cls(mask)

    @classmethod
    def from_hours(cls, hours: Iterable[int]) -> "WeekAvailability":
        """Build a profile with the given week-hour indices set (taken modulo 168)."""
        mask = 0
        for hour in hours:
            mask |= 1 << (hour % HOURS_PER_WEEK)
        return cls(mask)

    @classmethod
    def all_available(cls) -> "WeekAvailability":
        return cls(FULL_WEEK_MASK)

    @classmethod
    def none_available(cls) -> "WeekAvailability":
        return cls(0)

    def words(self) -> tuple[int, ...]:
        """Storage words backing the bitset, LSB first."""
        return tuple(
            (self.mask >> (index * WORD_BITS)) & WORD_MAX
            for index in range(WORD_COUNT)
        )

    def rotated(self, offset_hours: int) -> "WeekAvailability":
        """
        Rotate the week by offset_hours.

        A positive offset rotates left (the viewing timezone is behind the
        declaring one, so every hour moves earlier); a negative offset rotates
        right. Hour 0 rotated left by one lands on hour 167.
        """
        return WeekAvailability(_rotate_left(self.mask, offset_hours))

    def to_binary_string(self, offset_hours: int = 0) -> str:
        """168-character '0'/'1' view of the week after rotating by offset_hours."""
        mask = _rotate_left(self.mask, offset_hours)
        return format(mask, f"0{HOURS_PER_WEEK}b")[::-1]

    def hours(self) -> list[int]:
        """Ascending list of week-hour indices that are set."""
        result = []
        mask = self.mask
        while mask:
            lowest = mask & -mask
            result.append(lowest.bit_length() - 1)
            mask ^= lowest
        return result

    def count(self) -> int:
        """Number of available hours in the week."""
        return self.mask.bit_count()

    def is_available(self, hour: int) -> bool:
        return bool((self.mask >> (hour % HOURS_PER_WEEK)) & 1)

    def __and__(self, other: "WeekAvailability") -> "WeekAvailability":
        if not isinstance(other, WeekAvailability):
            return NotImplemented
        return WeekAvailability(self.mask & other.mask)

    def __or__(self, other: "WeekAvailability") -> "WeekAvailability":
        if not isinstance(other, WeekAvailability):
            return NotImplemented
        return WeekAvailability(self.mask | other.mask)

    def __len__(self) -> int:
        return HOURS_PER_WEEK

    def __str__(self) -> str:
        return self.to_binary_string()

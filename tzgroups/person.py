"""
Person records and their token encoding.

A token is everything needed to rebuild a person, packed into one string:

    base64("<name>|<timezone>|<w0>|<w1>|<w2>|<w3>|<w4>|<w5>")

where w0..w5 are the decimal storage words of the availability bitset
(32 bits each, hour 0 in the lowest bit of w0). Tokens are the only state
the core exchanges with its callers.
"""

import base64
import binascii
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .availability import WeekAvailability
from .constants import TOKEN_FIELD_COUNT, TOKEN_SEPARATOR
from .errors import GroupingError, InvalidNameError, UnknownTimezoneError
from .timezone import is_valid_timezone, offset_hours

UTC = "UTC"


@dataclass(frozen=True)
class Person:
    """A person to be grouped, with availability in their own timezone."""
    name: str
    timezone: str
    availability: WeekAvailability

    def __post_init__(self):
        if not isinstance(self.name, str) or TOKEN_SEPARATOR in self.name:
            raise InvalidNameError(f"Name may not contain {TOKEN_SEPARATOR!r}")
        if not is_valid_timezone(self.timezone):
            raise UnknownTimezoneError(f"Unknown timezone: {self.timezone!r}")

    @classmethod
    def new(cls, name: str, timezone: str, availability: str) -> Optional["Person"]:
        """
        Create a person from a binary availability string.

        Args:
            name: Display name
            timezone: Timezone the availability is expressed in (e.g., "Europe/Berlin")
            availability: 168 characters of '0'/'1', Monday 00:00 first

        Returns:
            Person, or None if the availability or timezone is invalid
        """
        try:
            return cls(name, timezone, WeekAvailability.from_binary_string(availability))
        except GroupingError:
            return None

    @classmethod
    def decode(cls, token: str) -> Optional["Person"]:
        """
        Rebuild a person from a token produced by encode().

        Returns:
            Person, or None if the token doesn't describe a valid person
        """
        if not isinstance(token, str):
            return None

        try:
            payload = base64.b64decode(token, validate=True).decode("utf-8")
        except (binascii.Error, ValueError):
            # UnicodeDecodeError is a ValueError
            return None

        pieces = payload.split(TOKEN_SEPARATOR)
        if len(pieces) != TOKEN_FIELD_COUNT:
            return None

        name, timezone, *word_strings = pieces
        if not all(w.isascii() and w.isdigit() for w in word_strings):
            return None

        try:
            availability = WeekAvailability.from_words(int(w) for w in word_strings)
            return cls(name, timezone, availability)
        except GroupingError:
            return None

    def encode(self) -> str:
        """Encode this person into a token."""
        fields = [self.name, self.timezone, *(str(w) for w in self.availability.words())]
        payload = TOKEN_SEPARATOR.join(fields)
        return base64.b64encode(payload.encode("utf-8")).decode("ascii")

    def availability_in_timezone(self, timezone: str, now: Optional[datetime] = None) -> Optional[str]:
        """
        Availability as a 168-character '0'/'1' string seen from another timezone.

        Args:
            timezone: Timezone to view the week from
            now: Instant used to resolve both UTC offsets (default: current time)

        Returns:
            Binary string, or None if the timezone is unknown
        """
        if not is_valid_timezone(timezone):
            return None
        return self.availability.to_binary_string(offset_hours(self.timezone, timezone, now))

    def availability_in_utc(self, now: Optional[datetime] = None) -> WeekAvailability:
        """Availability rotated into UTC, the frame all scoring happens in."""
        return self.availability.rotated(offset_hours(self.timezone, UTC, now))

"""
Exceptions raised inside the grouping core.

Public record-level operations (decoding tokens, building people) turn these
into None; they only escape from the lower-level helpers.
"""


class GroupingError(Exception):
    """Base exception for grouping errors."""
    pass


class InvalidAvailabilityError(GroupingError, ValueError):
    """Availability is not a 168-hour binary profile."""
    pass


class UnknownTimezoneError(GroupingError, ValueError):
    """Timezone identifier is not in the timezone database."""
    pass


class UnknownStrategyError(GroupingError, ValueError):
    """No assignment strategy is registered under this name."""
    pass


class InvalidNameError(GroupingError, ValueError):
    """Name contains the token field separator."""
    pass

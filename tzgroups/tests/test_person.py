"""Tests for Person records and token encoding."""

import base64

import pytest

from tzgroups.errors import InvalidNameError, UnknownTimezoneError
from tzgroups.person import Person
from tzgroups.tests.conftest import PAIRED_TOKENS, REALISTIC_TOKENS, WINTER

EMPTY_WEEK = "0" * 168
COMPLEX_WEEK = (
    "100000000000000000000000000000000001111000000000000000000000000111100000"
    "000000110000001000000000000000000000111111100000011000001100000000000000"
    "000000111111000000000000"
)


def _b64(text):
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class TestRoundTrip:
    def test_empty_week(self):
        """An all-zero profile survives encode/decode."""
        person = Person.new("Simple", "America/Los_Angeles", EMPTY_WEEK)
        assert Person.decode(person.encode()) == person

    def test_complex_week(self):
        """A scattered profile survives encode/decode."""
        person = Person.new("Complex", "America/Los_Angeles", COMPLEX_WEEK)
        decoded = Person.decode(person.encode())
        assert decoded == person
        assert decoded.availability.to_binary_string() == COMPLEX_WEEK

    def test_unicode_name(self):
        person = Person.new("Iván Müller ", "Europe/Berlin", COMPLEX_WEEK)
        assert Person.decode(person.encode()).name == "Iván Müller "

    @pytest.mark.parametrize("token", PAIRED_TOKENS + REALISTIC_TOKENS)
    def test_known_tokens_reencode_identically(self, token):
        """Tokens handed out earlier decode and re-encode to the same text."""
        person = Person.decode(token)
        assert person is not None
        assert person.encode() == token


class TestDecode:
    def test_known_token_fields(self):
        """Test1 is free Monday 07:00-10:59 in Africa/Abidjan."""
        person = Person.decode(PAIRED_TOKENS[0])
        assert person.name == "Test1"
        assert person.timezone == "Africa/Abidjan"
        assert person.availability.hours() == [7, 8, 9, 10]

    @pytest.mark.parametrize(
        "token",
        [
            "",
            _b64("hi|111"),
            _b64("hi|yo|111"),
            _b64("hi|UTC|1|2|3|4|5|6|7"),
            _b64("hi|Not/AZone|0|0|0|0|0|0"),
            _b64("hi|UTC|x|0|0|0|0|0"),
            _b64("hi|UTC|-1|0|0|0|0|0"),
            _b64("hi|UTC|4294967296|0|0|0|0|0"),
            _b64("hi|UTC|0|0|0|0|0|256"),
            base64.b64encode(b"\xff\xfe|UTC|0|0|0|0|0|0").decode("ascii"),
            "not base64!",
            "é" * 8,
        ],
    )
    def test_rejects_malformed_tokens(self, token):
        """Malformed tokens decode to None rather than raising."""
        assert Person.decode(token) is None

    def test_rejects_non_string(self):
        assert Person.decode(None) is None


class TestNew:
    def test_rejects_long_availability(self):
        assert Person.new("A", "UTC", "1" * 169) is None

    def test_rejects_unknown_timezone(self):
        assert Person.new("A", "Invalid/Zone", EMPTY_WEEK) is None

    def test_rejects_non_binary_character(self):
        assert Person.new("A", "UTC", "x" + "0" * 167) is None

    def test_rejects_separator_in_name(self):
        """A '|' in the name would break the token layout."""
        assert Person.new("A|B", "UTC", EMPTY_WEEK) is None

    def test_constructor_raises_narrow_errors(self):
        """Direct construction raises instead of returning None."""
        availability = Person.new("A", "UTC", EMPTY_WEEK).availability
        with pytest.raises(InvalidNameError):
            Person("A|B", "UTC", availability)
        with pytest.raises(UnknownTimezoneError):
            Person("A", "Invalid/Zone", availability)


class TestAvailabilityInTimezone:
    def test_same_timezone_is_unchanged(self):
        person = Person.new("A", "America/Los_Angeles", COMPLEX_WEEK)
        assert person.availability_in_timezone("America/Los_Angeles", WINTER) == COMPLEX_WEEK

    def test_los_angeles_to_anchorage(self):
        """Monday 00:00 in Los Angeles is Sunday 23:00 in Anchorage."""
        person = Person.new("A", "America/Los_Angeles", "1" + "0" * 167)
        view = person.availability_in_timezone("America/Anchorage", WINTER)
        assert view == "0" * 167 + "1"

    def test_los_angeles_to_anchorage_second_hour(self):
        """Monday 01:00 in Los Angeles is Monday 00:00 in Anchorage."""
        person = Person.new("A", "America/Los_Angeles", "01" + "0" * 166)
        view = person.availability_in_timezone("America/Anchorage", WINTER)
        assert view == "1" + "0" * 167

    def test_los_angeles_to_boise(self):
        """Sunday 23:00 in Los Angeles is Monday 00:00 in Boise."""
        person = Person.new("A", "America/Los_Angeles", "0" * 167 + "1")
        view = person.availability_in_timezone("America/Boise", WINTER)
        assert view == "1" + "0" * 167

    def test_los_angeles_to_boise_second_to_last_hour(self):
        person = Person.new("A", "America/Los_Angeles", "0" * 166 + "10")
        view = person.availability_in_timezone("America/Boise", WINTER)
        assert view == "0" * 167 + "1"

    def test_conversion_is_reversible(self):
        """Viewing from Tokyo and converting back gives the same week back."""
        person = Person.new("A", "Europe/Berlin", COMPLEX_WEEK)
        tokyo_view = person.availability_in_timezone("Asia/Tokyo", WINTER)
        back = Person.new("A", "Asia/Tokyo", tokyo_view).availability_in_timezone("Europe/Berlin", WINTER)
        assert back == COMPLEX_WEEK

    def test_unknown_timezone_returns_none(self):
        person = Person.new("A", "UTC", COMPLEX_WEEK)
        assert person.availability_in_timezone("Invalid/Zone", WINTER) is None

    def test_utc_view_matches_string_view(self):
        """availability_in_utc agrees with the binary view from UTC."""
        person = Person.new("A", "Asia/Tokyo", COMPLEX_WEEK)
        assert person.availability_in_utc(WINTER).to_binary_string() == person.availability_in_timezone("UTC", WINTER)

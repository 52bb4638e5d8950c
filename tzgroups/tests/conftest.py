"""Shared fixtures for grouping tests: token rosters and a synthetic roster builder."""

import random
from datetime import datetime, timezone

import pytest

from tzgroups.person import Person

# Fixed winter instant so DST never moves offsets under the tests
WINTER = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
SUMMER = datetime(2024, 7, 10, 12, 0, tzinfo=timezone.utc)

# Eight people in UTC+0, two per 4-hour Monday block (07-10, 11-14, 15-18, 19-22)
PAIRED_TOKENS = [
    "VGVzdDF8QWZyaWNhL0FiaWRqYW58MTkyMHwwfDB8MHwwfDA=",
    "VGVzdDN8QWZyaWNhL0FiaWRqYW58MzA3MjB8MHwwfDB8MHww",
    "VGVzdDV8QWZyaWNhL0FiaWRqYW58NDkxNTIwfDB8MHwwfDB8MA==",
    "VGVzdDd8QWZyaWNhL0FiaWRqYW58Nzg2NDMyMHwwfDB8MHwwfDA=",
    "VGVzdDJ8QWZyaWNhL0FiaWRqYW58MTkyMHwwfDB8MHwwfDA=",
    "VGVzdDR8QWZyaWNhL0FiaWRqYW58MzA3MjB8MHwwfDB8MHww",
    "VGVzdDZ8QWZyaWNhL0FiaWRqYW58NDkxNTIwfDB8MHwwfDB8MA==",
    "VGVzdDh8QWZyaWNhL0FiaWRqYW58Nzg2NDMyMHwwfDB8MHwwfDA=",
]

# Nine people across five timezones, as submitted through the signup form
REALISTIC_TOKENS = [
    "TG91aXMgQ2hpbHVtYmF8QWZyaWNhL0pvaGFubmVzYnVyZ3wwfDB8MjAxMzI2NjA0MHwwfDB8MA==",
    "SXbDoW4gTWF4aW1pbGlhbm8gTW9udGUgfEFtZXJpY2EvQnVlbm9zX0FpcmVzfDc4NjQzMjB8MzA3MjB8MjAxMzI2NjA0MHwyMTU1MzQ3OTY4fDd8MA==",
    "VmxhZGlzbG92YXMgS2FyYWxpdXN8RXVyb3BlL1ZpbG5pdXN8Nzg2NDMyMHwzMDcyMHwyMDEzMjY2MDQwfDc4NjQzMjB8MzI3NjB8MA==",
    "QW1hbmRhIENvbGV8QW1lcmljYS9EZW52ZXJ8MHwxMjU4NTk4NDB8MjAxMzc1NzU2MHwwfDB8MA==",
    "THkgRGFuZ3xBbWVyaWNhL0RlbnZlcnw0OTE1MjB8MjE0NzQ4NTU2OHw3fDB8MHww",
    "VmlvbGEgRm9uZ3xBbWVyaWNhL0xvc19BbmdlbGVzfDIxNDgwMDU4ODh8MjI3MzMxNDY5NXwxMjd8ODM4ODQ4MHwwfDA=",
    "RW1tYW51ZWwgREsgRG9sb3xBZnJpY2EvQWNjcmF8Nzg2NDMyMHwzMDcyMHwyMDEzMjY2MDQwfDc4NjQzMjB8MzA3MjB8MA==",
    "TW9uaXF1ZSBSb2JlcnRzfEFtZXJpY2EvRGVudmVyfDc4NjQzMjB8MzA3MjB8MTI1ODI5MTIwfDB8MHww",
    "U3RldmVuIEZvc3RlcnxBbWVyaWNhL0RlbnZlcnwwfDMwNzIwfDIwMTMyNjYwNDB8MHwwfDA=",
]

ROSTER_TIMEZONES = [
    "America/Los_Angeles",
    "America/New_York",
    "Europe/London",
    "Europe/Berlin",
    "Asia/Tokyo",
    "Australia/Sydney",
]


def random_day(rng: random.Random) -> str:
    """Night off, four random 4-hour blocks from 07:00, then 23:00 off."""
    blocks = "".join(rng.choice(["1111", "0000"]) for _ in range(4))
    return "0" * 7 + blocks + "0"


def random_roster(count: int, seed: int = 0) -> list[Person]:
    """Synthetic people with block-structured availability in assorted timezones."""
    rng = random.Random(seed)
    people = []
    for index in range(count):
        availability = "".join(random_day(rng) for _ in range(7))
        people.append(Person.new(f"Person {index}", rng.choice(ROSTER_TIMEZONES), availability))
    return people


@pytest.fixture
def paired_tokens():
    return list(PAIRED_TOKENS)


@pytest.fixture
def paired_people():
    return [Person.decode(token) for token in PAIRED_TOKENS]


@pytest.fixture
def realistic_tokens():
    return list(REALISTIC_TOKENS)


@pytest.fixture
def realistic_people():
    return [Person.decode(token) for token in REALISTIC_TOKENS]


@pytest.fixture
def make_roster():
    """Factory fixture: make_roster(count, seed=0) -> list[Person]."""
    return random_roster

"""
Shared pieces of the assignment strategies.

A partition is an ordering of people (indices into the roster) cut into
consecutive blocks of group_size; the last block may be smaller. Strategies
search over orderings and hand the best one to build_groups.

Independent trials fan out over a thread pool. Trials are pure Python and
hold the GIL, so the pool does not add CPU parallelism; it exists so the
search can run off an event loop (schedule_groups) without blocking it.
Each trial gets its own random.Random, derived from the caller's generator
before any work starts, so a seeded run gives the same answer whatever the
worker count.
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence, TypeVar

from ..availability import WeekAvailability
from ..config import get_worker_count
from ..person import Person

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class Group:
    """A group of people (as tokens) with suggested meeting hours."""
    members: list  # encoded tokens, sorted
    suggested_hours: list  # UTC week-hour indices, 0 = Monday 00:00 UTC

    def percent_at_suggested_hours(self, now: Optional[datetime] = None) -> float:
        """
        Fraction of members available at the first suggested hour.

        Suggested hours are where the most members overlap, which is not
        always everyone.
        """
        people = [p for p in (Person.decode(t) for t in self.members) if p is not None]
        if not people or not self.suggested_hours:
            return 0.0

        hour = self.suggested_hours[0]
        available = sum(1 for p in people if p.availability_in_utc(now).is_available(hour))
        return available / len(people)


@dataclass
class SearchResult:
    """Best partition found by a strategy, with diagnostics."""
    groups: list  # list of Group
    score: float
    score_histories: list = field(default_factory=list)  # one score trajectory per start


def chunk(order: Sequence[int], group_size: int) -> list[list[int]]:
    """Cut an ordering into consecutive blocks of group_size."""
    return [list(order[i:i + group_size]) for i in range(0, len(order), group_size)]


def utc_availabilities(people: Sequence[Person], now: Optional[datetime] = None) -> list[WeekAvailability]:
    """Everyone's availability in UTC, all resolved at the same instant."""
    if now is None:
        now = datetime.now(timezone.utc)
    return [person.availability_in_utc(now) for person in people]


def build_groups(
    people: Sequence[Person],
    order: Sequence[int],
    group_size: int,
    suggested_hours: Sequence[Sequence[int]],
) -> list[Group]:
    """
    Turn an ordering into output groups.

    Members are sorted by token and groups by their first token. The sort only
    makes results comparable in tests; it is not a ranking.
    """
    groups = []
    for indices, hours in zip(chunk(order, group_size), suggested_hours):
        members = sorted(people[i].encode() for i in indices)
        groups.append(Group(members=members, suggested_hours=list(hours)))

    groups.sort(key=lambda g: g.members[0])
    return groups


def spawn_rngs(rng: random.Random, count: int) -> list[random.Random]:
    """Independent generators for count trials, drawn from rng up front."""
    return [random.Random(rng.getrandbits(64)) for _ in range(count)]


def fan_out(fn: Callable[[T], R], items: Sequence[T], workers: int) -> list[R]:
    """
    Apply fn to every item, in parallel when workers > 1.

    Results come back in item order. Falls back to a plain loop if threads
    can't be started.
    """
    if workers <= 1 or len(items) <= 1:
        return [fn(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(workers, len(items))) as executor:
        try:
            futures = [executor.submit(fn, item) for item in items]
        except RuntimeError as e:
            # "can't start new thread" in sandboxed or constrained environments
            logger.warning(f"Thread pool unavailable ({e}), running trials sequentially")
            futures = None
        if futures is not None:
            return [future.result() for future in futures]

    return [fn(item) for item in items]


class AssignmentStrategy:
    """
    Base class for strategies that partition people into groups.

    Subclasses implement search(); run() returns just the groups.
    """

    name = "base"

    def __init__(self, workers: Optional[int] = None):
        self.workers = workers if workers is not None else get_worker_count()

    def run(
        self,
        people: Sequence[Person],
        group_size: int,
        rng: Optional[random.Random] = None,
        now: Optional[datetime] = None,
    ) -> list[Group]:
        """Best grouping of people into groups of group_size."""
        return self.search(people, group_size, rng=rng, now=now).groups

    def search(
        self,
        people: Sequence[Person],
        group_size: int,
        rng: Optional[random.Random] = None,
        now: Optional[datetime] = None,
    ) -> SearchResult:
        raise NotImplementedError

    @staticmethod
    def _is_noop(people: Sequence[Person], group_size: int) -> bool:
        return not people or group_size <= 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(workers={self.workers})"

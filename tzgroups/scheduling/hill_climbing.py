"""
Hill climbing with random restarts.

Each start shuffles the roster, then proposes swaps of two random positions
in the ordering. A swap is kept only if it strictly raises the total
overlap-consecutive score; the climb stops after `patience` proposals in a
row fail to improve.

Only the two groups touched by a swap are rescored.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..availability import WeekAvailability
from ..constants import HILL_CLIMBING_PATIENCE, HILL_CLIMBING_STARTING_POINTS
from ..person import Person
from ..scoring import GroupScore, overlap_consecutive_score, partition_overlap_score
from .base import AssignmentStrategy, SearchResult, build_groups, fan_out, spawn_rngs, utc_availabilities

logger = logging.getLogger(__name__)


@dataclass
class ClimbResult:
    score: int
    order: list
    history: list  # total score at start and after every accepted swap


def _score_block(
    availabilities: Sequence[WeekAvailability],
    order: Sequence[int],
    group_index: int,
    group_size: int,
) -> GroupScore:
    start = group_index * group_size
    return overlap_consecutive_score([availabilities[i] for i in order[start:start + group_size]])


def climb(
    availabilities: Sequence[WeekAvailability],
    group_size: int,
    rng: random.Random,
    patience: int = HILL_CLIMBING_PATIENCE,
) -> ClimbResult:
    """
    Run one climb from a random ordering.

    Args:
        availabilities: UTC availability per person
        group_size: Target group size
        rng: Generator owned by this climb
        patience: Consecutive failed proposals before stopping

    Returns:
        ClimbResult with the final ordering and its score trajectory
    """
    people_count = len(availabilities)
    order = list(range(people_count))
    rng.shuffle(order)

    total, group_scores = partition_overlap_score(availabilities, order, group_size)
    block_scores = [g.score for g in group_scores]
    history = [total]

    if people_count < 2:
        return ClimbResult(score=total, order=order, history=history)

    misses = 0
    while misses < patience:
        a = rng.randrange(people_count)
        b = rng.randrange(people_count)
        group_a = a // group_size
        group_b = b // group_size

        # Same-group swaps can't change any score
        if group_a == group_b:
            misses += 1
            continue

        order[a], order[b] = order[b], order[a]
        new_a = _score_block(availabilities, order, group_a, group_size).score
        new_b = _score_block(availabilities, order, group_b, group_size).score
        candidate = total - block_scores[group_a] - block_scores[group_b] + new_a + new_b

        if candidate > total:
            total = candidate
            block_scores[group_a] = new_a
            block_scores[group_b] = new_b
            history.append(total)
            misses = 0
        else:
            order[a], order[b] = order[b], order[a]
            misses += 1

    return ClimbResult(score=total, order=order, history=history)


class HillClimbingStrategy(AssignmentStrategy):
    """Best of several random-restart hill climbs."""

    name = "hill_climbing"

    def __init__(
        self,
        starting_points: int = HILL_CLIMBING_STARTING_POINTS,
        patience: int = HILL_CLIMBING_PATIENCE,
        workers: Optional[int] = None,
    ):
        super().__init__(workers=workers)
        self.starting_points = max(1, starting_points)
        self.patience = max(0, patience)

    def search(
        self,
        people: Sequence[Person],
        group_size: int,
        rng: Optional[random.Random] = None,
        now: Optional[datetime] = None,
    ) -> SearchResult:
        if self._is_noop(people, group_size):
            return SearchResult(groups=[], score=0)

        rng = rng or random.Random()
        availabilities = utc_availabilities(people, now)

        climbs = fan_out(
            lambda start_rng: climb(availabilities, group_size, start_rng, self.patience),
            spawn_rngs(rng, self.starting_points),
            self.workers,
        )

        # max() keeps the first of equal scores, so ties go to the earliest start
        best = max(climbs, key=lambda c: c.score)
        score, group_scores = partition_overlap_score(availabilities, best.order, group_size)

        logger.debug(
            f"Hill climbing: {self.starting_points} starts, best score {score} "
            f"after {len(best.history) - 1} accepted swaps"
        )
        return SearchResult(
            groups=build_groups(people, best.order, group_size, [g.suggested_hours for g in group_scores]),
            score=score,
            score_histories=[c.history for c in climbs],
        )

    def __repr__(self) -> str:
        return (
            f"HillClimbingStrategy(starting_points={self.starting_points}, "
            f"patience={self.patience}, workers={self.workers})"
        )

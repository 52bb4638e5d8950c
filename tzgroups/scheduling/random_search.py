"""
Random search strategy.

Scores a large number of independent random partitions with the
overlap-consecutive heuristic and keeps the best one.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..availability import WeekAvailability
from ..constants import RANDOM_SEARCH_ITERATIONS
from ..person import Person
from ..scoring import partition_overlap_score
from .base import AssignmentStrategy, SearchResult, build_groups, fan_out, utc_availabilities

logger = logging.getLogger(__name__)

# Trials per worker task. Each task reduces its own batch before returning.
BATCH_SIZE = 1_000


@dataclass
class TrialResult:
    score: int
    trial: int  # index of the trial that produced order, for tie-breaking
    order: list


def _run_batch(
    availabilities: Sequence[WeekAvailability],
    group_size: int,
    first_trial: int,
    seeds: Sequence[int],
) -> Optional[TrialResult]:
    best = None
    people_count = len(availabilities)

    for offset, seed in enumerate(seeds):
        order = list(range(people_count))
        random.Random(seed).shuffle(order)
        score, _ = partition_overlap_score(availabilities, order, group_size)

        if best is None or score > best.score:
            best = TrialResult(score=score, trial=first_trial + offset, order=order)

    return best


class RandomSearchStrategy(AssignmentStrategy):
    """Best of many random partitions."""

    name = "random_search"

    def __init__(self, iterations: int = RANDOM_SEARCH_ITERATIONS, workers: Optional[int] = None):
        super().__init__(workers=workers)
        self.iterations = max(1, iterations)

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

        # Seeds are drawn before fan-out so batching never changes the outcome
        seeds = [rng.getrandbits(64) for _ in range(self.iterations)]
        batches = [
            (start, seeds[start:start + BATCH_SIZE])
            for start in range(0, len(seeds), BATCH_SIZE)
        ]

        results = fan_out(
            lambda batch: _run_batch(availabilities, group_size, batch[0], batch[1]),
            batches,
            self.workers,
        )

        best = max(
            (r for r in results if r is not None),
            key=lambda r: (r.score, -r.trial),
        )
        score, group_scores = partition_overlap_score(availabilities, best.order, group_size)

        logger.debug(
            f"Random search: {self.iterations} trials, best score {score} from trial {best.trial}"
        )
        return SearchResult(
            groups=build_groups(people, best.order, group_size, [g.suggested_hours for g in group_scores]),
            score=score,
        )

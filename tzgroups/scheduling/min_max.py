"""
Min-max balance strategy.

Maximizes the compliance of the worst team rather than the total. Each
restart shuffles the roster, then sweeps every pair of teams and every pair
of their members, keeping a swap when it strictly raises the lower of the
two teams' scores. A sweep with no accepted swap ends the restart.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..availability import WeekAvailability
from ..constants import MIN_MAX_MAX_PASSES, MIN_MAX_RESTARTS
from ..person import Person
from ..scoring import compliance_score, team_compliance
from .base import AssignmentStrategy, SearchResult, build_groups, chunk, fan_out, spawn_rngs, utc_availabilities

logger = logging.getLogger(__name__)


@dataclass
class BalanceResult:
    min_score: float
    order: list
    history: list  # lowest team score at start and after every accepted swap


def balance(
    availabilities: Sequence[WeekAvailability],
    group_size: int,
    rng: random.Random,
    max_passes: int = MIN_MAX_MAX_PASSES,
) -> BalanceResult:
    """Run one restart: shuffle, then pairwise-swap sweeps until stable."""
    order = list(range(len(availabilities)))
    rng.shuffle(order)
    teams = chunk(order, group_size)

    def score(team: list[int]) -> float:
        return compliance_score([availabilities[i] for i in team])

    scores = [score(team) for team in teams]
    history = [min(scores)]

    for _ in range(max_passes):
        improved = False
        for i in range(len(teams)):
            for j in range(i + 1, len(teams)):
                team_a, team_b = teams[i], teams[j]
                for p in range(len(team_a)):
                    for q in range(len(team_b)):
                        current = min(scores[i], scores[j])
                        team_a[p], team_b[q] = team_b[q], team_a[p]
                        new_a, new_b = score(team_a), score(team_b)

                        if min(new_a, new_b) > current:
                            scores[i], scores[j] = new_a, new_b
                            history.append(min(scores))
                            improved = True
                        else:
                            team_a[p], team_b[q] = team_b[q], team_a[p]
        if not improved:
            break

    return BalanceResult(
        min_score=min(scores),
        order=[person for team in teams for person in team],
        history=history,
    )


class MinMaxStrategy(AssignmentStrategy):
    """Raise the worst team's shared-hours compliance as far as possible."""

    name = "min_max"

    def __init__(
        self,
        restarts: int = MIN_MAX_RESTARTS,
        max_passes: int = MIN_MAX_MAX_PASSES,
        workers: Optional[int] = None,
    ):
        super().__init__(workers=workers)
        self.restarts = max(1, restarts)
        self.max_passes = max(1, max_passes)

    def search(
        self,
        people: Sequence[Person],
        group_size: int,
        rng: Optional[random.Random] = None,
        now: Optional[datetime] = None,
    ) -> SearchResult:
        if self._is_noop(people, group_size):
            return SearchResult(groups=[], score=0.0)

        rng = rng or random.Random()
        availabilities = utc_availabilities(people, now)

        restarts = fan_out(
            lambda restart_rng: balance(availabilities, group_size, restart_rng, self.max_passes),
            spawn_rngs(rng, self.restarts),
            self.workers,
        )

        best = max(restarts, key=lambda r: r.min_score)
        suggested = [
            team_compliance([availabilities[i] for i in team]).suggested_hours
            for team in chunk(best.order, group_size)
        ]

        logger.debug(f"Min-max: {self.restarts} restarts, best minimum compliance {best.min_score:.2f}")
        return SearchResult(
            groups=build_groups(people, best.order, group_size, suggested),
            score=best.min_score,
            score_histories=[r.history for r in restarts],
        )

    def __repr__(self) -> str:
        return (
            f"MinMaxStrategy(restarts={self.restarts}, "
            f"max_passes={self.max_passes}, workers={self.workers})"
        )

"""
Group scoring heuristics.

Every function here takes availability already normalized to UTC, so hour h
means the same instant for every member.

Two objectives are provided:

- Overlap-consecutive score (hill climbing, random search): rewards the
  number of members who can meet at once, and for fully-available groups the
  length of their longest common block, capped at
  MAX_REWARDED_CONSECUTIVE_HOURS. Blocks shorter than the cap count as a
  single hour.

- Compliance score (min-max balance): the Team-Maker "adequate homogeneity"
  measure, min(common_hours / h, 1) with h = SUFFICIENT_COMMON_HOURS. 0 means
  the team never shares an hour, 1 means it shares at least h hours.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .availability import WeekAvailability
from .constants import HOURS_PER_WEEK, MAX_REWARDED_CONSECUTIVE_HOURS, SUFFICIENT_COMMON_HOURS


@dataclass
class GroupScore:
    """Score of one group plus the UTC hours suggested for its meetings."""
    score: float
    suggested_hours: list = field(default_factory=list)  # UTC week-hour indices, ascending


def common_availability(availabilities: Sequence[WeekAvailability]) -> WeekAvailability:
    """Hours every member is available (bitwise AND). Empty input has no common hours."""
    if not availabilities:
        return WeekAvailability.none_available()

    mask = availabilities[0].mask
    for availability in availabilities[1:]:
        mask &= availability.mask
    return WeekAvailability(mask)


def available_counts(availabilities: Sequence[WeekAvailability]) -> list[int]:
    """For each UTC hour of the week, how many members are available."""
    counts = [0] * HOURS_PER_WEEK
    for availability in availabilities:
        for hour in availability.hours():
            counts[hour] += 1
    return counts


def hours_with_count(counts: Sequence[int], n: int) -> list[int]:
    """Hours where exactly n members are available."""
    return [hour for hour, count in enumerate(counts) if count == n]


def longest_circular_run(availability: WeekAvailability, limit: Optional[int] = None) -> int:
    """
    Length of the longest block of consecutive available hours.

    The week wraps, so Sunday 23:00 followed by Monday 00:00 is one block.
    Each pass keeps only the hours whose successor is also set, so the number
    of passes before the mask empties is the longest block length.

    Args:
        availability: Hours to scan
        limit: Stop scanning once a block this long is found

    Returns:
        Longest block length (168 for a fully-available week), at most limit
        when limit is given
    """
    if availability.mask == WeekAvailability.all_available().mask:
        return HOURS_PER_WEEK if limit is None else min(limit, HOURS_PER_WEEK)

    run = 0
    current = availability
    while current.mask:
        run += 1
        if limit is not None and run >= limit:
            return limit
        current = current & current.rotated(1)
    return run


def overlap_consecutive_score(availabilities: Sequence[WeekAvailability]) -> GroupScore:
    """
    Score one group with the overlap-consecutive heuristic.

    If no hour has the whole group available, the score is the largest number
    of members available at once and the suggested hours are every hour
    reaching that number. Otherwise the score is group size times the longest
    common block (capped at 4, blocks under 4 count as 1) and the suggested
    hours are every hour the whole group shares.
    """
    group_size = len(availabilities)
    if group_size == 0:
        return GroupScore(score=0, suggested_hours=[])

    common = common_availability(availabilities)
    if common.mask:
        run = longest_circular_run(common, limit=MAX_REWARDED_CONSECUTIVE_HOURS)
        if run < MAX_REWARDED_CONSECUTIVE_HOURS:
            run = 1
        return GroupScore(score=run * group_size, suggested_hours=common.hours())

    counts = available_counts(availabilities)
    max_available = max(counts)
    return GroupScore(score=max_available, suggested_hours=hours_with_count(counts, max_available))


def compliance_score(availabilities: Sequence[WeekAvailability]) -> float:
    """Team-Maker schedule compliance: min(common hours / 40, 1.0)."""
    common = common_availability(availabilities)
    return min(common.count() / SUFFICIENT_COMMON_HOURS, 1.0)


def team_compliance(availabilities: Sequence[WeekAvailability]) -> GroupScore:
    """Compliance score of a team with every shared hour as a suggestion."""
    common = common_availability(availabilities)
    return GroupScore(score=compliance_score(availabilities), suggested_hours=common.hours())


def partition_overlap_score(
    availabilities: Sequence[WeekAvailability],
    order: Sequence[int],
    group_size: int,
) -> tuple[int, list[GroupScore]]:
    """
    Total overlap-consecutive score of a partition.

    Args:
        availabilities: UTC availability per person
        order: Permutation of person indices; consecutive blocks of group_size
               form the groups
        group_size: Target group size (last group may be smaller)

    Returns:
        (total score, per-group GroupScore in block order)
    """
    group_scores = [
        overlap_consecutive_score([availabilities[i] for i in order[start:start + group_size]])
        for start in range(0, len(order), group_size)
    ]
    return sum(g.score for g in group_scores), group_scores

"""
Entry point: turn a roster of tokens into groups.

Callers (web API, bots, scripts) hand over encoded person tokens and a target
group size and get back Groups holding the same tokens plus suggested UTC
meeting hours.
"""

import asyncio
import logging
import random
from typing import Optional, Sequence, Union

from .config import get_default_strategy, get_seed
from .enums import Strategy
from .errors import UnknownStrategyError
from .person import Person
from .scheduling import (
    AssignmentStrategy, Group, HillClimbingStrategy, MinMaxStrategy, RandomSearchStrategy,
)

logger = logging.getLogger(__name__)

STRATEGIES = {
    Strategy.random_search: RandomSearchStrategy,
    Strategy.hill_climbing: HillClimbingStrategy,
    Strategy.min_max: MinMaxStrategy,
}

StrategyChoice = Union[Strategy, str, AssignmentStrategy, None]


def get_strategy(tag: Union[Strategy, str]) -> AssignmentStrategy:
    """
    Build a strategy with default parameters from its tag.

    Raises:
        UnknownStrategyError: If tag doesn't name a strategy
    """
    try:
        strategy = Strategy(tag)
    except ValueError:
        raise UnknownStrategyError(f"Unknown strategy: {tag!r}") from None
    return STRATEGIES[strategy]()


def _resolve_strategy(strategy: StrategyChoice) -> AssignmentStrategy:
    if isinstance(strategy, AssignmentStrategy):
        return strategy
    if strategy is None:
        return get_strategy(get_default_strategy())
    return get_strategy(strategy)


def decode_roster(tokens: Sequence[str]) -> list[Person]:
    """Decode tokens, dropping any that don't describe a valid person."""
    people = []
    for token in tokens:
        person = Person.decode(token)
        if person is None:
            logger.debug(f"Dropping undecodable token {token!r}")
            continue
        people.append(person)
    return people


def create_groups(
    tokens: Sequence[str],
    group_size: int,
    strategy: StrategyChoice = None,
    rng: Optional[random.Random] = None,
) -> list[Group]:
    """
    Partition a roster into groups of group_size.

    Args:
        tokens: Encoded people (see Person.encode)
        group_size: Target group size; the last group may be smaller
        strategy: Strategy tag, strategy instance, or None for the configured default
        rng: Random source; when None, seeded from TZGROUPS_SEED if set

    Returns:
        Groups covering every valid token exactly once. Empty for an empty
        roster or a non-positive group size.

    Raises:
        UnknownStrategyError: If strategy is an unknown tag
    """
    assigner = _resolve_strategy(strategy)

    if group_size <= 0:
        return []

    people = decode_roster(tokens)
    if not people:
        return []

    if len(people) < len(tokens):
        logger.info(f"Dropped {len(tokens) - len(people)} of {len(tokens)} tokens that failed to decode")

    if rng is None:
        seed = get_seed()
        rng = random.Random(seed) if seed is not None else random.Random()

    groups = assigner.run(people, group_size, rng=rng)
    logger.info(f"Grouped {len(people)} people into {len(groups)} groups using {assigner.name}")
    return groups


async def schedule_groups(
    tokens: Sequence[str],
    group_size: int,
    strategy: StrategyChoice = None,
    rng: Optional[random.Random] = None,
) -> list[Group]:
    """Async create_groups. The search runs in a worker thread."""
    return await asyncio.to_thread(create_groups, tokens, group_size, strategy, rng)

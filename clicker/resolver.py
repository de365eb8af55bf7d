# top-two ranking + answer lookup
from typing import Sequence, Tuple

from .catalog import Situation
from .reactions import BY_PRIORITY, Pair, Reaction, pair_key


def rank(counts: Sequence[int]) -> Tuple[Reaction, ...]:
    """
    Reactions ordered by vote count, highest first.
    sorted() is stable and BY_PRIORITY is already in priority order,
    so equal counts keep the lower priority number in front.
    """
    if len(counts) != len(BY_PRIORITY):
        raise ValueError(f"expected {len(BY_PRIORITY)} counts, got {len(counts)}")
    order = sorted(range(len(BY_PRIORITY)), key=lambda i: counts[i], reverse=True)
    return tuple(BY_PRIORITY[i] for i in order)


def top_two(counts: Sequence[int]) -> Pair:
    first, second = rank(counts)[:2]
    return pair_key(first, second)


def resolve(situation: Situation, counts: Sequence[int]) -> str:
    return situation.answer_for(top_two(counts))

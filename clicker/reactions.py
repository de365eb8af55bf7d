# response strategies + tie-break priority
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class Reaction(str, Enum):
    LIE = "lie"
    DELAY = "delay"
    FREEZE = "freeze"


# Tie-break priority is data, not enum declaration order.
PRIORITY: Dict[Reaction, int] = {
    Reaction.LIE: 0,
    Reaction.DELAY: 1,
    Reaction.FREEZE: 2,
}

# BY_PRIORITY[i] is the reaction whose tally slot / priority is i
BY_PRIORITY: Tuple[Reaction, ...] = tuple(sorted(PRIORITY, key=PRIORITY.__getitem__))

_BY_TOKEN: Dict[str, Reaction] = {r.value: r for r in Reaction}

Pair = FrozenSet[Reaction]


def parse(token: str) -> Optional[Reaction]:
    """
    Case-sensitive lookup of a vote token. Unknown tokens give None.
    """
    return _BY_TOKEN.get(token)


def pair_key(a: Reaction, b: Reaction) -> Pair:
    if a == b:
        raise ValueError(f"pair needs two distinct reactions, got {a.value} twice")
    return frozenset((a, b))


ALL_PAIRS: Tuple[Pair, ...] = (
    pair_key(Reaction.LIE, Reaction.DELAY),
    pair_key(Reaction.LIE, Reaction.FREEZE),
    pair_key(Reaction.DELAY, Reaction.FREEZE),
)


def describe_pair(pair: Pair) -> str:
    return "+".join(r.value for r in sorted(pair, key=PRIORITY.__getitem__))

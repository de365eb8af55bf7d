# situations + the authored catalog
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Tuple

from .reactions import ALL_PAIRS, Pair, Reaction, describe_pair, pair_key

logger = logging.getLogger(__name__)

NO_ANSWER = "No answer found for this combination"


class CatalogError(ValueError):
    """Raised at startup when the authored situations break the catalog invariants."""


@dataclass(frozen=True)
class Situation:
    """
    One scripted prompt. answers maps every unordered pair of reactions
    to the scripted reply read out when that pair leads the vote.
    """

    title: str
    description: str
    answers: Mapping[Pair, str] = field(repr=False)

    def __post_init__(self):
        # answers holds a read-only copy of the given mapping
        object.__setattr__(self, "answers", MappingProxyType(dict(self.answers)))

    def missing_pairs(self) -> Tuple[Pair, ...]:
        return tuple(p for p in ALL_PAIRS if p not in self.answers)

    def answer_for(self, pair: Pair) -> str:
        return self.answers.get(pair, NO_ANSWER)


class Catalog:
    """
    Immutable, non-empty, ordered sequence of situations.
    Read without locking once built.
    """

    __slots__ = ("_situations",)

    def __init__(self, situations: Iterable[Situation], strict: bool = True):
        items = tuple(situations)
        if not items:
            raise CatalogError("catalog must contain at least one situation")

        for i, s in enumerate(items):
            missing = s.missing_pairs()
            if not missing:
                continue
            names = ", ".join(describe_pair(p) for p in missing)
            if strict:
                raise CatalogError(f"situation #{i} {s.title!r} has no answer for: {names}")
            logger.warning("Situation #%d %r has no answer for: %s", i, s.title, names)

        self._situations = items

    def __len__(self) -> int:
        return len(self._situations)

    def __getitem__(self, index: int) -> Situation:
        return self._situations[index]

    def __iter__(self) -> Iterator[Situation]:
        return iter(self._situations)


def make_answers(lie_delay: str, lie_freeze: str, delay_freeze: str) -> Dict[Pair, str]:
    return {
        pair_key(Reaction.LIE, Reaction.DELAY): lie_delay,
        pair_key(Reaction.LIE, Reaction.FREEZE): lie_freeze,
        pair_key(Reaction.DELAY, Reaction.FREEZE): delay_freeze,
    }


def _authored() -> Tuple[Situation, ...]:
    return (
        # ----------- block 1: warm-up -----------
        Situation(
            "Why was the retro moved again?",
            "The team wonders where the daily meeting disappeared to...",
            make_answers(
                "We wanted everyone to be able to join, so we shifted it a little. We'll confirm the final time later.",
                "An important call came up and we had to move things. Let's not dig in, we follow the current schedule.",
                "The time is still being finalized one level up. For now we work as is, no discussion.",
            ),
        ),
        Situation(
            "Why are the priorities in the tracker different again?",
            "Developers notice the tasks were reshuffled once more...",
            make_answers(
                "It's not a priority change, we just clarified the business goals. I'll send the roadmap later.",
                "This was the plan all along, you just don't see the full context yet. Take what's there.",
                "That is being decided above us. We take whatever they say and don't come back to it.",
            ),
        ),
        Situation(
            "Can we get complete requirements up front instead of in pieces?",
            "The team wants one coherent spec...",
            make_answers(
                "They exist, we're just packaging them for you. As soon as they're approved I'll send the whole thing.",
                "This is practically the final version, yesterday's release was just a bit rough.",
                "Not now, there's an important hotfix. Once things settle we'll write it up and come back.",
            ),
        ),
        Situation(
            "Why another call about the same question?",
            "Colleagues are not thrilled about the repeat invite...",
            make_answers(
                "New information came in and we need to sync everyone quickly. Details later.",
                "It was planned as a checkpoint call from the start. We check in and move on.",
                "It was decided from above. We hold it and don't discuss it.",
            ),
        ),
        Situation(
            "Why don't we have proper documentation?",
            "The classic documentation pain...",
            make_answers(
                "Documentation is maintained, not everyone has access yet. I'll check when it rolls out.",
                "The documentation exists in a working form. Right now it's secondary.",
                "That's not the focus. When there are resources, we'll do it.",
            ),
        ),
        # ----------- block 2: everyday -----------
        Situation(
            "When is this month's salary coming?",
            "The most awaited question...",
            make_answers(
                "The payment is already out, the money is on its way. If it's not there by Friday we'll chase it.",
                "It's budgeted, there's just a delay at accounting or the bank. Keep working.",
                "We can't give an exact date right now. Once it's final we'll send one message to everyone.",
            ),
        ),
        Situation(
            "Why weren't we told in advance that payouts would slip?",
            "Communication ran late...",
            make_answers(
                "We found out at the last moment ourselves and didn't want to misinform you. Next time we'll warn earlier.",
                "The information was there, just in a draft form. Let's not dig, moving on.",
                "We'll improve communication. For now we note that it happened.",
            ),
        ),
        Situation(
            "When do we get a real team-building instead of 'pizza at home'?",
            "Having your pizza and eating it too...",
            make_answers(
                "We're discussing the format right now so everyone enjoys it. We'll share options soon.",
                "The party is planned, it's just not the time to reveal details. No spoilers.",
                "First we stabilize payouts, then the fun. Parking the topic for now.",
            ),
        ),
        Situation(
            "Can we get some merch, so there's at least something tangible from the company?",
            "Why merch if engineers never leave home anyway...",
            make_answers(
                "Merch is in the works, we're looking for a vendor. We'll collect sizes soon.",
                "Merch is part of the HR strategy, it's not cancelled. Let's not get distracted from work.",
                "It's not the priority at the moment. We'll get back to merch when there's a window.",
            ),
        ),
        Situation(
            "Why are you hiring if salaries are late?",
            "About those odd priorities...",
            make_answers(
                "Those are separate budgets that don't overlap. We'll walk you through the cost structure later.",
                "Hiring is part of the growth strategy. Let's not mix it up with payouts.",
                "Another department handles that. The answer will be in the general finance update.",
            ),
        ),
        # ----------- block 3: sharp -----------
        Situation(
            "Is the company even alive? Are we being shut down?",
            "A panicked question!",
            make_answers(
                "The company is fine, we're just restructuring. We'll show all the numbers a bit later.",
                "Everything is under control, you only see part of the picture. No panic, keep working.",
                "We're not raising that topic now. When there's an official update, you'll get it.",
            ),
        ),
        Situation(
            "Why is 'the last delay' happening for the third time?",
            "Deja vu...",
            make_answers(
                "The first cases were external. We're getting stable now, I'll confirm later.",
                "We were talking about those specific cases, this one is different. Let's not mix them.",
                "Let's not pick at wording right now. What matters is we're moving toward a normal cycle.",
            ),
        ),
        Situation(
            "When will AI replace us so it can get the delayed salary instead?",
            "Good point, actually...",
            make_answers(
                "We're already exploring AI, but it doesn't replace people. We'll tell you how we'll use it later.",
                "AI is an extra tool, not a replacement. Let's not go down that path now.",
                "It's not a priority now. When there's an AI strategy, we'll present it.",
            ),
        ),
        Situation(
            "Why does Pete get a new laptop while my fan takes off during a video call?",
            "Pete must know someone...",
            make_answers(
                "That was a trial of a work device, we'll hand out more. We'll clarify hardware later.",
                "That's for specific tasks. We won't compare hardware right now.",
                "First we close the work questions. Hardware upgrades will be discussed separately.",
            ),
        ),
        Situation(
            "If everything is fine, why won't you show the numbers?",
            "Exactly, the numbers...",
            make_answers(
                "We're preparing a transparent report right now. Give us time so it's accurate.",
                "The numbers are positive, they're just internal. This isn't the right format.",
                "Financial info will come through the official channel. Closing the topic for now.",
            ),
        ),
    )


def build_catalog(strict: bool = True) -> Catalog:
    catalog = Catalog(_authored(), strict=strict)
    logger.info("Catalog built with %d situations", len(catalog))
    return catalog

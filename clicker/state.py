# in-memory session state + lock
import logging
import threading
from typing import List, Optional

from .catalog import NO_ANSWER, Catalog
from .models import RevealedResult, SessionStatus, SituationOut
from .reactions import PRIORITY, parse
from .resolver import resolve

logger = logging.getLogger(__name__)


def _empty_tally() -> List[int]:
    return [0] * len(PRIORITY)


class SessionState:
    """
    Shared game state for one running server.

    Built once at startup and handed to request handlers. Every public
    method takes self._lock for the whole read/modify sequence and
    releases it before returning; nothing inside the lock does I/O.

    tally[i] counts votes for the reaction with priority i.
    version only ever grows, reveal is the only thing that bumps it.
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self._lock = threading.Lock()
        self._current_index = 0
        self._tally = _empty_tally()
        self._last_result: Optional[RevealedResult] = None
        self._version = 0

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def accept_vote(self, token: str) -> bool:
        """
        Count one vote. Returns False for an unknown token, which
        callers must still acknowledge as success.
        """
        reaction = parse(token)
        if reaction is None:
            logger.debug("Ignoring unknown reaction %r", token)
            return False

        slot = PRIORITY[reaction]
        with self._lock:
            self._tally[slot] += 1
        return True

    def reveal(self) -> RevealedResult:
        with self._lock:
            situation = self._catalog[self._current_index]
            counts = tuple(self._tally)
            answer = resolve(situation, counts)

            self._version += 1
            result = RevealedResult(
                situation_title=situation.title,
                answer=answer,
                counts=counts,
                version=self._version,
            )
            self._last_result = result

        if answer == NO_ANSWER:
            logger.warning("Situation %r has no answer for the leading pair", result.situation_title)
        logger.info("Revealed %r counts=%s version=%d", result.situation_title, list(counts), result.version)
        return result

    def current_result(self) -> Optional[RevealedResult]:
        with self._lock:
            return self._last_result

    def current_situation(self) -> SituationOut:
        with self._lock:
            situation = self._catalog[self._current_index]
        return SituationOut(title=situation.title, description=situation.description)

    def advance(self) -> None:
        with self._lock:
            self._current_index = (self._current_index + 1) % len(self._catalog)
            self._tally = _empty_tally()
            self._last_result = None
            index = self._current_index

        logger.info("Advanced to situation %d/%d", index + 1, len(self._catalog))

    def reset_round(self) -> None:
        with self._lock:
            self._tally = _empty_tally()
            self._last_result = None
            index = self._current_index

        logger.info("Round reset on situation %d/%d", index + 1, len(self._catalog))

    def snapshot(self) -> SessionStatus:
        with self._lock:
            index = self._current_index
            counts = tuple(self._tally)
            revealed = self._last_result is not None
            version = self._version

        return SessionStatus(
            index=index,
            total=len(self._catalog),
            title=self._catalog[index].title,
            counts=counts,
            revealed=revealed,
            version=version,
        )

from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field


class VoteIn(BaseModel):
    reaction: str = Field(..., examples=["lie"])


class Ack(BaseModel):
    ok: bool = True


class SituationOut(BaseModel):
    title: str
    description: str


class RevealedResult(BaseModel):
    """
    Snapshot published by a reveal. Never mutated; the next reveal
    replaces it as a whole.
    counts is ordered [lie, delay, freeze].
    """
    model_config = ConfigDict(frozen=True)

    situation_title: str
    answer: str
    counts: Tuple[int, int, int]
    version: int = Field(..., ge=1)


class SessionStatus(BaseModel):
    """
    Facilitator view of the live round.
    """
    index: int
    total: int
    title: str
    counts: Tuple[int, int, int]
    revealed: bool
    version: int


class ClientConfig(BaseModel):
    poll_interval_ms: int

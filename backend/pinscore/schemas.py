from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class RollsIn(BaseModel):
    # Raw tokens; parsed by the bowling router so bad rolls surface as InvalidRoll
    rolls: List[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class FrameOut(BaseModel):
    rolls: List[int]
    bonus: List[int]
    score: int
    cumulative: int
    strike: bool
    spare: bool
    complete: bool


class GameSummaryOut(BaseModel):
    frames: List[FrameOut]
    total: int
    finished: bool
    rolls: List[int]

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, conint

MAX_FRAMES = 10


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Frame(BaseModel):
    frame_id: conint(ge=1, le=MAX_FRAMES)
    rolls: list[str]
    cumulative_score: int = 0
    created_at: datetime = Field(default_factory=_utcnow)


class Player(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    player_name: str
    frames: list[Frame] = Field(default_factory=list)
    on_frame: conint(ge=0, le=MAX_FRAMES) = 0
    total_score: int = 0

    def get_frame(self, frame_id: int) -> Frame | None:
        return next((f for f in self.frames if f.frame_id == frame_id), None)


class Game(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    players: list[Player] = Field(default_factory=list)
    count_of_completed: int = 0
    completed: bool = False
    created_at: datetime = Field(default_factory=_utcnow)

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, conint, field_validator

from bowling.config import settings


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody


class FrameScores(BaseModel):
    previous_cumulative_score: int
    current_cumulative_score: int


class NewGameRequest(BaseModel):
    name: str | None = None
    players: list[str] = Field(min_length=1, max_length=settings.max_players)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        value = value.strip()
        if len(value) < settings.min_game_name_length:
            raise ValueError(f"name must be at least {settings.min_game_name_length} characters")
        return value

    @field_validator("players")
    @classmethod
    def _check_players(cls, value: list[str]) -> list[str]:
        names = [name.strip() for name in value]
        if any(not name for name in names):
            raise ValueError("player names must not be blank")
        if len(set(names)) != len(names):
            raise ValueError("player names must be unique")
        return names


class NewFrameRequest(BaseModel):
    rolls: list[str]


class RankedPlayer(BaseModel):
    rank: conint(ge=1)
    player_name: str
    total_score: int


class GameResultResponse(BaseModel):
    name: str
    players: list[RankedPlayer]


class PlayerListItem(BaseModel):
    id: UUID
    player_name: str
    total_score: int


class GameListItem(BaseModel):
    id: UUID
    name: str
    players: list[PlayerListItem]
    created_at: datetime

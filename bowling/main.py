from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bowling.config import settings
from bowling.errors import BowlingError
from bowling.models import Game
from bowling.repository import InMemoryRepository
from bowling.schemas import (
    ErrorBody,
    ErrorResponse,
    GameListItem,
    GameResultResponse,
    NewFrameRequest,
    NewGameRequest,
)
from bowling.service import GameService

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title, version="0.1.0")
repo = InMemoryRepository()
service = GameService(repo)


@app.exception_handler(BowlingError)
async def bowling_error_handler(request: Request, exc: BowlingError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.code)
    body = ErrorResponse(error=ErrorBody(code=exc.code, message=exc.message, details=exc.details))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.get("/")
def root() -> dict[str, str]:
    return {
        "message": "Bowling Scoreboard API",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/v1/games", response_model=Game, status_code=201)
def create_game(req: NewGameRequest) -> Game:
    return service.create_game(req)


@app.get("/api/v1/games", response_model=list[GameListItem])
def list_games() -> list[GameListItem]:
    return service.list_games()


@app.get("/api/v1/games/{game_id}", response_model=Game)
def get_game(game_id: str) -> Game:
    return service.get_game(game_id)


@app.patch("/api/v1/games/{game_id}/players/{player_id}/frames", response_model=Game)
def add_player_frame(game_id: str, player_id: str, req: NewFrameRequest) -> Game:
    return service.add_player_frame(game_id, player_id, req.rolls)


@app.get("/api/v1/games/{game_id}/result", response_model=GameResultResponse)
def get_game_result(game_id: str) -> GameResultResponse:
    return service.get_game_result(game_id)

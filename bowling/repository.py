from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from uuid import UUID

from bowling.errors import Conflict, GameNameTaken, GameNotFound
from bowling.models import Game

logger = logging.getLogger(__name__)


@dataclass
class StoredGame:
    game: Game
    version: int


class InMemoryRepository:
    """Process-local game store.

    Every read hands out a deep copy together with the version it was taken
    at; ``save`` only accepts a copy whose version is still current.
    """

    def __init__(self) -> None:
        self._items: dict[UUID, StoredGame] = {}
        self._lock = Lock()

    def _name_taken(self, name: str, exclude: UUID | None = None) -> bool:
        return any(item.game.name == name and item_id != exclude for item_id, item in self._items.items())

    def name_exists(self, name: str) -> bool:
        with self._lock:
            return self._name_taken(name)

    def create(self, game: Game) -> StoredGame:
        with self._lock:
            if self._name_taken(game.name):
                raise GameNameTaken(game.name)
            item = StoredGame(game=game.model_copy(deep=True), version=1)
            self._items[game.id] = item
            return StoredGame(game=item.game.model_copy(deep=True), version=item.version)

    def load(self, game_id: UUID) -> StoredGame:
        with self._lock:
            item = self._items.get(game_id)
            if item is None:
                raise GameNotFound(game_id)
            return StoredGame(game=item.game.model_copy(deep=True), version=item.version)

    def save(self, stored: StoredGame) -> StoredGame:
        game_id = stored.game.id
        with self._lock:
            current = self._items.get(game_id)
            if current is None:
                raise GameNotFound(game_id)
            if current.version != stored.version:
                logger.warning(
                    "Version conflict on game %s: loaded %s, stored %s", game_id, stored.version, current.version
                )
                raise Conflict(game_id)
            item = StoredGame(game=stored.game.model_copy(deep=True), version=current.version + 1)
            self._items[game_id] = item
            return StoredGame(game=item.game.model_copy(deep=True), version=item.version)

    def list_games(self) -> list[Game]:
        """All games, newest first."""
        with self._lock:
            games = [item.game.model_copy(deep=True) for item in reversed(self._items.values())]
        return sorted(games, key=lambda g: g.created_at, reverse=True)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

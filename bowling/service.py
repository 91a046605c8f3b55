from __future__ import annotations

import logging
from uuid import UUID

from bowling.config import Settings, settings as default_settings
from bowling.errors import BowlingError, Conflict, GameNameTaken, PlayerNotFound
from bowling.models import Game, Player
from bowling.names import generate_game_name
from bowling.progression import submit_frame
from bowling.repository import InMemoryRepository
from bowling.results import game_list_item, game_result, record_completion
from bowling.schemas import GameListItem, GameResultResponse, NewGameRequest
from bowling.validators import parse_identifier

logger = logging.getLogger(__name__)


def find_player(game: Game, player_id: UUID) -> Player:
    player = next((p for p in game.players if p.id == player_id), None)
    if player is None:
        raise PlayerNotFound(player_id, game.id)
    return player


class GameService:
    def __init__(self, repo: InMemoryRepository, settings: Settings | None = None) -> None:
        self.repo = repo
        self.settings = settings or default_settings

    def _unused_game_name(self) -> str:
        for _ in range(max(self.settings.game_name_attempts, 1)):
            name = generate_game_name()
            if not self.repo.name_exists(name):
                return name
        raise GameNameTaken(name)

    def create_game(self, req: NewGameRequest) -> Game:
        name = req.name or self._unused_game_name()
        game = Game(name=name, players=[Player(player_name=p) for p in req.players])
        stored = self.repo.create(game)
        logger.info("Created game %s (%s) with %d players", stored.game.id, name, len(req.players))
        return stored.game

    def get_game(self, game_id: str | UUID) -> Game:
        return self.repo.load(parse_identifier("game", game_id)).game

    def add_player_frame(self, game_id: str | UUID, player_id: str | UUID, rolls: list[str]) -> Game:
        """Record the player's next frame, retrying when another write got in first."""
        game_uuid = parse_identifier("game", game_id)
        player_uuid = parse_identifier("player", player_id)

        for attempt in range(1, self.settings.save_attempts + 1):
            stored = self.repo.load(game_uuid)
            player = find_player(stored.game, player_uuid)
            try:
                frame = submit_frame(player, rolls)
            except BowlingError:
                logger.warning("Rejected frame %s for player %s in game %s", rolls, player_uuid, game_uuid)
                raise
            record_completion(stored.game, frame)
            try:
                return self.repo.save(stored).game
            except Conflict:
                if attempt == self.settings.save_attempts:
                    raise
                logger.info("Retrying frame submission for game %s (attempt %d)", game_uuid, attempt + 1)
        raise Conflict(game_uuid)

    def get_game_result(self, game_id: str | UUID) -> GameResultResponse:
        return game_result(self.get_game(game_id))

    def list_games(self) -> list[GameListItem]:
        return [game_list_item(game) for game in self.repo.list_games()]

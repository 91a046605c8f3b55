from __future__ import annotations

import logging

from bowling.models import MAX_FRAMES, Frame, Game, Player
from bowling.schemas import GameListItem, GameResultResponse, PlayerListItem, RankedPlayer

logger = logging.getLogger(__name__)

UNTITLED_GAME = "Untitled Game"


def record_completion(game: Game, frame: Frame) -> None:
    if frame.frame_id != MAX_FRAMES:
        return
    game.count_of_completed += 1
    if game.count_of_completed == len(game.players) and not game.completed:
        game.completed = True
        logger.info("Game %s (%s) completed", game.id, game.name)


def rank_players(players: list[Player]) -> list[RankedPlayer]:
    """Rank by total score, ties sharing a rank and the next score skipping ahead (1, 1, 3)."""
    ordered = sorted(players, key=lambda p: p.total_score, reverse=True)
    ranked: list[RankedPlayer] = []
    rank = 1
    for index, player in enumerate(ordered):
        if index > 0 and player.total_score < ordered[index - 1].total_score:
            rank = index + 1
        ranked.append(RankedPlayer(rank=rank, player_name=player.player_name, total_score=player.total_score))
    return ranked


def game_result(game: Game) -> GameResultResponse:
    return GameResultResponse(name=game.name or UNTITLED_GAME, players=rank_players(game.players))


def game_list_item(game: Game) -> GameListItem:
    return GameListItem(
        id=game.id,
        name=game.name,
        created_at=game.created_at,
        players=[PlayerListItem(id=p.id, player_name=p.player_name, total_score=p.total_score) for p in game.players],
    )

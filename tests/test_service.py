import pytest

from bowling.config import Settings
from bowling.errors import Conflict, GameNameTaken, InvalidFrame, InvalidIdentifier, PlayerNotFound
from bowling.repository import InMemoryRepository
from bowling.schemas import NewGameRequest
from bowling.service import GameService


def make_service(**settings) -> tuple[GameService, InMemoryRepository]:
    repo = InMemoryRepository()
    return GameService(repo, Settings(**settings)), repo


def test_create_game_generates_name_when_missing():
    service, _ = make_service()
    game = service.create_game(NewGameRequest(players=["alice", "bob"]))
    assert "#" in game.name
    assert [p.player_name for p in game.players] == ["alice", "bob"]
    assert all(p.on_frame == 0 and p.total_score == 0 for p in game.players)


def test_generated_name_collisions_give_up(monkeypatch):
    service, _ = make_service(game_name_attempts=2)
    monkeypatch.setattr("bowling.service.generate_game_name", lambda: "Epic Bowl #1234")
    service.create_game(NewGameRequest(name="Epic Bowl #1234", players=["alice"]))
    with pytest.raises(GameNameTaken):
        service.create_game(NewGameRequest(players=["bob"]))


def test_add_player_frame_persists_scores():
    service, _ = make_service()
    game = service.create_game(NewGameRequest(name="Lane 7", players=["alice"]))
    player_id = str(game.players[0].id)

    service.add_player_frame(str(game.id), player_id, ["X"])
    updated = service.add_player_frame(str(game.id), player_id, ["7", "2"])

    player = updated.players[0]
    assert [f.cumulative_score for f in player.frames] == [19, 28]
    assert service.get_game(game.id).players[0].total_score == 28


def test_rejected_frame_is_not_saved():
    service, _ = make_service()
    game = service.create_game(NewGameRequest(name="Lane 8", players=["alice"]))
    with pytest.raises(InvalidFrame):
        service.add_player_frame(game.id, game.players[0].id, ["7", "6"])
    assert service.get_game(game.id).players[0].frames == []


def test_unknown_player_and_bad_identifiers():
    service, _ = make_service()
    game = service.create_game(NewGameRequest(name="Lane 9", players=["alice"]))
    with pytest.raises(PlayerNotFound):
        service.add_player_frame(game.id, "00000000-0000-0000-0000-000000000000", ["1", "1"])
    with pytest.raises(InvalidIdentifier):
        service.add_player_frame(game.id, "alice", ["1", "1"])
    with pytest.raises(InvalidIdentifier):
        service.get_game_result("not-a-game")


def test_conflicting_save_is_retried_from_fresh_state(monkeypatch):
    service, repo = make_service()
    game = service.create_game(NewGameRequest(name="Lane 10", players=["alice"]))
    original_save = repo.save
    calls = []

    def flaky_save(stored):
        calls.append(stored.version)
        if len(calls) == 1:
            raise Conflict(stored.game.id)
        return original_save(stored)

    monkeypatch.setattr(repo, "save", flaky_save)
    updated = service.add_player_frame(game.id, game.players[0].id, ["3", "4"])

    assert len(calls) == 2
    assert updated.players[0].on_frame == 1
    assert len(updated.players[0].frames) == 1


def test_conflict_surfaces_after_last_attempt(monkeypatch):
    service, repo = make_service(save_attempts=2)
    game = service.create_game(NewGameRequest(name="Lane 11", players=["alice"]))
    calls = []

    def always_conflict(stored):
        calls.append(stored.version)
        raise Conflict(stored.game.id)

    monkeypatch.setattr(repo, "save", always_conflict)
    with pytest.raises(Conflict):
        service.add_player_frame(game.id, game.players[0].id, ["3", "4"])
    assert len(calls) == 2


def test_list_games_summarises_players():
    service, _ = make_service()
    service.create_game(NewGameRequest(name="Older", players=["alice"]))
    newer = service.create_game(NewGameRequest(name="Newer", players=["bob", "carol"]))

    listing = service.list_games()
    assert [item.name for item in listing] == ["Newer", "Older"]
    assert [p.player_name for p in listing[0].players] == ["bob", "carol"]
    assert listing[0].id == newer.id

import pytest

from bowling.errors import FrameLimitExceeded, InvalidFrame
from bowling.models import Game, Player
from bowling.progression import submit_frame
from bowling.results import game_result, rank_players, record_completion


def play(player: Player, frames: list[list[str]]) -> list[int]:
    totals = []
    for rolls in frames:
        submit_frame(player, rolls)
        totals.append(player.total_score)
    return totals


def test_gutter_game_scores_zero():
    player = Player(player_name="alice")
    play(player, [["0", "0"]] * 10)
    assert player.total_score == 0
    assert player.on_frame == 10
    assert [f.frame_id for f in player.frames] == list(range(1, 11))


def test_all_strikes_resolves_one_frame_back():
    player = Player(player_name="alice")
    play(player, [["X"]] * 9 + [["X", "X", "X"]])
    assert [f.cumulative_score for f in player.frames] == [20, 40, 60, 80, 100, 120, 140, 160, 190, 220]
    assert player.total_score == 220


def test_previous_frame_is_patched_in_place():
    player = Player(player_name="alice")
    totals = play(player, [["X"], ["7", "2"], ["6", "/"], ["4", "3"]])
    assert totals == [10, 28, 38, 49]
    assert [f.cumulative_score for f in player.frames] == [19, 28, 42, 49]
    assert player.total_score == player.frames[-1].cumulative_score


def test_total_score_never_decreases():
    player = Player(player_name="alice")
    totals = play(
        player,
        [["9", "/"], ["X"], ["0", "0"], ["5", "4"], ["X"], ["X"], ["3", "/"], ["0", "9"], ["1", "1"], ["7", "/", "3"]],
    )
    assert totals == sorted(totals)
    assert totals[-1] == player.total_score


def test_eleventh_frame_is_rejected():
    player = Player(player_name="alice")
    play(player, [["1", "1"]] * 10)
    with pytest.raises(FrameLimitExceeded):
        submit_frame(player, ["1", "1"])
    assert player.on_frame == 10
    assert len(player.frames) == 10


def test_rejected_frame_leaves_player_untouched():
    player = Player(player_name="alice")
    play(player, [["X"]])
    before = player.model_dump()
    with pytest.raises(InvalidFrame):
        submit_frame(player, ["7", "6"])
    assert player.model_dump() == before


def test_game_completes_when_every_player_reaches_tenth_frame():
    game = Game(name="League Night", players=[Player(player_name="alice"), Player(player_name="bob")])
    alice, bob = game.players
    for player in (alice, bob):
        for _ in range(9):
            record_completion(game, submit_frame(player, ["1", "1"]))
    assert game.count_of_completed == 0

    record_completion(game, submit_frame(alice, ["1", "1"]))
    assert game.count_of_completed == 1
    assert not game.completed

    record_completion(game, submit_frame(bob, ["1", "1"]))
    assert game.count_of_completed == 2
    assert game.completed


def test_rank_players_leaves_gaps_after_ties():
    players = [Player(player_name=name, total_score=score) for name, score in [("c", 20), ("a", 30), ("b", 30)]]
    ranked = rank_players(players)
    assert [(r.rank, r.player_name, r.total_score) for r in ranked] == [(1, "a", 30), (1, "b", 30), (3, "c", 20)]


def test_rank_players_mixed_ties():
    players = [Player(player_name=str(score), total_score=score) for score in [10, 40, 50, 40]]
    assert [r.rank for r in rank_players(players)] == [1, 2, 2, 4]


def test_game_result_falls_back_to_untitled():
    game = Game(name="", players=[Player(player_name="alice", total_score=12)])
    result = game_result(game)
    assert result.name == "Untitled Game"
    assert result.players[0].rank == 1

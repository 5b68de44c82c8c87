import pytest

from foosballpairing.player import Player
from foosballpairing.tournament import leader_ids, rank_players


def _player(
    player_id, points=0, wins=0, scored=0, conceded=0, games=0, available=True
):
    return Player(
        name=player_id.title(),
        id=player_id,
        points=points,
        wins=wins,
        goals_scored=scored,
        goals_conceded=conceded,
        games_played=games,
        is_available=available,
    )


def _ids(players):
    return [p.id for p in players]


def test_points_then_wins_then_goal_difference():
    players = [
        _player("low", points=1, wins=1),
        _player("gd_minus", points=3, wins=2, scored=10, conceded=12),
        _player("top", points=4, wins=2),
        _player("gd_plus", points=3, wins=2, scored=15, conceded=5),
        _player("more_wins", points=3, wins=3),
    ]
    assert _ids(rank_players(players)) == [
        "top",
        "more_wins",
        "gd_plus",
        "gd_minus",
        "low",
    ]


def test_exact_ties_keep_input_order():
    players = [_player("b", points=2), _player("a", points=2), _player("c", points=2)]
    assert _ids(rank_players(players, "points")) == ["b", "a", "c"]


def test_least_played_ignores_points():
    players = [
        _player("busy", games=5, points=9),
        _player("fresh", games=0),
        _player("some", games=2, points=1),
    ]
    assert _ids(rank_players(players, "least_played")) == ["fresh", "some", "busy"]


def test_ranking_does_not_modify_input():
    players = [_player("a"), _player("b", points=3)]
    rank_players(players)
    assert _ids(players) == ["a", "b"]


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        rank_players([], "elo")


def test_joint_leaders():
    players = [
        _player("a", points=4),
        _player("b", points=4, wins=9),
        _player("c", points=2),
    ]
    assert leader_ids(players) == {"a", "b"}


def test_unavailable_leader_is_not_listed():
    players = [_player("a", points=5, available=False), _player("b", points=3)]
    assert leader_ids(players) == set()
    assert leader_ids([]) == set()


@pytest.mark.parametrize("mode", ["points", "least_played"])
def test_ranking_is_deterministic(mode):
    players = [
        _player("a", points=2, games=1),
        _player("b", points=2, games=1),
        _player("c", points=1, games=3),
        _player("d", points=2, games=0),
    ]
    assert _ids(rank_players(players, mode)) == _ids(rank_players(players, mode))

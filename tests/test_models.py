import pytest

from foosballpairing.exceptions import (
    InvalidConfigurationException,
    InvalidPairingException,
    InvalidPlayerDataException,
    PlayerNameValidationException,
)
from foosballpairing.models import Match, Team, TournamentSettings
from foosballpairing.player import Player, create_player, create_player_from_dict


def test_team_needs_two_players():
    with pytest.raises(InvalidPairingException):
        Team("a", "a")


def test_match_rejects_a_player_on_both_teams():
    with pytest.raises(InvalidPairingException):
        Match(team1=Team("a", "b"), team2=Team("b", "c"))


def test_winner_only_on_completed_matches():
    with pytest.raises(InvalidPairingException):
        Match(team1=Team("a", "b"), team2=Team("c", "d"), winner="team1")
    with pytest.raises(InvalidPairingException):
        Match(team1=Team("a", "b"), team2=Team("c", "d"), status="completed")
    with pytest.raises(InvalidPairingException):
        Match(team1=Team("a", "b"), team2=Team("c", "d"), status="paused")


def test_match_lookups():
    match = Match(team1=Team("a", "b", 3), team2=Team("c", "d", 1))

    assert match.player_ids == ("a", "b", "c", "d")
    assert match.side_of("d") == "team2"
    assert match.side_of("z") is None
    assert match.team("team1").role_of("b") == "defender"
    assert match.scores == (3, 1)
    with pytest.raises(KeyError):
        match.team("team3")


def test_match_from_legacy_dict():
    match = Match.from_dict(
        {
            "id": "m1",
            "team1": {"attackerId": "a", "defenderId": "b", "score": 10},
            "team2": {"attackerId": "c", "defenderId": "d", "score": 0},
            "status": "completed",
            "timestamp": 1700000000000,
            "winner": "team1",
        }
    )
    assert match.team1.attacker_id == "a"
    assert match.team2.defender_id == "d"
    assert Match.from_dict(match.to_dict()) == match


def test_settings_defaults_and_validation():
    settings = TournamentSettings()
    assert settings.winning_score == 10
    assert settings.shutout_bonus == 1
    assert settings.is_position_mode is True

    with pytest.raises(InvalidConfigurationException):
        TournamentSettings(winning_score=0)
    with pytest.raises(InvalidConfigurationException):
        TournamentSettings(shutout_bonus=3)
    with pytest.raises(InvalidConfigurationException):
        TournamentSettings(is_position_mode="yes")


def test_settings_from_legacy_dict():
    settings = TournamentSettings.from_dict(
        {"winningScore": 7, "unicornBonus": 2, "isPositionMode": False}
    )
    assert settings == TournamentSettings(7, 2, False)


def test_player_derived_stats():
    player = Player(
        name="Ana",
        games_played=4,
        wins=3,
        goals_scored=35,
        goals_conceded=20,
        attack_played=3,
        defense_played=1,
    )
    assert player.goal_difference == 15
    assert player.role_bias == 2
    assert player.win_rate == 0.75
    assert Player(name="New").win_rate == 0.0


def test_player_reset_keeps_identity():
    player = Player(name="Ana", id="p1", avatar="ana.png", wins=3, points=4)
    fresh = player.reset_stats()

    assert fresh.id == "p1"
    assert fresh.avatar == "ana.png"
    assert fresh.points == 0
    assert player.points == 4


def test_player_from_legacy_dict():
    player = Player.from_dict({"id": "p1", "name": "Ana", "unicorns": 2})
    assert player.shutout_wins == 2
    assert Player.from_dict(player.to_dict()) == player


def test_create_player():
    player = create_player("  Ana   Rita ")
    assert player.name == "Ana Rita"
    assert player.id.startswith("player-")
    assert player.id != create_player("Ana Rita").id

    with pytest.raises(PlayerNameValidationException):
        create_player("   ")


def test_create_player_from_dict_requires_id():
    with pytest.raises(InvalidPlayerDataException):
        create_player_from_dict({"name": "Ana"})
    with pytest.raises(InvalidPlayerDataException):
        create_player_from_dict({"id": "p1", "name": ""})

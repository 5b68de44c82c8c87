import json

import pytest

from foosballpairing.exceptions import InvalidConfigurationException
from foosballpairing.models import TournamentSettings
from foosballpairing.testing import SessionSimulator, SimulationConfig
from foosballpairing.testing.__main__ import main


def _summary(report):
    return [(p["name"], p["points"], p["games_played"]) for p in report["standings"]]


@pytest.mark.parametrize("num_players", [4, 5, 6, 8, 9])
def test_rounds_keep_games_level(num_players):
    config = SimulationConfig(num_players=num_players, num_rounds=3, seed=17)
    report = SessionSimulator(config).run()

    assert report["matches_played"] > 0
    assert report["games_spread"] <= 1
    assert len(report["rounds"]) == 3
    assert sum(report["games_played"].values()) == 4 * report["matches_played"]


def test_same_seed_same_session():
    config = SimulationConfig(num_players=7, num_rounds=4, seed=2024)
    first = SessionSimulator(config).run()
    second = SessionSimulator(config).run()

    assert _summary(first) == _summary(second)
    assert first["shutouts"] == second["shutouts"]
    assert first["undo_count"] == second["undo_count"]


def test_lifetime_ledger_matches_single_session():
    simulator = SessionSimulator(SimulationConfig(num_players=6, num_rounds=2, seed=5))
    report = simulator.run()

    for standing in report["standings"]:
        lifetime = report["lifetime"][standing["id"]]
        assert lifetime["points"] == standing["points"]
        assert lifetime["games_played"] == standing["games_played"]


def test_shutout_bonus_is_reflected_in_points():
    settings = TournamentSettings(winning_score=1, shutout_bonus=2)
    report = SessionSimulator(
        SimulationConfig(num_players=4, num_rounds=3, seed=9, settings=settings)
    ).run()

    # first to one goal is always a shutout
    assert report["shutouts"] == report["matches_played"]
    total_points = sum(p["points"] for p in report["standings"])
    assert total_points == 2 * 3 * report["matches_played"]


def test_absences_still_produce_matches():
    config = SimulationConfig(num_players=10, num_rounds=5, seed=3, absence_rate=0.3)
    report = SessionSimulator(config).run()

    assert report["matches_played"] >= 5
    for round_data in report["rounds"]:
        assert len(round_data["available"]) >= 4


def test_invalid_config():
    with pytest.raises(InvalidConfigurationException):
        SimulationConfig(num_players=3, num_rounds=1)
    with pytest.raises(InvalidConfigurationException):
        SimulationConfig(num_players=4, num_rounds=0)
    with pytest.raises(InvalidConfigurationException):
        SimulationConfig(num_players=4, num_rounds=1, goal_bias=1.0)


def test_cli_simulate_writes_report(tmp_path, capsys):
    output = tmp_path / "report.json"
    code = main(
        [
            "simulate",
            "--players",
            "6",
            "--rounds",
            "2",
            "--seed",
            "1",
            "--output",
            str(output),
        ]
    )

    assert code == 0
    report = json.loads(output.read_text(encoding="utf-8"))
    assert report["config"]["num_players"] == 6
    assert "Standings" in capsys.readouterr().out


def test_cli_rejects_bad_winning_score(capsys):
    assert main(["simulate", "--winning-score", "50"]) == 1
    assert "Error" in capsys.readouterr().out

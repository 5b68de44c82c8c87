from foosballpairing.models import Match, Team, TournamentSettings
from foosballpairing.player import Player
from foosballpairing.tournament import apply_result, apply_result_to_ledger, is_shutout


def _players(*ids):
    return [Player(name=pid.upper(), id=pid) for pid in ids]


def _completed(team1_score, team2_score):
    """a attacks and b defends for team1; c attacks and d defends for team2."""
    return Match(
        team1=Team("a", "b", team1_score),
        team2=Team("c", "d", team2_score),
        status="completed",
        winner="team1" if team1_score > team2_score else "team2",
    )


def _by_id(players):
    return {p.id: p for p in players}


def test_winners_and_losers_are_updated():
    players = _players("a", "b", "c", "d", "e")
    updated = _by_id(apply_result(players, _completed(10, 6), TournamentSettings()))

    for winner in ("a", "b"):
        assert updated[winner].wins == 1
        assert updated[winner].losses == 0
        assert updated[winner].points == 1
        assert updated[winner].goals_scored == 10
        assert updated[winner].goals_conceded == 6
        assert updated[winner].shutout_wins == 0
    for loser in ("c", "d"):
        assert updated[loser].wins == 0
        assert updated[loser].losses == 1
        assert updated[loser].points == 0
        assert updated[loser].goal_difference == -4

    assert updated["a"].attack_played == 1
    assert updated["b"].defense_played == 1
    assert updated["c"].attack_played == 1
    assert updated["d"].defense_played == 1
    assert updated["e"] is players[4]


def test_shutout_awards_bonus_to_winners():
    settings = TournamentSettings(winning_score=10, shutout_bonus=1)
    match = _completed(0, 10)
    updated = _by_id(apply_result(_players("a", "b", "c", "d"), match, settings))

    assert is_shutout(match)
    assert updated["c"].points == 2
    assert updated["d"].points == 2
    assert updated["c"].shutout_wins == 1
    assert updated["a"].points == 0
    assert updated["a"].shutout_wins == 0


def test_shutout_without_bonus_still_counts():
    settings = TournamentSettings(shutout_bonus=0)
    players = _players("a", "b", "c", "d")
    updated = _by_id(apply_result(players, _completed(10, 0), settings))

    assert updated["a"].points == 1
    assert updated["a"].shutout_wins == 1


def test_totals_are_conserved():
    players = _players("a", "b", "c", "d", "e", "f")
    before = {p.id: p for p in players}
    updated = apply_result(players, _completed(7, 10), TournamentSettings())

    def total(attr, records):
        return sum(getattr(p, attr) for p in records)

    assert total("games_played", updated) - total("games_played", before.values()) == 4
    assert total("wins", updated) == 2
    assert total("losses", updated) == 2
    assert total("goals_scored", updated) == total("goals_conceded", updated)
    assert total("attack_played", updated) == 2
    assert total("defense_played", updated) == 2


def test_records_are_replaced_not_mutated():
    players = _players("a", "b", "c", "d")
    updated = apply_result(players, _completed(10, 2), TournamentSettings())

    assert all(p.games_played == 0 for p in players)
    assert [p.id for p in updated] == ["a", "b", "c", "d"]
    assert updated[0] is not players[0]


def test_unfinished_match_changes_nothing():
    players = _players("a", "b", "c", "d")
    active = Match(team1=Team("a", "b", 10), team2=Team("c", "d", 3), status="active")

    updated = apply_result(players, active, TournamentSettings())

    assert updated == players
    assert all(new is old for new, old in zip(updated, players))
    assert not is_shutout(active)


def test_unknown_participants_are_skipped():
    players = _players("a", "b", "c")
    updated = _by_id(apply_result(players, _completed(10, 4), TournamentSettings()))

    assert set(updated) == {"a", "b", "c"}
    assert updated["a"].wins == 1
    assert updated["c"].losses == 1


def test_ledger_update_returns_new_dict():
    ledger = {p.id: p for p in _players("a", "b", "c", "d")}
    new_ledger = apply_result_to_ledger(ledger, _completed(10, 9), TournamentSettings())

    assert new_ledger is not ledger
    assert new_ledger["b"].wins == 1
    assert ledger["b"].wins == 0

"""Foosball Pairing - 2v2 foosball tournament engine."""

from foosballpairing.models import Match, Team, TournamentSettings
from foosballpairing.pairing import create_next_match
from foosballpairing.player import Player, create_player
from foosballpairing.tournament import (
    MatchLifecycle,
    RoundManager,
    Tournament,
    apply_result,
    generate_queue,
    rank_players,
)

__version__ = "0.1.0"

__all__ = [
    "Player",
    "create_player",
    "Team",
    "Match",
    "TournamentSettings",
    "rank_players",
    "create_next_match",
    "generate_queue",
    "apply_result",
    "MatchLifecycle",
    "RoundManager",
    "Tournament",
]

from foosballpairing.models.match import Match, Team
from foosballpairing.models.tournament_settings import TournamentSettings

__all__ = [
    "Match",
    "Team",
    "TournamentSettings",
]

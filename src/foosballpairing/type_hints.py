"""Type hints used in Foosball Pairing."""

from typing import Dict, FrozenSet, Literal, Tuple

# Team side string constants (for runtime use)
TEAM1 = "team1"
TEAM2 = "team2"
TEAM_SIDES = (TEAM1, TEAM2)

# Team side type aliases (for type hints)
TeamSide = Literal["team1", "team2"]

# Match status literals
MatchStatus = Literal["scheduled", "active", "completed"]

# Player role literals
Role = Literal["attacker", "defender"]

# Ranking mode literals
RankingMode = Literal["points", "least_played"]

# Ledger of players keyed by id
PlayerLedger = Dict[str, "Player"]
# (team1_score, team2_score)
ScoreSnapshot = Tuple[int, int]
# Unordered pair of teammate ids
TeammatePair = FrozenSet[str]
# Counts of how often each pair has been teammates
TeammateCosts = Dict[TeammatePair, int]

#  LocalWords:  TeammatePair TeammateCosts

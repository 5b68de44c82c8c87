# Foosball Pairing
# Copyright (C) 2025  Foosball Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
MIN_PLAYERS_PER_MATCH = 4

# Safety bound on matches added by a single round generation
MAX_QUEUE_MATCHES = 20

# Match status values
STATUS_SCHEDULED = "scheduled"
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"
MATCH_STATUSES = (STATUS_SCHEDULED, STATUS_ACTIVE, STATUS_COMPLETED)

# Player roles within a team
ROLE_ATTACKER = "attacker"
ROLE_DEFENDER = "defender"

# Scoring
POINTS_WIN = 1
POINTS_LOSS = 0
SHUTOUT_LOSER_SCORE = 0

# Tournament settings (configurable per tournament)
DEFAULT_WINNING_SCORE = 10
MIN_WINNING_SCORE = 1
MAX_WINNING_SCORE = 20
SHUTOUT_BONUS_CHOICES = (0, 1, 2)
DEFAULT_SHUTOUT_BONUS = 1
DEFAULT_POSITION_MODE = True

# Ranking modes
RANK_POINTS = "points"
RANK_LEAST_PLAYED = "least_played"

RANKING_NAMES = {
    RANK_POINTS: "Leaderboard",
    RANK_LEAST_PLAYED: "Least Played",
}

# The three ways to split four players into two unordered pairs,
# as indices into the selected participants.
TEAM_SPLITS = (
    ((0, 1), (2, 3)),
    ((0, 2), (1, 3)),
    ((0, 3), (1, 2)),
)

DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"
LOG_LEVEL_ENV_VAR = "FOOSBALL_PAIRING_LOG_LEVEL"

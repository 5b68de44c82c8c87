"""Tournament management for Foosball Pairing.

This package runs a tournament session: ranking players, scheduling
balanced rounds, playing the active match and recording results.
"""

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

from foosballpairing.tournament.match_lifecycle import MatchLifecycle, ScoreHistory
from foosballpairing.tournament.ranking import leader_ids, leaderboard, rank_players
from foosballpairing.tournament.result_recorder import (
    apply_result,
    apply_result_to_ledger,
    is_shutout,
)
from foosballpairing.tournament.round_manager import (
    RoundManager,
    compute_target_games,
    generate_queue,
)
from foosballpairing.tournament.tournament import Tournament

__all__ = [
    "Tournament",
    "RoundManager",
    "MatchLifecycle",
    "ScoreHistory",
    "apply_result",
    "apply_result_to_ledger",
    "is_shutout",
    "rank_players",
    "leaderboard",
    "leader_ids",
    "compute_target_games",
    "generate_queue",
]

"""Standings for tournaments.

Two orderings are offered. The points leaderboard sorts by, in priority:

1. Points (descending)
2. Wins (descending)
3. Goal difference (descending)

No further tiebreak is defined; exact ties keep their input order because
Python's sort is stable. The "least played" ordering sorts by games played
(ascending) only and does not use the points chain at all.
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

from typing import Iterable, List, Set, Tuple

from foosballpairing.constants import RANK_LEAST_PLAYED, RANK_POINTS, RANKING_NAMES
from foosballpairing.player import Player
from foosballpairing.type_hints import RankingMode


def points_sort_key(player: Player) -> Tuple[int, int, int]:
    """Ascending sort key that puts the best player first."""
    return (-player.points, -player.wins, -player.goal_difference)


def leaderboard(players: Iterable[Player]) -> List[Player]:
    """Order players by points, then wins, then goal difference."""
    return sorted(players, key=points_sort_key)


def least_played(players: Iterable[Player]) -> List[Player]:
    """Order players by games played, fewest first."""
    return sorted(players, key=lambda p: p.games_played)


def rank_players(
    players: Iterable[Player], mode: RankingMode = RANK_POINTS
) -> List[Player]:
    """Return a new list of players ordered for the given ranking mode.

    Args:
        players: Players to rank (not modified)
        mode: ``points`` or ``least_played``

    Returns:
        Players in ranking order

    Raises:
        ValueError: If the mode is unknown
    """
    if mode == RANK_POINTS:
        return leaderboard(players)
    if mode == RANK_LEAST_PLAYED:
        return least_played(players)
    known = ", ".join(RANKING_NAMES)
    raise ValueError(f"Unknown ranking mode {mode!r} (expected one of: {known})")


def leader_ids(players: Iterable[Player]) -> Set[str]:
    """IDs of the available players sharing the top points total.

    More than one id means joint leaders. The top total is taken over all
    players, so an unavailable player can hold the lead without being listed.
    """
    ranked = leaderboard(players)
    if not ranked:
        return set()
    top = ranked[0].points
    return {p.id for p in ranked if p.points == top and p.is_available}

"""Round management for tournaments.

This module builds queues of scheduled matches that even out the number of
games each available player has played, and handles the scheduled queue.
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

import random
from typing import Dict, Iterable, List, Optional, Tuple

from foosballpairing.constants import (
    MAX_QUEUE_MATCHES,
    MIN_PLAYERS_PER_MATCH,
    ROLE_ATTACKER,
    STATUS_SCHEDULED,
)
from foosballpairing.models import Match
from foosballpairing.pairing import create_next_match
from foosballpairing.player import Player
from foosballpairing.utils import setup_logger

logger = setup_logger(__name__)


def compute_target_games(players: Iterable[Player]) -> Optional[int]:
    """Games every available player should reach after the next round.

    If all available players have played equally often, everyone moves one
    game forward; otherwise the laggards are brought up to the current
    maximum.

    Returns:
        The target, or None when fewer than four players are available
    """
    counts = [p.games_played for p in players if p.is_available]
    if len(counts) < MIN_PLAYERS_PER_MATCH:
        return None
    lowest, highest = min(counts), max(counts)
    return highest + 1 if lowest == highest else highest


def _record_simulated_match(match: Match, by_id: Dict[str, Player]) -> None:
    for team in (match.team1, match.team2):
        for player_id in team.player_ids:
            player = by_id[player_id]
            player.games_played += 1
            if team.role_of(player_id) == ROLE_ATTACKER:
                player.attack_played += 1
            else:
                player.defense_played += 1


def generate_queue(
    players: Iterable[Player],
    match_history: Iterable[Match],
    rng: Optional[random.Random] = None,
    max_matches: int = MAX_QUEUE_MATCHES,
) -> List[Match]:
    """Generate a queue of matches that evens out games played.

    Works on private copies: the caller's players and history are never
    modified. Each generated match is fed back into the simulated history and
    the simulated game and role counters, so later matches see the load of
    earlier ones.

    Generation stops once every available player has reached the target.
    When the counts cannot converge exactly, some players finish above it.

    Args:
        players: All players of the tournament
        match_history: Matches so far
        rng: Random source handed to the pairing engine
        max_matches: Safety bound on the queue length

    Returns:
        Scheduled matches, possibly empty. The caller appends them.
    """
    rng = rng if rng is not None else random.Random()
    sim_players = [p.copy() for p in players]
    sim_history = list(match_history)
    available = [p for p in sim_players if p.is_available]

    target = compute_target_games(available)
    if target is None:
        return []

    by_id = {p.id: p for p in sim_players}
    queue: List[Match] = []
    for _ in range(max_matches):
        if min(p.games_played for p in available) >= target:
            break
        match = create_next_match(sim_players, sim_history, rng)
        if match is None:
            break
        queue.append(match)
        sim_history.append(match)
        _record_simulated_match(match, by_id)

    logger.info(
        "Generated %d matches for %d available players (target %d games)",
        len(queue),
        len(available),
        target,
    )
    return queue


class RoundManager:
    """Manages the queue of scheduled matches for a tournament.

    This class is responsible for:
    - Generating single matches and balanced queues of matches
    - Finding the next scheduled match to play
    - Clearing the scheduled queue
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_queue_matches: int = MAX_QUEUE_MATCHES,
    ):
        """Initialize the round manager.

        Args:
            rng: Random source for all pairing tie-breaks
            max_queue_matches: Safety bound on matches per generated queue
        """
        self.rng = rng if rng is not None else random.Random()
        self.max_queue_matches = max_queue_matches

    def create_next_match(
        self, players: Iterable[Player], matches: Iterable[Match]
    ) -> Optional[Match]:
        """Pair a single scheduled match, or None if too few are available."""
        return create_next_match(players, matches, self.rng)

    def generate_queue(
        self, players: Iterable[Player], matches: Iterable[Match]
    ) -> List[Match]:
        """Generate a balanced queue of scheduled matches."""
        return generate_queue(players, matches, self.rng, self.max_queue_matches)

    @staticmethod
    def next_scheduled(matches: Iterable[Match]) -> Optional[Match]:
        """Return the first scheduled match in queue order, if any."""
        for match in matches:
            if match.status == STATUS_SCHEDULED:
                return match
        return None

    @staticmethod
    def clear_queue(matches: Iterable[Match]) -> Tuple[List[Match], int]:
        """Discard every scheduled match.

        Returns:
            Tuple of (remaining matches, number removed)
        """
        remaining = []
        removed = 0
        for match in matches:
            if match.status == STATUS_SCHEDULED:
                removed += 1
            else:
                remaining.append(match)
        if removed:
            logger.info(f"Cleared {removed} scheduled matches from the queue")
        return remaining, removed

"""Teammate-rotation pairing for 2v2 matches."""

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
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

from foosballpairing.constants import (
    MIN_PLAYERS_PER_MATCH,
    STATUS_COMPLETED,
    STATUS_SCHEDULED,
    TEAM_SPLITS,
)
from foosballpairing.models import Match, Team
from foosballpairing.player import Player
from foosballpairing.type_hints import TeammateCosts, TeammatePair
from foosballpairing.utils import setup_logger

logger = setup_logger(__name__)

# Matches whose line-ups count towards teammate repetition
_COSTED_STATUSES = (STATUS_COMPLETED, STATUS_SCHEDULED)


def _teammate_key(player1_id: str, player2_id: str) -> TeammatePair:
    return frozenset({player1_id, player2_id})


def build_teammate_costs(match_history: Iterable[Match]) -> TeammateCosts:
    """Count how often each unordered pair of players has been teammates.

    Only completed and scheduled matches count; an active match is still
    in play and cancelled matches no longer exist.
    """
    costs: TeammateCosts = Counter()
    for match in match_history:
        if match.status not in _COSTED_STATUSES:
            continue
        for team in (match.team1, match.team2):
            costs[_teammate_key(team.attacker_id, team.defender_id)] += 1
    return costs


def _select_participants(
    available: Sequence[Player], rng: random.Random
) -> List[Player]:
    """Pick the four players with the fewest games, shuffling ties."""
    pool = list(available)
    rng.shuffle(pool)
    # sort is stable, so the shuffle decides the order among equal counts
    pool.sort(key=lambda p: p.games_played)
    return pool[:MIN_PLAYERS_PER_MATCH]


def _split_cost(
    participants: Sequence[Player],
    split: Tuple[Tuple[int, int], Tuple[int, int]],
    costs: TeammateCosts,
) -> int:
    (a, b), (c, d) = split
    return costs.get(
        _teammate_key(participants[a].id, participants[b].id), 0
    ) + costs.get(_teammate_key(participants[c].id, participants[d].id), 0)


def _choose_split(
    participants: Sequence[Player], costs: TeammateCosts, rng: random.Random
) -> Tuple[Tuple[Player, Player], Tuple[Player, Player]]:
    """Pick the cheapest of the three splits, at random among equal costs."""
    scored = [(_split_cost(participants, split, costs), split) for split in TEAM_SPLITS]
    best_cost = min(cost for cost, _ in scored)
    (a, b), (c, d) = rng.choice([split for cost, split in scored if cost == best_cost])
    logger.debug("Chose split with teammate cost %s", best_cost)
    return (participants[a], participants[b]), (participants[c], participants[d])


def assign_roles(player1: Player, player2: Player, rng: random.Random) -> Team:
    """Build a team, putting the more attack-heavy player in defense.

    Equal role bias is settled by a coin flip.
    """
    if player1.role_bias > player2.role_bias:
        return Team(attacker_id=player2.id, defender_id=player1.id)
    if player2.role_bias > player1.role_bias:
        return Team(attacker_id=player1.id, defender_id=player2.id)
    if rng.random() < 0.5:
        return Team(attacker_id=player1.id, defender_id=player2.id)
    return Team(attacker_id=player2.id, defender_id=player1.id)


def create_next_match(
    players: Iterable[Player],
    match_history: Iterable[Match],
    rng: Optional[random.Random] = None,
) -> Optional[Match]:
    """Create the next balanced match from the available players.

    Parameters
    ----------
        players: All players of the tournament; unavailable ones are ignored
        match_history: Matches so far, used to discourage repeated teammates
        rng: Random source for tie-breaking; a fresh one if None

    Returns
    -------
        A new scheduled match with zero scores, or None when fewer than four
        players are available.
    """
    rng = rng if rng is not None else random.Random()
    available = [p for p in players if p.is_available]
    if len(available) < MIN_PLAYERS_PER_MATCH:
        logger.info(
            "Cannot create a match: %d available players, need %d",
            len(available),
            MIN_PLAYERS_PER_MATCH,
        )
        return None

    participants = _select_participants(available, rng)
    costs = build_teammate_costs(match_history)
    pair1, pair2 = _choose_split(participants, costs, rng)

    match = Match(
        team1=assign_roles(pair1[0], pair1[1], rng),
        team2=assign_roles(pair2[0], pair2[1], rng),
        status=STATUS_SCHEDULED,
    )
    logger.debug(
        "Paired %s + %s vs %s + %s",
        pair1[0].name,
        pair1[1].name,
        pair2[0].name,
        pair2[1].name,
    )
    return match

"""Result recording for tournaments.

This module applies completed matches to player statistics. The functions
are pure: records are replaced, never mutated, so the same logic serves the
tournament ledger and the lifetime ledger.
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

from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from foosballpairing.constants import (
    POINTS_LOSS,
    POINTS_WIN,
    ROLE_ATTACKER,
    SHUTOUT_LOSER_SCORE,
    STATUS_COMPLETED,
)
from foosballpairing.models import Match, Team, TournamentSettings
from foosballpairing.player import Player
from foosballpairing.type_hints import TEAM1, TEAM2, PlayerLedger
from foosballpairing.utils import setup_logger

logger = setup_logger(__name__)


def _is_recordable(match: Match) -> bool:
    return match.status == STATUS_COMPLETED and match.winner in (TEAM1, TEAM2)


def losing_team(match: Match) -> Optional[Team]:
    """Return the losing team of a completed match, or None."""
    if not _is_recordable(match):
        return None
    return match.team2 if match.winner == TEAM1 else match.team1


def is_shutout(match: Match) -> bool:
    """Check if a completed match was won without conceding a goal."""
    loser = losing_team(match)
    return loser is not None and loser.score == SHUTOUT_LOSER_SCORE


def _updated_player(
    player: Player,
    match: Match,
    settings: TournamentSettings,
    shutout: bool,
) -> Player:
    side = match.side_of(player.id)
    team = match.team(side)
    opponents = match.team2 if side == TEAM1 else match.team1
    won = side == match.winner
    attacked = team.role_of(player.id) == ROLE_ATTACKER

    points = POINTS_LOSS
    shutout_earned = 0
    if won:
        points = POINTS_WIN
        if shutout:
            points += settings.shutout_bonus
            shutout_earned = 1

    return replace(
        player,
        games_played=player.games_played + 1,
        wins=player.wins + (1 if won else 0),
        losses=player.losses + (0 if won else 1),
        goals_scored=player.goals_scored + team.score,
        goals_conceded=player.goals_conceded + opponents.score,
        attack_played=player.attack_played + (1 if attacked else 0),
        defense_played=player.defense_played + (0 if attacked else 1),
        points=player.points + points,
        shutout_wins=player.shutout_wins + shutout_earned,
    )


def apply_result(
    players: Iterable[Player], match: Match, settings: TournamentSettings
) -> List[Player]:
    """Apply a completed match to a set of player records.

    Args:
        players: Player records (not modified)
        match: The completed match
        settings: Settings in force when the match was finished

    Returns:
        A new list in the same order; the four participants are replaced by
        updated records and everyone else is returned as-is. When the match is
        not completed, or has no winner, nothing changes.
    """
    players = list(players)
    if not _is_recordable(match):
        logger.warning(
            "Match %s is not completed with a winner (status=%s), result ignored",
            match.id,
            match.status,
        )
        return players

    shutout = is_shutout(match)
    participant_ids = set(match.player_ids)
    updated: List[Player] = []
    seen = set()
    for player in players:
        if player.id in participant_ids:
            updated.append(_updated_player(player, match, settings, shutout))
            seen.add(player.id)
        else:
            updated.append(player)

    missing = participant_ids - seen
    if missing:
        logger.warning(
            "Match %s references unknown players %s, skipped",
            match.id,
            sorted(missing),
        )

    logger.debug(
        "Recorded match %s: %s-%s, winner %s%s",
        match.id,
        match.team1.score,
        match.team2.score,
        match.winner,
        " (shutout)" if shutout else "",
    )
    return updated


def apply_result_to_ledger(
    ledger: PlayerLedger, match: Match, settings: TournamentSettings
) -> Dict[str, Player]:
    """Apply a completed match to players keyed by id, returning a new dict."""
    return {p.id: p for p in apply_result(ledger.values(), match, settings)}

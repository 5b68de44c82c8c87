"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for running a tournament session, coordinating
the pairing, round, result and lifecycle components behind one API.
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
from typing import Any, Dict, Iterable, List, Optional, Set

from foosballpairing.constants import (
    DEFAULT_TOURNAMENT_NAME,
    MIN_PLAYERS_PER_MATCH,
    RANK_POINTS,
    STATUS_ACTIVE,
    STATUS_COMPLETED,
    STATUS_SCHEDULED,
)
from foosballpairing.exceptions import (
    DuplicatePlayerException,
    InvalidPairingException,
    PlayerNotFoundException,
)
from foosballpairing.models import Match, TournamentSettings
from foosballpairing.player import Player, create_player_from_dict
from foosballpairing.tournament.match_lifecycle import MatchLifecycle
from foosballpairing.tournament.ranking import leader_ids, rank_players
from foosballpairing.tournament.result_recorder import (
    apply_result,
    apply_result_to_ledger,
)
from foosballpairing.tournament.round_manager import RoundManager
from foosballpairing.type_hints import PlayerLedger, RankingMode, TeamSide
from foosballpairing.utils import generate_id, now_ms, setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized components:
    - RoundManager: pairs single matches and balanced queues
    - MatchLifecycle: runs the one active match and its score history
    - apply_result: folds completed matches into the player ledgers

    Two ledgers are updated when a match completes: the tournament's own
    player records, and an optional lifetime ledger shared across
    tournaments and owned by the caller.
    """

    def __init__(
        self,
        name: str = DEFAULT_TOURNAMENT_NAME,
        players: Optional[Iterable[Player]] = None,
        settings: Optional[TournamentSettings] = None,
        tournament_id: Optional[str] = None,
        lifetime: Optional[PlayerLedger] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize a new tournament.

        Args
        ----
        name: Tournament name
        players: Initial roster
        settings: Scoring settings, defaults if None
        tournament_id: Identifier, generated if None
        lifetime: Lifetime ledger (id -> Player) updated alongside this tournament
        rng: Random source for pairing tie-breaks
        """
        self.id = tournament_id or generate_id("Tournament")
        self.name = name
        self.settings = settings if settings is not None else TournamentSettings()
        self.created_at = now_ms()
        self.last_updated_at = self.created_at

        self.players: Dict[str, Player] = {}
        self.matches: List[Match] = []
        self.lifetime = lifetime

        self.round_manager = RoundManager(rng=rng)
        self._current: Optional[MatchLifecycle] = None

        for player in players or []:
            self.add_player(player)

    def _touch(self) -> None:
        self.last_updated_at = now_ms()

    # ========== Player Management ==========

    def get_player(self, player_id: str) -> Player:
        """Return a player of this tournament.

        Raises:
            PlayerNotFoundException: If the id is not on the roster
        """
        try:
            return self.players[player_id]
        except KeyError:
            raise PlayerNotFoundException(f"No player with id {player_id}") from None

    def get_player_list(self, available_only: bool = False) -> List[Player]:
        """Get list of tournament players.

        Args:
            available_only: If True, only return available players

        Returns:
            List of Player objects in roster order
        """
        players = list(self.players.values())
        if available_only:
            return [p for p in players if p.is_available]
        return players

    def add_player(self, player: Player) -> None:
        """Add a player to the roster.

        A zero-stat record is registered in the lifetime ledger if the player
        has none yet.

        Raises:
            DuplicatePlayerException: If the id is already on the roster
        """
        if player.id in self.players:
            raise DuplicatePlayerException(
                f"Player {player.name} ({player.id}) is already in {self.name}"
            )
        self.players[player.id] = player
        if self.lifetime is not None and player.id not in self.lifetime:
            self.lifetime[player.id] = player.reset_stats()
        self._touch()
        logger.info(f"Added player: {player.name} ({player.id})")

    def remove_player(self, player_id: str) -> bool:
        """Remove a player from the roster.

        Past matches and the lifetime ledger keep the player. Scheduled
        matches naming the player stay queued; they are skipped when stats
        are applied.

        Returns:
            True if removed, False if not found or playing the active match
        """
        if player_id not in self.players:
            return False
        active = self.active_match
        if active is not None and active.has_player(player_id):
            logger.warning(f"Cannot remove {player_id}: playing the active match")
            return False
        player = self.players.pop(player_id)
        self._touch()
        logger.info(f"Removed player: {player.name} ({player_id})")
        return True

    def set_player_available(self, player_id: str, is_available: bool) -> None:
        """Set whether a player may be picked for new matches.

        Raises:
            PlayerNotFoundException: If the id is not on the roster
        """
        player = self.get_player(player_id)
        player.is_available = is_available
        self._touch()
        logger.info(f"Set {player.name} availability to: {is_available}")

    def toggle_player_availability(self, player_id: str) -> bool:
        """Flip a player's availability and return the new value."""
        is_available = not self.get_player(player_id).is_available
        self.set_player_available(player_id, is_available)
        return is_available

    @property
    def can_start_match(self) -> bool:
        """Whether enough players are available to pair a match."""
        return len(self.get_player_list(available_only=True)) >= MIN_PLAYERS_PER_MATCH

    # ========== Standings ==========

    def standings(self, mode: RankingMode = RANK_POINTS) -> List[Player]:
        """Players in ranking order for the given mode."""
        return rank_players(self.players.values(), mode)

    def leader_ids(self) -> Set[str]:
        """IDs of the available players sharing the lead."""
        return leader_ids(self.players.values())

    # ========== Match Queue ==========

    @property
    def scheduled_matches(self) -> List[Match]:
        return [m for m in self.matches if m.status == STATUS_SCHEDULED]

    @property
    def completed_matches(self) -> List[Match]:
        """Completed matches, newest first."""
        completed = [m for m in self.matches if m.status == STATUS_COMPLETED]
        return sorted(completed, key=lambda m: m.timestamp, reverse=True)

    def player_matches(self, player_id: str) -> List[Match]:
        """Completed matches the player took part in, newest first."""
        return [m for m in self.completed_matches if m.has_player(player_id)]

    def preview_next_match(self) -> Optional[Match]:
        """Pair the match that would be played next, without scheduling it."""
        return self.round_manager.create_next_match(self.players.values(), self.matches)

    def generate_round(self) -> List[Match]:
        """Append a balanced queue of scheduled matches.

        Returns:
            The matches added, empty if no balanced round could be built
        """
        queue = self.round_manager.generate_queue(self.players.values(), self.matches)
        if not queue:
            logger.info("Could not generate a balanced round for %s", self.name)
            return []
        self.matches.extend(queue)
        self._touch()
        return queue

    def clear_queue(self) -> int:
        """Discard all scheduled matches and return how many were removed."""
        self.matches, removed = self.round_manager.clear_queue(self.matches)
        if removed:
            self._touch()
        return removed

    # ========== Active Match ==========

    @property
    def current_match(self) -> Optional[MatchLifecycle]:
        """Lifecycle of the active match, if one is being played."""
        return self._current

    @property
    def active_match(self) -> Optional[Match]:
        return self._current.match if self._current is not None else None

    def start_match(self) -> Optional[MatchLifecycle]:
        """Start the next scheduled match, or pair a fresh one.

        Returns:
            The lifecycle of the started match, or None if a match is already
            active or no match can be paired
        """
        if self._current is not None:
            logger.warning(f"Match {self._current.match.id} is already active")
            return None

        match = self.round_manager.next_scheduled(self.matches)
        if match is None:
            match = self.preview_next_match()
            if match is None:
                logger.info("Not enough available players to start a match")
                return None
            self.matches.append(match)

        lifecycle = MatchLifecycle(match, self.settings)
        lifecycle.activate()
        self._current = lifecycle
        self._touch()
        return lifecycle

    def update_score(self, team: TeamSide, delta: int) -> bool:
        """Change the active match's score for one team."""
        if self._current is None:
            return False
        return self._touch_if(self._current.update_score(team, delta))

    def set_score(self, team1_score: int, team2_score: int) -> bool:
        """Set the active match's score directly."""
        if self._current is None:
            return False
        return self._touch_if(self._current.set_score(team1_score, team2_score))

    def undo(self) -> bool:
        """Undo the last score edit of the active match."""
        if self._current is None:
            return False
        return self._touch_if(self._current.undo())

    def redo(self) -> bool:
        """Redo a score edit of the active match."""
        if self._current is None:
            return False
        return self._touch_if(self._current.redo())

    def _touch_if(self, changed: bool) -> bool:
        if changed:
            self._touch()
        return changed

    def finish_match(self) -> Optional[Match]:
        """Complete the active match and apply it to both ledgers.

        Returns:
            The completed match, or None if no match is active or no team has
            reached the winning score yet
        """
        if self._current is None:
            return None
        match = self._current.finish()
        if match is None:
            return None

        updated = apply_result(self.players.values(), match, self.settings)
        self.players = {p.id: p for p in updated}
        if self.lifetime is not None:
            new_lifetime = apply_result_to_ledger(self.lifetime, match, self.settings)
            # the caller holds the ledger, so update it in place
            self.lifetime.clear()
            self.lifetime.update(new_lifetime)

        self._current = None
        self._touch()
        return match

    def cancel_match(self) -> bool:
        """Discard the active match; it is removed from the match list."""
        if self._current is None:
            return False
        match = self._current.match
        if not self._current.discard():
            return False
        self.matches = [m for m in self.matches if m.id != match.id]
        self._current = None
        self._touch()
        return True

    def update_settings(self, settings: TournamentSettings) -> None:
        """Replace the settings for the active match and later ones."""
        self.settings = settings
        if self._current is not None:
            self._current.settings = settings
        self._touch()
        logger.info(
            "Settings for %s: first to %d, shutout bonus %d",
            self.name,
            settings.winning_score,
            settings.shutout_bonus,
        )

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the tournament (score history is not kept)."""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at,
            "last_updated_at": self.last_updated_at,
            "settings": self.settings.to_dict(),
            "players": [p.to_dict() for p in self.players.values()],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        lifetime: Optional[PlayerLedger] = None,
        rng: Optional[random.Random] = None,
    ) -> "Tournament":
        """Deserialize a tournament; an active match is resumed."""
        tournament = cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            players=[create_player_from_dict(p) for p in data.get("players", [])],
            settings=TournamentSettings.from_dict(data.get("settings", {})),
            tournament_id=data.get("id"),
            lifetime=lifetime,
            rng=rng,
        )
        tournament.matches = _load_matches(data.get("matches", []))
        tournament.created_at = data.get("created_at", tournament.created_at)
        tournament.last_updated_at = data.get(
            "last_updated_at", tournament.last_updated_at
        )

        active = [m for m in tournament.matches if m.status == STATUS_ACTIVE]
        if active:
            tournament._current = MatchLifecycle.resume(active[0], tournament.settings)
            for stale in active[1:]:
                logger.warning(f"Dropping extra active match {stale.id}")
            tournament.matches = [
                m
                for m in tournament.matches
                if m.status != STATUS_ACTIVE or m is active[0]
            ]
        return tournament


def _load_matches(entries: Iterable[Dict[str, Any]]) -> List[Match]:
    """Deserialize matches, skipping entries that are corrupted."""
    matches = []
    for entry in entries:
        try:
            matches.append(Match.from_dict(entry))
        except (InvalidPairingException, KeyError) as e:
            logger.warning(f"Skipping corrupted match {entry.get('id')!r}: {e}")
    return matches

"""A player in the ledger of a tournament (or of a player's lifetime)."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from foosballpairing.utils import generate_id, now_ms


def _new_player_id() -> str:
    return generate_id("Player")


@dataclass
class Player:
    """Represents a player record and its cumulative statistics.

    The same record type is used for tournament-scoped stats and for
    lifetime stats; the statistics updater applies identical logic to both.

    The record is intentionally **free of pairing and scoring logic**.
    Applying a match result builds new records and leaves the old ones
    untouched. Other edits, such as availability, change the record in place.

    Attributes:
        name: Display name
        id: Opaque unique identifier
        avatar: Optional avatar reference (URL or data URI), never interpreted
        games_played: Completed matches played
        wins: Completed matches won
        losses: Completed matches lost
        goals_scored: Goals scored by the player's teams
        goals_conceded: Goals scored against the player's teams
        attack_played: Matches played as attacker
        defense_played: Matches played as defender
        points: Ranking points (wins plus shutout bonuses)
        shutout_wins: Wins where the opponents scored no goal
        is_available: Whether the player may be picked for new matches
        created_at: Creation time in epoch milliseconds
    """

    name: str
    id: str = field(default_factory=_new_player_id)
    avatar: Optional[str] = None

    games_played: int = 0
    wins: int = 0
    losses: int = 0
    goals_scored: int = 0
    goals_conceded: int = 0
    attack_played: int = 0
    defense_played: int = 0
    points: int = 0
    shutout_wins: int = 0

    is_available: bool = True
    created_at: int = field(default_factory=now_ms)

    # ========== Derived Statistics ==========

    @property
    def goal_difference(self) -> int:
        """Goals scored minus goals conceded."""
        return self.goals_scored - self.goals_conceded

    @property
    def role_bias(self) -> int:
        """Attack games minus defense games; positive means attack-heavy."""
        return self.attack_played - self.defense_played

    @property
    def win_rate(self) -> float:
        """Fraction of played matches won, 0.0 before the first match."""
        if self.games_played == 0:
            return 0.0
        return self.wins / self.games_played

    def reset_stats(self) -> "Player":
        """Return a copy with the same identity and availability but zero stats."""
        return Player(
            name=self.name,
            id=self.id,
            avatar=self.avatar,
            is_available=self.is_available,
            created_at=self.created_at,
        )

    def copy(self) -> "Player":
        """Return an independent copy of this record."""
        return replace(self)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "avatar": self.avatar,
            "games_played": self.games_played,
            "wins": self.wins,
            "losses": self.losses,
            "goals_scored": self.goals_scored,
            "goals_conceded": self.goals_conceded,
            "attack_played": self.attack_played,
            "defense_played": self.defense_played,
            "points": self.points,
            "shutout_wins": self.shutout_wins,
            "is_available": self.is_available,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary.

        ``unicorns`` is accepted as the historical name of ``shutout_wins``.
        """
        return cls(
            name=data["name"],
            id=data["id"],
            avatar=data.get("avatar"),
            games_played=data.get("games_played", 0),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            goals_scored=data.get("goals_scored", 0),
            goals_conceded=data.get("goals_conceded", 0),
            attack_played=data.get("attack_played", 0),
            defense_played=data.get("defense_played", 0),
            points=data.get("points", 0),
            shutout_wins=data.get("shutout_wins", data.get("unicorns", 0)),
            is_available=data.get("is_available", True),
            created_at=data.get("created_at", now_ms()),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.points} pts, {self.games_played} played)"

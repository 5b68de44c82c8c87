"""Team and match data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from foosballpairing.constants import (
    MATCH_STATUSES,
    ROLE_ATTACKER,
    ROLE_DEFENDER,
    STATUS_COMPLETED,
    STATUS_SCHEDULED,
)
from foosballpairing.exceptions import InvalidPairingException
from foosballpairing.type_hints import (
    TEAM1,
    TEAM2,
    TEAM_SIDES,
    MatchStatus,
    Role,
    TeamSide,
)
from foosballpairing.utils import generate_id, now_ms


@dataclass
class Team:
    """Two players in fixed roles and the goals they have scored.

    Attributes:
        attacker_id: ID of the player in the attacking role
        defender_id: ID of the player in the defending role
        score: Goals scored in the current match
    """

    attacker_id: str
    defender_id: str
    score: int = 0

    def __post_init__(self) -> None:
        if self.attacker_id == self.defender_id:
            raise InvalidPairingException(
                f"A team needs two different players, got {self.attacker_id} twice"
            )
        if self.score < 0:
            raise InvalidPairingException(
                f"Team score cannot be negative: {self.score}"
            )

    @property
    def player_ids(self) -> Tuple[str, str]:
        """IDs of both members, attacker first."""
        return (self.attacker_id, self.defender_id)

    def has_player(self, player_id: str) -> bool:
        """Check if the player is a member of this team."""
        return player_id in self.player_ids

    def role_of(self, player_id: str) -> Optional[Role]:
        """Return the role the player holds in this team, or None."""
        if player_id == self.attacker_id:
            return ROLE_ATTACKER
        if player_id == self.defender_id:
            return ROLE_DEFENDER
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "attacker_id": self.attacker_id,
            "defender_id": self.defender_id,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        return cls(
            attacker_id=data.get("attacker_id", data.get("attackerId")),
            defender_id=data.get("defender_id", data.get("defenderId")),
            score=data.get("score", 0),
        )


def _new_match_id() -> str:
    return generate_id("Match")


@dataclass
class Match:
    """A 2v2 match between two teams.

    Attributes:
        team1: First team
        team2: Second team
        status: One of ``scheduled``, ``active`` or ``completed``
        id: Unique identifier
        timestamp: Creation time, refreshed on completion (epoch milliseconds)
        winner: ``team1`` or ``team2`` once completed, otherwise None
    """

    team1: Team
    team2: Team
    status: MatchStatus = STATUS_SCHEDULED
    id: str = field(default_factory=_new_match_id)
    timestamp: int = field(default_factory=now_ms)
    winner: Optional[TeamSide] = None

    def __post_init__(self) -> None:
        ids = self.player_ids
        if len(set(ids)) != len(ids):
            raise InvalidPairingException(
                f"Match {self.id} repeats a player across teams: {ids}"
            )
        if self.status not in MATCH_STATUSES:
            raise InvalidPairingException(f"Unknown match status: {self.status!r}")
        if self.winner is not None and self.winner not in TEAM_SIDES:
            raise InvalidPairingException(f"Unknown winner: {self.winner!r}")
        if (self.winner is not None) != (self.status == STATUS_COMPLETED):
            raise InvalidPairingException(
                f"Match {self.id}: winner must be set exactly when completed"
            )

    @property
    def player_ids(self) -> Tuple[str, str, str, str]:
        """IDs of all four participants (team1 then team2, attacker first)."""
        return self.team1.player_ids + self.team2.player_ids

    @property
    def scores(self) -> Tuple[int, int]:
        """Current (team1, team2) score."""
        return (self.team1.score, self.team2.score)

    def team(self, side: TeamSide) -> Team:
        """Return the team on the given side."""
        if side == TEAM1:
            return self.team1
        if side == TEAM2:
            return self.team2
        raise KeyError(side)

    def side_of(self, player_id: str) -> Optional[TeamSide]:
        """Return which side the player is on, or None if not playing."""
        if self.team1.has_player(player_id):
            return TEAM1
        if self.team2.has_player(player_id):
            return TEAM2
        return None

    def has_player(self, player_id: str) -> bool:
        """Check if the player takes part in this match."""
        return self.side_of(player_id) is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "team1": self.team1.to_dict(),
            "team2": self.team2.to_dict(),
            "status": self.status,
            "timestamp": self.timestamp,
            "winner": self.winner,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            team1=Team.from_dict(data["team1"]),
            team2=Team.from_dict(data["team2"]),
            status=data.get("status", STATUS_SCHEDULED),
            id=data["id"],
            timestamp=data.get("timestamp", now_ms()),
            winner=data.get("winner"),
        )

"""Tournament settings data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from foosballpairing.constants import (
    DEFAULT_POSITION_MODE,
    DEFAULT_SHUTOUT_BONUS,
    DEFAULT_WINNING_SCORE,
)
from foosballpairing.exceptions import InvalidConfigurationException
from foosballpairing.utils.validation import (
    validate_shutout_bonus_strict,
    validate_winning_score_strict,
)


@dataclass
class TournamentSettings:
    """Scoring settings for a tournament.

    Settings may change between matches; completed matches are never
    recomputed.

    Attributes:
        winning_score: Goals a team needs before the match may be finished
        shutout_bonus: Extra points for each winner of a shutout (0, 1 or 2)
        is_position_mode: Whether attacker/defender roles are shown to players.
            Roles are always assigned and counted either way.
    """

    winning_score: int = DEFAULT_WINNING_SCORE
    shutout_bonus: int = DEFAULT_SHUTOUT_BONUS
    is_position_mode: bool = DEFAULT_POSITION_MODE

    def __post_init__(self) -> None:
        self.winning_score = validate_winning_score_strict(self.winning_score)
        self.shutout_bonus = validate_shutout_bonus_strict(self.shutout_bonus)
        if not isinstance(self.is_position_mode, bool):
            raise InvalidConfigurationException(
                f"is_position_mode must be a bool: {self.is_position_mode!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "winning_score": self.winning_score,
            "shutout_bonus": self.shutout_bonus,
            "is_position_mode": self.is_position_mode,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSettings":
        """Deserialize settings from dictionary.

        The camelCase keys written by earlier versions (``winningScore``,
        ``unicornBonus``, ``isPositionMode``) are accepted as fallbacks.
        """
        return cls(
            winning_score=data.get(
                "winning_score", data.get("winningScore", DEFAULT_WINNING_SCORE)
            ),
            shutout_bonus=data.get(
                "shutout_bonus", data.get("unicornBonus", DEFAULT_SHUTOUT_BONUS)
            ),
            is_position_mode=data.get(
                "is_position_mode", data.get("isPositionMode", DEFAULT_POSITION_MODE)
            ),
        )

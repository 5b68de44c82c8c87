"""Convenience constructors for player records."""

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

from typing import Any, Dict, Optional

from foosballpairing.exceptions import InvalidPlayerDataException
from foosballpairing.player.base_player import Player
from foosballpairing.utils import setup_logger
from foosballpairing.utils.validation import validate_player_name_strict

logger = setup_logger(__name__)


def create_player(name: str, avatar: Optional[str] = None) -> Player:
    """Create a fresh player with a validated name and a generated id.

    Raises:
        PlayerNameValidationException: If the name is empty or too long
    """
    clean_name = validate_player_name_strict(name)
    player = Player(name=clean_name, avatar=avatar)
    logger.debug("Created player %s (%s)", player.name, player.id)
    return player


def create_player_from_dict(data: Dict[str, Any]) -> Player:
    """Create a player from serialized data, validating required fields.

    Raises:
        InvalidPlayerDataException: If ``id`` or ``name`` is missing or invalid
    """
    if not data.get("id"):
        raise InvalidPlayerDataException(f"Player data has no id: {data!r}")
    payload = dict(data)
    payload["name"] = validate_player_name_strict(data.get("name"))
    return Player.from_dict(payload)

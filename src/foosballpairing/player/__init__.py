from foosballpairing.player.base_player import Player
from foosballpairing.player.factory import create_player, create_player_from_dict

__all__ = [
    "Player",
    "create_player",
    "create_player_from_dict",
]

from roundnetpairing.player.base_player import Player
from roundnetpairing.player.factory import create_player, create_player_from_dict

__all__ = [
    "Player",
    "create_player",
    "create_player_from_dict",
]

"""
Utility module of Duel Pong
"""

from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import game_config
from duel_pong.utils.config import game_config_tmp
from duel_pong.utils.config import load_config_from_file

__all__ = ["game_config", "GameConfig", "game_config_tmp", "load_config_from_file"]

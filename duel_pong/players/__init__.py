"""
Paddle controllers for Duel Pong
"""

from duel_pong.players.simple_players import KEY_BINDINGS
from duel_pong.players.simple_players import FollowBallInput
from duel_pong.players.simple_players import IdleInput
from duel_pong.players.simple_players import KeyStateInput
from duel_pong.players.simple_players import RandomInput
from duel_pong.players.simple_players import create_input

__all__ = [
    "KEY_BINDINGS",
    "IdleInput",
    "RandomInput",
    "FollowBallInput",
    "KeyStateInput",
    "create_input",
]

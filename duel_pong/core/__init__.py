"""
Core module of Duel Pong: the deterministic simulation
"""

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import PaddleInput
from duel_pong.core.entities import Score
from duel_pong.core.entities import Side
from duel_pong.core.entities import Snapshot
from duel_pong.core.entities import Vector2D
from duel_pong.core.game_engine import GameEngine
from duel_pong.core.physics import FrameResult
from duel_pong.core.physics import PhysicsEngine

__all__ = [
    "Ball",
    "Paddle",
    "PaddleInput",
    "Score",
    "Side",
    "Snapshot",
    "Vector2D",
    "FrameResult",
    "PhysicsEngine",
    "GameEngine",
]

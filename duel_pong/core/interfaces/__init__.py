"""
Protocols of the collaborators around the simulation core
"""

from duel_pong.core.interfaces.physics import PhysicsBackend
from duel_pong.core.interfaces.player import InputSource
from duel_pong.core.interfaces.renderer import RendererProtocol
from duel_pong.core.interfaces.renderer import ScoreDisplayProtocol

__all__ = ["PhysicsBackend", "InputSource", "RendererProtocol", "ScoreDisplayProtocol"]

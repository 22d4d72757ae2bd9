"""
Physics backend protocol - defines interface for physics engines
"""

from typing import Any
from typing import Protocol

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import PaddleInput
from duel_pong.core.entities import Score
from duel_pong.core.entities import Snapshot
from duel_pong.utils.config import GameConfig


class PhysicsBackend(Protocol):
    """
    Protocol for physics engine implementations.

    The game engine only relies on this surface, so another simulation core
    can be dropped in without changing the frame driver.
    """

    config: GameConfig

    # Game objects
    ball: Ball
    left_paddle: Paddle
    right_paddle: Paddle
    score: Score
    game_time: float
    frame_count: int

    # Field dimensions
    field_width: float
    field_height: float

    def update(
        self,
        dt: float,
        left_input: PaddleInput | None = None,
        right_input: PaddleInput | None = None,
    ) -> Any:
        """
        Update physics simulation by one frame.

        Args:
            dt: Delta time in seconds
            left_input: Left paddle command
            right_input: Right paddle command

        Returns:
            FrameResult with the new snapshot, a score change flag and the
            events of the frame:
            {
                "wall_bounces": [...],
                "paddle_hits": [...],
                "goals": [...]
            }
        """
        ...

    def snapshot(self) -> Snapshot:
        """Read-only view of the current state"""
        ...

    def get_game_state(self) -> dict[str, Any]:
        """
        Get complete game state as a plain dictionary.

        Returns:
            Dictionary with positions, sizes, velocity, score, etc.
        """
        ...

"""
Renderer protocols - define interfaces for presentation backends
"""

from typing import Protocol

from duel_pong.core.entities import Snapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Enables multiple presentation backends: window, terminal, recorder, etc.
    """

    def initialize(self, width: int, height: int) -> None:
        """
        Initialize the renderer with field dimensions.

        Args:
            width: Field width in units
            height: Field height in units
        """
        ...

    def render_frame(self, snapshot: Snapshot) -> None:
        """
        Render a single frame of the game.

        Args:
            snapshot: Paddle and ball positions and sizes after the frame
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...


class ScoreDisplayProtocol(Protocol):
    """Protocol for score displays, refreshed only when the score changes"""

    def show_score(self, left: int, right: int) -> None:
        """
        Display the current score.

        Args:
            left: Left player points
            right: Right player points
        """
        ...

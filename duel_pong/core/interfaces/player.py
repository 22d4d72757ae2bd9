"""
Input source protocol - defines interface for anything that drives a paddle
"""

from typing import Protocol

from duel_pong.core.entities import PaddleInput
from duel_pong.core.entities import Side
from duel_pong.core.entities import Snapshot


class InputSource(Protocol):
    """
    Protocol that all paddle controllers (keyboard, scripted, bots) implement.

    Raw device handling stays with the implementation, the engine only sees
    the resulting direction.
    """

    name: str

    def get_input(self, snapshot: Snapshot, side: Side) -> PaddleInput:
        """
        Get the paddle command for the coming frame.

        Args:
            snapshot: State before the frame
            side: Side of the paddle being driven

        Returns:
            PaddleInput with a direction in {-1, 0, +1}

        Example:
            >>> command = source.get_input(engine.snapshot(), Side.LEFT)
            >>> assert command.direction in (-1, 0, 1)
        """
        ...

"""
Simple paddle controllers for Duel Pong
"""

from typing import Any

import numpy as np

from duel_pong.core.entities import PaddleInput
from duel_pong.core.entities import Side
from duel_pong.core.entities import Snapshot
from duel_pong.core.interfaces.player import InputSource


class IdleInput:
    """Controller that never moves"""

    def __init__(self, name: str = "Idle"):
        self.name = name

    def get_input(self, snapshot: Snapshot, side: Side) -> PaddleInput:
        """Always stays still"""
        return PaddleInput(0)


class RandomInput:
    """Controller that picks a random direction every frame"""

    def __init__(self, name: str = "Random", seed: int | None = None):
        self.name = name
        self.rng = np.random.default_rng(seed)

    def get_input(self, snapshot: Snapshot, side: Side) -> PaddleInput:
        """Returns a random direction"""
        return PaddleInput(int(self.rng.integers(-1, 2)))


class FollowBallInput:
    """Controller that keeps the paddle center level with the ball"""

    def __init__(self, name: str = "FollowBall", dead_zone: float = 5.0):
        self.name = name
        self.dead_zone = dead_zone

    def get_input(self, snapshot: Snapshot, side: Side) -> PaddleInput:
        """Moves toward the ball height once it is outside the dead zone"""
        dy = snapshot.ball_position[1] - snapshot.paddle_position(side)[1]
        if abs(dy) <= self.dead_zone:
            return PaddleInput(0)
        return PaddleInput(int(np.sign(dy)))


# (up, down) key names per side, W/S for the left player and the arrows for the right one
KEY_BINDINGS: dict[Side, tuple[str, str]] = {
    Side.LEFT: ("w", "s"),
    Side.RIGHT: ("up", "down"),
}


class KeyStateInput:
    """
    Controller fed with key states by a host application.

    The host either reports named key presses, resolved through KEY_BINDINGS
    for the side being driven, or sets the up/down state directly.
    """

    def __init__(self, name: str = "Keys"):
        self.name = name
        self.up = False
        self.down = False
        self.held: set[str] = set()

    def set_keys(self, up: bool, down: bool) -> None:
        """Sets the currently held keys"""
        self.up = up
        self.down = down

    def press(self, key: str) -> None:
        self.held.add(key.lower())

    def release(self, key: str) -> None:
        self.held.discard(key.lower())

    def get_input(self, snapshot: Snapshot, side: Side) -> PaddleInput:
        """Returns the direction of the held keys"""
        up_key, down_key = KEY_BINDINGS[side]
        up = self.up or up_key in self.held
        down = self.down or down_key in self.held
        return PaddleInput.from_keys(up, down)


# Factory to easily create controllers
def create_input(kind: str, **kwargs: Any) -> InputSource:
    """
    Factory to create paddle controllers

    Args:
        kind: Controller type ('idle', 'random', 'follow', 'keys')
        **kwargs: Additional arguments for the controller

    Returns:
        Instance of the requested controller
    """
    input_classes: dict[str, type] = {
        "idle": IdleInput,
        "random": RandomInput,
        "follow": FollowBallInput,
        "keys": KeyStateInput,
    }

    if kind not in input_classes:
        raise ValueError(
            f"Unknown input type: {kind}. Available types: {list(input_classes.keys())}"
        )

    return input_classes[kind](**kwargs)

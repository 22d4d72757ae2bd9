"""
Duel Pong simulation entities: ball, paddles, score, inputs
"""

import logging
import math
from dataclasses import asdict
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class Side(Enum):
    """Side of the field a paddle defends"""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> "Vector2D":
        self.x *= scalar
        self.y *= scalar
        return self

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


def sanitize_dt(dt: float) -> float:
    """Returns dt, or 0.0 if it is negative, NaN or infinite"""
    if not math.isfinite(dt) or dt < 0:
        logger.warning("Invalid elapsed time %r, frame advanced with dt=0", dt)
        return 0.0
    return float(dt)


class Ball:
    """Game ball, a square of constant size"""

    def __init__(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        size: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self._size = size if size is not None else game_config.BALL_SIZE

    @property
    def size(self) -> float:
        return self._size

    @property
    def half_size(self) -> float:
        return self._size / 2

    @property
    def speed(self) -> float:
        return self.velocity.magnitude()

    def update(self, dt: float) -> None:
        """Advances the ball position (explicit Euler, no sub-stepping)"""
        self.position += self.velocity * sanitize_dt(dt)

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def reset_to_center(self, vx: float, vy: float) -> None:
        """Puts the ball back at the field center with the given velocity"""
        self.position = Vector2D(0.0, 0.0)
        self.velocity = Vector2D(vx, vy)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle (left, bottom, width, height)"""
        return (
            self.position.x - self.half_size,
            self.position.y - self.half_size,
            self._size,
            self._size,
        )


class Paddle:
    """Player paddle, moving vertically on a fixed x"""

    def __init__(
        self,
        side: Side,
        config: GameConfig | None = None,
        x: float | None = None,
        y: float = 0.0,
    ):
        cfg = config if config is not None else game_config
        self.side = side
        self.width = cfg.PADDLE_WIDTH
        self.height = cfg.PADDLE_HEIGHT
        self.speed = cfg.PADDLE_SPEED

        if x is None:
            # Near face sits PADDLE_WALL_PADDING inside the scoring edge
            offset = cfg.half_width - cfg.PADDLE_WALL_PADDING - self.width / 2
            x = -offset if side is Side.LEFT else offset
        self.position = Vector2D(x, y)

        # Vertical movement limits, the paddle never leaves the field
        self.max_y = cfg.half_height - self.height / 2
        self.min_y = -self.max_y
        self.constrain_position()

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    def constrain_position(self) -> None:
        """Ensures the paddle stays within its movement bounds"""
        self.position.y = max(self.min_y, min(self.max_y, self.position.y))

    def move(self, direction: int, dt: float) -> None:
        """Moves the paddle vertically, only the sign of direction counts (+1 is up)"""
        step = PaddleInput(direction).direction * self.speed * sanitize_dt(dt)
        self.position.y = self.position.y + step

        # Movement constraints
        self.constrain_position()

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle (left, bottom, width, height)"""
        return (
            self.position.x - self.half_width,
            self.position.y - self.half_height,
            self.width,
            self.height,
        )


@dataclass
class Score:
    """Points of both players, never decremented"""

    left: int = 0
    right: int = 0

    def award(self, side: Side) -> None:
        """Gives one point to the given side"""
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def to_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass
class PaddleInput:
    """Per-frame paddle command"""

    direction: int  # -1 (down), 0 (stay) or +1 (up)

    def __post_init__(self) -> None:
        # Keep only the sign, NaN counts as no movement
        if self.direction > 0:
            self.direction = 1
        elif self.direction < 0:
            self.direction = -1
        else:
            self.direction = 0

    @classmethod
    def from_keys(cls, up: bool, down: bool) -> "PaddleInput":
        """Builds the command from key states, both pressed cancel out"""
        return cls(int(up) - int(down))


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the simulation for renderers and score displays"""

    left_paddle_position: tuple[float, float]
    left_paddle_size: tuple[float, float]
    right_paddle_position: tuple[float, float]
    right_paddle_size: tuple[float, float]
    ball_position: tuple[float, float]
    ball_velocity: tuple[float, float]
    ball_size: float
    score: tuple[int, int]
    time_elapsed: float
    field_size: tuple[float, float]

    def paddle_position(self, side: Side) -> tuple[float, float]:
        return self.left_paddle_position if side is Side.LEFT else self.right_paddle_position

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

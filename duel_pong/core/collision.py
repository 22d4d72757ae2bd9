"""
Collision detection system for Duel Pong
"""

import logging

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Paddle
from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import game_config

logger = logging.getLogger(__name__)

Rect = tuple[float, float, float, float]


def rect_overlap(rect_a: Rect, rect_b: Rect) -> bool:
    """
    Checks if two axis-aligned rectangles (left, bottom, width, height) overlap.

    Inequalities are strict: rectangles that only share an edge do not overlap.
    """
    a_left, a_bottom, a_width, a_height = rect_a
    b_left, b_bottom, b_width, b_height = rect_b
    return (
        a_left < b_left + b_width
        and a_left + a_width > b_left
        and a_bottom < b_bottom + b_height
        and a_bottom + a_height > b_bottom
    )


def is_moving_toward(ball: Ball, paddle: Paddle) -> bool:
    """Checks if the ball is heading at the near face of the paddle"""
    return (ball.velocity.x > 0 and ball.position.x < paddle.position.x) or (
        ball.velocity.x < 0 and ball.position.x > paddle.position.x
    )


def paddle_impact_offset(ball: Ball, paddle: Paddle) -> float:
    """
    Normalized vertical impact point of the ball on the paddle.

    0 is the paddle center, -1 and 1 its bottom and top ends. Hits beyond the
    ends are clamped.
    """
    offset = (ball.position.y - paddle.position.y) / paddle.half_height
    return max(-1.0, min(1.0, offset))


def apply_paddle_bounce(
    ball: Ball,
    paddle: Paddle,
    deflection_factor: float = 0.75,
    speed_increase: float = 1.05,
) -> float:
    """
    Sends the ball back from a paddle.

    The horizontal velocity is reversed, the vertical velocity is replaced by
    a deflection proportional to the impact offset and to the horizontal
    speed, then both components are escalated.

    Returns:
        float: The clamped impact offset used for the deflection
    """
    offset = paddle_impact_offset(ball, paddle)

    ball.velocity.x = -ball.velocity.x
    ball.velocity.y = offset * abs(ball.velocity.x) * deflection_factor

    ball.velocity *= speed_increase
    return offset


class CollisionDetector:
    """Main collision manager"""

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else game_config

    def check_ball_walls(self, ball: Ball) -> str:
        """
        Checks collisions with the top and bottom walls.

        Only a ball moving into a wall counts, so a ball still beyond the wall
        after its bounce is not reflected again.

        Returns:
            str: "top", "bottom" or "none"
        """
        half_height = self.config.half_height
        if ball.position.y + ball.half_size > half_height and ball.velocity.y > 0:
            return "top"
        if ball.position.y - ball.half_size < -half_height and ball.velocity.y < 0:
            return "bottom"
        return "none"

    def check_ball_paddle(self, ball: Ball, paddle: Paddle) -> float | None:
        """
        Checks and handles ball-paddle collision.

        Returns:
            The impact offset if the ball was sent back, None otherwise
        """
        if not rect_overlap(ball.get_rect(), paddle.get_rect()):
            return None

        # Ball embedded in the paddle and already going away from it
        if not is_moving_toward(ball, paddle):
            return None

        offset = apply_paddle_bounce(
            ball,
            paddle,
            deflection_factor=self.config.DEFLECTION_FACTOR,
            speed_increase=self.config.BALL_SPEED_INCREASE,
        )
        logger.debug(
            "Paddle hit on %s side: offset=%.3f velocity=%s",
            paddle.side.value,
            offset,
            ball.velocity.to_tuple(),
        )
        return offset

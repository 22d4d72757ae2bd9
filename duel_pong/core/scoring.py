"""
Scoring and serve rules for Duel Pong
"""

import logging

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Score
from duel_pong.core.entities import Side
from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import game_config

logger = logging.getLogger(__name__)


def detect_goal(ball: Ball, field_width: float) -> Side | None:
    """
    Checks if the ball has fully left the field through a scoring edge.

    Returns:
        The side that scores, or None while the ball is in play
    """
    half_width = field_width / 2
    if ball.position.x + ball.half_size < -half_width:
        return Side.RIGHT
    if ball.position.x - ball.half_size > half_width:
        return Side.LEFT
    return None


class ScoreKeeper:
    """Awards points and serves the ball again after a goal"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config if config is not None else game_config

    def serve_velocity(self, scorer: Side) -> tuple[float, float]:
        """
        Velocity of the serve following a point for the given side.

        The ball leaves toward the scorer at the initial speed, whatever pace
        the rally had reached.
        """
        vx = self.config.INITIAL_BALL_SPEED_X
        if scorer is Side.LEFT:
            vx = -vx
        return (vx, self.config.INITIAL_BALL_SPEED_Y)

    def update(self, ball: Ball, score: Score) -> Side | None:
        """
        Handles a ball that left the field.

        Returns:
            The side that scored, or None if the ball is still in play
        """
        scorer = detect_goal(ball, self.config.FIELD_WIDTH)
        if scorer is None:
            return None

        score.award(scorer)
        ball.reset_to_center(*self.serve_velocity(scorer))
        logger.info("Score: Left %d - Right %d", score.left, score.right)
        return scorer

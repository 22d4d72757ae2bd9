"""
Physics system for Duel Pong
"""

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from duel_pong.core.collision import CollisionDetector
from duel_pong.core.entities import Ball
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import PaddleInput
from duel_pong.core.entities import Score
from duel_pong.core.entities import Side
from duel_pong.core.entities import Snapshot
from duel_pong.core.entities import sanitize_dt
from duel_pong.core.scoring import ScoreKeeper
from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import game_config

logger = logging.getLogger(__name__)


def _empty_events() -> dict[str, list]:
    return {"wall_bounces": [], "paddle_hits": [], "goals": []}


@dataclass
class FrameResult:
    """Outcome of one simulated frame"""

    snapshot: Snapshot
    score_changed: bool = False
    events: dict[str, list] = field(default_factory=_empty_events)


class PhysicsEngine:
    """Main physics engine, advances the whole simulation one frame at a time"""

    def __init__(self, config: GameConfig | None = None):
        # Every component reads this private copy, later changes to the source are not seen
        source = config if config is not None else game_config
        self.config = source.model_copy()
        self.field_width = self.config.FIELD_WIDTH
        self.field_height = self.config.FIELD_HEIGHT
        self.collision_detector = CollisionDetector(self.config)
        self.score_keeper = ScoreKeeper(self.config)

        self.left_paddle = Paddle(Side.LEFT, self.config)
        self.right_paddle = Paddle(Side.RIGHT, self.config)
        self.ball = Ball(
            0.0,
            0.0,
            self.config.INITIAL_BALL_SPEED_X,
            self.config.INITIAL_BALL_SPEED_Y,
            size=self.config.BALL_SIZE,
        )
        self.score = Score()
        self.game_time = 0.0
        self.frame_count = 0

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.left_paddle, self.right_paddle)

    def update(
        self,
        dt: float,
        left_input: PaddleInput | None = None,
        right_input: PaddleInput | None = None,
    ) -> FrameResult:
        """
        Advances the simulation by one frame.

        Order is fixed: paddles move, the ball moves, collisions are resolved
        on the moved ball, then scoring looks at the possibly reflected ball.

        Args:
            dt: Elapsed time in seconds
            left_input: Left paddle command, no movement if None
            right_input: Right paddle command, no movement if None

        Returns:
            FrameResult: Snapshot after the frame, score change flag and events
        """
        effective_dt = sanitize_dt(dt)
        self.game_time += effective_dt
        self.frame_count += 1

        # Move players
        if left_input is not None:
            self.left_paddle.move(left_input.direction, effective_dt)
        if right_input is not None:
            self.right_paddle.move(right_input.direction, effective_dt)

        # Move ball
        self.ball.update(effective_dt)

        events = self._check_collisions()
        score_changed = self._check_scoring(events)

        return FrameResult(snapshot=self.snapshot(), score_changed=score_changed, events=events)

    def _check_collisions(self) -> dict[str, list]:
        """Resolves wall contact then paddle contacts, returns events"""
        events = _empty_events()

        wall_collision = self.collision_detector.check_ball_walls(self.ball)
        if wall_collision != "none":
            self.ball.bounce_vertical()
            events["wall_bounces"].append(wall_collision)
            logger.debug("Wall bounce: %s", wall_collision)

        for paddle in self.paddles:
            offset = self.collision_detector.check_ball_paddle(self.ball, paddle)
            if offset is not None:
                events["paddle_hits"].append({"side": paddle.side.value, "offset": offset})

        return events

    def _check_scoring(self, events: dict[str, list]) -> bool:
        scorer = self.score_keeper.update(self.ball, self.score)
        if scorer is None:
            return False

        events["goals"].append({"side": scorer.value, "score": self.score.to_tuple()})
        return True

    def snapshot(self) -> Snapshot:
        """Returns a read-only view of the current state"""
        return Snapshot(
            left_paddle_position=self.left_paddle.position.to_tuple(),
            left_paddle_size=(self.left_paddle.width, self.left_paddle.height),
            right_paddle_position=self.right_paddle.position.to_tuple(),
            right_paddle_size=(self.right_paddle.width, self.right_paddle.height),
            ball_position=self.ball.position.to_tuple(),
            ball_velocity=self.ball.velocity.to_tuple(),
            ball_size=self.ball.size,
            score=self.score.to_tuple(),
            time_elapsed=self.game_time,
            field_size=(self.field_width, self.field_height),
        )

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return self.snapshot().to_dict()

"""
Duel Pong frame driver, wires input sources and displays to the physics engine
"""

import logging
from typing import Any

from duel_pong.core.entities import PaddleInput
from duel_pong.core.entities import Side
from duel_pong.core.entities import Snapshot
from duel_pong.core.interfaces.physics import PhysicsBackend
from duel_pong.core.interfaces.player import InputSource
from duel_pong.core.interfaces.renderer import RendererProtocol
from duel_pong.core.interfaces.renderer import ScoreDisplayProtocol
from duel_pong.core.physics import FrameResult
from duel_pong.core.physics import PhysicsEngine
from duel_pong.utils.config import GameConfig

logger = logging.getLogger(__name__)


def _empty_stats() -> dict[str, Any]:
    return {
        "frames": 0,
        "time_elapsed": 0.0,
        "paddle_hits": 0,
        "wall_bounces": 0,
        "left_goals": 0,
        "right_goals": 0,
    }


class GameEngine:
    """Main engine that orchestrates the game around the physics core"""

    def __init__(
        self,
        left: InputSource,
        right: InputSource,
        renderer: RendererProtocol | None = None,
        score_display: ScoreDisplayProtocol | None = None,
        config: GameConfig | None = None,
    ):
        self.physics_engine: PhysicsBackend = PhysicsEngine(config)
        self.config = self.physics_engine.config

        # Collaborators
        self.left = left
        self.right = right
        self.renderer = renderer
        self.score_display = score_display

        # Game state
        self.running = False
        self.paused = False

        # Statistics
        self.game_stats = _empty_stats()

    def start_game(self) -> None:
        """Starts the game and shows the initial frame and score"""
        self.running = True
        self.paused = False

        snapshot = self.physics_engine.snapshot()
        if self.renderer is not None:
            self.renderer.initialize(self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT)
            self.renderer.render_frame(snapshot)
        if self.score_display is not None:
            self.score_display.show_score(*snapshot.score)

        logger.debug("Game started: %s vs %s", self.left.name, self.right.name)

    def stop_game(self) -> None:
        """Stops the current game"""
        if self.running and self.renderer is not None:
            self.renderer.cleanup()
        self.running = False

    def pause_game(self) -> None:
        """Pauses / resumes the game"""
        self.paused = not self.paused

    def is_running(self) -> bool:
        """Checks if the game is running"""
        return self.running

    def step(self, dt: float) -> FrameResult:
        """
        Updates the game by one frame

        Args:
            dt: Delta time in seconds, measured by the caller's clock

        Returns:
            FrameResult of the physics engine. While paused the state is not
            advanced and the current snapshot is returned with no events.
        """
        if not self.running:
            raise RuntimeError("Game is not running, call start_game() first")

        if self.paused:
            return FrameResult(snapshot=self.physics_engine.snapshot())

        # Inputs see the state before the frame
        before = self.physics_engine.snapshot()
        left_input = self._get_player_input(self.left, before, Side.LEFT)
        right_input = self._get_player_input(self.right, before, Side.RIGHT)

        result = self.physics_engine.update(dt, left_input, right_input)

        if self.renderer is not None:
            self.renderer.render_frame(result.snapshot)
        if result.score_changed and self.score_display is not None:
            self.score_display.show_score(*result.snapshot.score)

        self._record(result)
        return result

    def run(self, frames: int, dt: float) -> list[FrameResult]:
        """Runs a fixed number of frames with a constant time step"""
        return [self.step(dt) for _ in range(frames)]

    def _get_player_input(
        self, player: InputSource, snapshot: Snapshot, side: Side
    ) -> PaddleInput:
        """Gets a player's command, coerced to a PaddleInput"""
        command = player.get_input(snapshot, side)
        if isinstance(command, PaddleInput):
            return command
        return PaddleInput(command)

    def _record(self, result: FrameResult) -> None:
        """Updates statistics from a frame result"""
        self.game_stats["frames"] += 1
        self.game_stats["time_elapsed"] = result.snapshot.time_elapsed
        self.game_stats["paddle_hits"] += len(result.events["paddle_hits"])
        self.game_stats["wall_bounces"] += len(result.events["wall_bounces"])
        for goal in result.events["goals"]:
            self.game_stats[f"{goal['side']}_goals"] += 1

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return self.physics_engine.get_game_state()

    def get_stats(self) -> dict[str, Any]:
        """Returns game statistics"""
        stats: dict[str, Any] = self.game_stats.copy()
        stats["score"] = self.physics_engine.score.to_tuple()
        return stats

    def reset_stats(self) -> None:
        """Resets statistics to zero"""
        self.game_stats = _empty_stats()

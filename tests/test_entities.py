"""
Tests for Duel Pong simulation entities
"""

import logging
import math

import pytest

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import PaddleInput
from duel_pong.core.entities import Score
from duel_pong.core.entities import Side
from duel_pong.core.entities import Vector2D
from duel_pong.utils.config import GameConfig


class TestVector2D:
    """Tests for Vector2D class"""

    def test_creation(self) -> None:
        """Test vector creation"""
        v = Vector2D(3.0, 4.0)
        assert v.x == 3.0
        assert v.y == 4.0

    def test_addition(self) -> None:
        """Test vector addition"""
        result = Vector2D(1.0, 2.0) + Vector2D(3.0, 4.0)
        assert result.x == 4.0
        assert result.y == 6.0

    def test_subtraction(self) -> None:
        """Test vector subtraction"""
        result = Vector2D(5.0, 1.0) - Vector2D(2.0, 4.0)
        assert result.to_tuple() == (3.0, -3.0)

    def test_in_place_scaling(self) -> None:
        """Test in-place scalar multiplication keeps the same object"""
        v = Vector2D(2.0, -3.0)
        same = v
        v *= 2.0
        assert same is v
        assert v.to_tuple() == (4.0, -6.0)

    def test_magnitude(self) -> None:
        """Test magnitude calculation"""
        assert Vector2D(3.0, 4.0).magnitude() == 5.0
        assert Vector2D(0.0, 0.0).magnitude() == 0.0

    def test_copy_is_independent(self) -> None:
        """Test that a copy does not share state"""
        v = Vector2D(1.0, 1.0)
        c = v.copy()
        c.x = 5.0
        assert v.x == 1.0


class TestSide:
    """Tests for Side enum"""

    def test_opponent(self) -> None:
        """Test that each side knows its opponent"""
        assert Side.LEFT.opponent is Side.RIGHT
        assert Side.RIGHT.opponent is Side.LEFT


class TestPaddleInput:
    """Tests for PaddleInput class"""

    @pytest.mark.parametrize(
        "raw,expected",
        [(1, 1), (0, 0), (-1, -1), (5, 1), (-3.5, -1), (0.2, 1), (float("nan"), 0)],
    )
    def test_direction_reduced_to_sign(self, raw: float, expected: int) -> None:
        """Test that any number becomes -1, 0 or +1"""
        assert PaddleInput(raw).direction == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "up,down,expected",
        [(False, False, 0), (True, False, 1), (False, True, -1), (True, True, 0)],
    )
    def test_from_keys(self, up: bool, down: bool, expected: int) -> None:
        """Test key state mapping, both keys cancel out"""
        assert PaddleInput.from_keys(up, down).direction == expected


class TestBall:
    """Tests for Ball class"""

    def test_creation(self) -> None:
        """Test ball creation"""
        ball = Ball(100.0, 200.0, 50.0, -30.0, size=10.0)
        assert ball.position.to_tuple() == (100.0, 200.0)
        assert ball.velocity.to_tuple() == (50.0, -30.0)
        assert ball.size == 10.0
        assert ball.half_size == 5.0

    def test_default_size_from_config(self) -> None:
        """Test that the ball size defaults to the configured one"""
        ball = Ball(0.0, 0.0, 0.0, 0.0)
        assert ball.size == GameConfig().BALL_SIZE

    def test_update_position(self) -> None:
        """Test explicit Euler position update"""
        ball = Ball(0.0, 0.0, 100.0, 50.0)
        ball.update(0.1)
        assert ball.position.x == pytest.approx(10.0)
        assert ball.position.y == pytest.approx(5.0)

    @pytest.mark.parametrize("dt", [-0.5, float("nan"), float("inf")])
    def test_update_ignores_invalid_dt(self, dt: float, caplog) -> None:
        """Test that invalid elapsed time does not move the ball and is reported"""
        ball = Ball(1.0, 2.0, 100.0, 50.0)
        with caplog.at_level(logging.WARNING, logger="duel_pong.core.entities"):
            ball.update(dt)
        assert ball.position.to_tuple() == (1.0, 2.0)
        assert "Invalid elapsed time" in caplog.text

    def test_bounce_vertical(self) -> None:
        """Test vertical bounce keeps speed"""
        ball = Ball(0.0, 0.0, 100.0, 50.0)
        speed = ball.speed
        ball.bounce_vertical()
        assert ball.speed == speed
        assert ball.velocity.to_tuple() == (100.0, -50.0)

    def test_reset_to_center(self) -> None:
        """Test resetting the ball"""
        ball = Ball(123.0, -45.0, 600.0, 300.0)
        ball.reset_to_center(-200.0, 0.0)
        assert ball.position.to_tuple() == (0.0, 0.0)
        assert ball.velocity.to_tuple() == (-200.0, 0.0)

    def test_get_rect(self) -> None:
        """Test getting collision rectangle"""
        ball = Ball(10.0, 20.0, 0.0, 0.0, size=15.0)
        assert ball.get_rect() == (2.5, 12.5, 15.0, 15.0)

    def test_size_is_read_only(self) -> None:
        """Test that the ball size cannot be reassigned"""
        ball = Ball(0.0, 0.0, 0.0, 0.0, size=15.0)
        with pytest.raises(AttributeError):
            ball.size = 20.0  # type: ignore[misc]


class TestPaddle:
    """Tests for Paddle class"""

    def test_spawn_positions(self) -> None:
        """Test that paddles spawn near their own scoring edge"""
        config = GameConfig()
        left = Paddle(Side.LEFT, config)
        right = Paddle(Side.RIGHT, config)

        assert left.position.to_tuple() == (-380.0, 0.0)
        assert right.position.to_tuple() == (380.0, 0.0)
        assert left.half_height == 50.0

    def test_bounds(self) -> None:
        """Test vertical movement limits"""
        paddle = Paddle(Side.LEFT, GameConfig())
        assert paddle.max_y == 250.0
        assert paddle.min_y == -250.0

    def test_get_rect(self) -> None:
        """Test getting collision rectangle"""
        paddle = Paddle(Side.RIGHT, GameConfig(), y=10.0)
        assert paddle.get_rect() == (370.0, -40.0, 20.0, 100.0)

    def test_move_up_and_down(self) -> None:
        """Test that direction +1 moves up"""
        paddle = Paddle(Side.LEFT, GameConfig())
        paddle.move(1, 0.1)
        assert paddle.position.y == pytest.approx(50.0)
        paddle.move(-1, 0.2)
        assert paddle.position.y == pytest.approx(-50.0)

    @pytest.mark.parametrize("direction,expected", [(5, 50.0), (-3, -50.0), (0.4, 50.0)])
    def test_move_uses_direction_sign(self, direction: float, expected: float) -> None:
        """Test that a large direction value does not speed the paddle up"""
        paddle = Paddle(Side.LEFT, GameConfig())
        paddle.move(direction, 0.1)  # type: ignore[arg-type]
        assert paddle.position.y == pytest.approx(expected)

    def test_move_with_nan_direction(self) -> None:
        """Test that a NaN direction leaves the paddle in place"""
        paddle = Paddle(Side.LEFT, GameConfig(), y=30.0)
        paddle.move(float("nan"), 0.1)  # type: ignore[arg-type]
        assert paddle.position.y == 30.0

    def test_move_does_not_change_x(self) -> None:
        """Test that the paddle x is fixed"""
        paddle = Paddle(Side.RIGHT, GameConfig())
        paddle.move(1, 0.3)
        assert paddle.position.x == 380.0

    @pytest.mark.parametrize("direction", [-1, 0, 1])
    @pytest.mark.parametrize("dt", [0.0, 0.016, 0.5, 10.0])
    def test_move_stays_in_bounds(self, direction: int, dt: float) -> None:
        """Test that the paddle never leaves the field"""
        paddle = Paddle(Side.LEFT, GameConfig(), y=200.0)
        for _ in range(20):
            paddle.move(direction, dt)
            assert paddle.min_y <= paddle.position.y <= paddle.max_y

    def test_move_clamps_exactly_to_bound(self) -> None:
        """Test that overshooting lands exactly on the bound"""
        paddle = Paddle(Side.LEFT, GameConfig())
        paddle.move(1, 10.0)
        assert paddle.position.y == 250.0
        paddle.move(-1, 10.0)
        assert paddle.position.y == -250.0

    @pytest.mark.parametrize("dt", [-1.0, float("nan"), float("-inf")])
    def test_move_with_invalid_dt(self, dt: float) -> None:
        """Test that invalid elapsed time gives no displacement"""
        paddle = Paddle(Side.LEFT, GameConfig(), y=12.0)
        paddle.move(1, dt)
        assert paddle.position.y == 12.0
        assert not math.isnan(paddle.position.y)

    def test_spawn_outside_bounds_is_clamped(self) -> None:
        """Test that a paddle created off-field is brought back"""
        paddle = Paddle(Side.RIGHT, GameConfig(), y=1000.0)
        assert paddle.position.y == paddle.max_y


class TestScore:
    """Tests for Score class"""

    def test_award(self) -> None:
        """Test awarding points"""
        score = Score()
        score.award(Side.LEFT)
        score.award(Side.RIGHT)
        score.award(Side.RIGHT)
        assert score.to_tuple() == (1, 2)

"""
Duel Pong simulation configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    """Simulation configuration with Pydantic validation"""

    # Allow mutation so the shared instance can be tuned at runtime
    model_config = {"validate_assignment": True}

    # Field dimensions (origin at the field center)
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in units")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Field height in units")

    # Paddles
    PADDLE_WIDTH: float = Field(default=20.0, gt=0, description="Paddle width in units")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in units")
    PADDLE_SPEED: float = Field(default=500.0, gt=0, description="Paddle speed in units/s")
    PADDLE_WALL_PADDING: float = Field(
        default=10.0, ge=0, description="Gap between a paddle and its scoring edge"
    )

    # Ball
    BALL_SIZE: float = Field(default=15.0, gt=0, description="Ball side length in units")
    INITIAL_BALL_SPEED_X: float = Field(
        default=200.0, gt=0, description="Horizontal serve speed in units/s"
    )
    INITIAL_BALL_SPEED_Y: float = Field(
        default=0.0, description="Vertical serve speed in units/s"
    )
    BALL_SPEED_INCREASE: float = Field(
        default=1.05, ge=1.0, description="Velocity multiplier applied on each paddle hit"
    )
    DEFLECTION_FACTOR: float = Field(
        default=0.75,
        gt=0,
        le=1.0,
        description="Max vertical speed as a fraction of horizontal speed after a hit",
    )

    # Presentation helpers
    FPS: int = Field(default=60, gt=0, description="Frame rate used by the headless demo")
    SCORE_TEXT_FORMAT: str = Field(
        default="Left: {left}  Right: {right}", description="Score display template"
    )

    @field_validator("SCORE_TEXT_FORMAT")
    @classmethod
    def validate_score_text_format(cls, v: str) -> str:
        """Validate that the template shows both counters"""
        if "{left}" not in v or "{right}" not in v:
            raise ValueError(
                f"SCORE_TEXT_FORMAT ({v!r}) must contain both '{{left}}' and '{{right}}'"
            )
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 2 * (self.PADDLE_WALL_PADDING + self.PADDLE_WIDTH) + self.BALL_SIZE
        if self.FIELD_WIDTH <= min_width:
            raise ValueError(f"FIELD_WIDTH must be greater than {min_width} units")

        if self.FIELD_HEIGHT <= self.PADDLE_HEIGHT:
            raise ValueError(f"FIELD_HEIGHT must be greater than {self.PADDLE_HEIGHT} units")

        return self

    @property
    def half_width(self) -> float:
        return self.FIELD_WIDTH / 2

    @property
    def half_height(self) -> float:
        return self.FIELD_HEIGHT / 2

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "duel_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "duel_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "duel_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.warning("Configuration file not found: %s", filepath)
        return False
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    # Copied without per-field validation, the loaded model is already validated as a whole
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        for name, new_value in kwargs.items():
            old_values[name] = getattr(game_config, name)
            setattr(game_config, name, new_value)
        yield
    finally:
        # Restore in reverse order of assignment
        _change_values(game_config, **dict(reversed(list(old_values.items()))))

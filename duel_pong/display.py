"""
Headless presentation collaborators for Duel Pong
"""

from collections import deque

from duel_pong.core.entities import Snapshot
from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import game_config


def format_score_text(left: int, right: int, config: GameConfig | None = None) -> str:
    """Formats the score with the configured template"""
    cfg = config if config is not None else game_config
    return cfg.SCORE_TEXT_FORMAT.format(left=left, right=right)


class ScoreTextDisplay:
    """Score display that keeps the current score line as text"""

    def __init__(self, config: GameConfig | None = None, echo: bool = False):
        self.config = config if config is not None else game_config
        self.echo = echo
        self.text = ""
        self.refresh_count = 0

    def show_score(self, left: int, right: int) -> None:
        """Updates the score line"""
        self.text = format_score_text(left, right, self.config)
        self.refresh_count += 1
        if self.echo:
            print(self.text)


class RecordingRenderer:
    """Renderer that stores the last rendered snapshots"""

    def __init__(self, max_frames: int = 1000):
        self.frames: deque[Snapshot] = deque(maxlen=max_frames)
        self.field_size: tuple[int, int] | None = None
        self.active = False

    def initialize(self, width: int, height: int) -> None:
        self.field_size = (width, height)
        self.active = True

    def render_frame(self, snapshot: Snapshot) -> None:
        self.frames.append(snapshot)

    def cleanup(self) -> None:
        self.active = False

    @property
    def last_frame(self) -> Snapshot | None:
        return self.frames[-1] if self.frames else None

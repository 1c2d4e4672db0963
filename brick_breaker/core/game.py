"""
Brick Breaker game: entity collection and running/paused state machine
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from brick_breaker.core.entities import Ball
from brick_breaker.core.entities import Brick
from brick_breaker.core.entities import Paddle
from brick_breaker.core.interfaces import GameObject
from brick_breaker.core.interfaces import RenderSurface
from brick_breaker.core.level import LEVEL_1
from brick_breaker.core.level import Level
from brick_breaker.core.level import build_level
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Game states. MENU and GAME_OVER have no transitions yet."""

    PAUSED = 0
    RUNNING = 1
    MENU = 2
    GAME_OVER = 3


class GameNotStartedError(RuntimeError):
    """Raised when the game is driven before ``start()`` was called"""


class Game:
    """Owns every entity and advances the simulation one tick at a time"""

    def __init__(
        self,
        game_width: float | None = None,
        game_height: float | None = None,
        config: GameConfig | None = None,
        images: Mapping[str, Any] | None = None,
    ):
        self.config = config if config is not None else game_config
        self.game_width = game_width if game_width is not None else self.config.FIELD_WIDTH
        self.game_height = game_height if game_height is not None else self.config.FIELD_HEIGHT
        self.images: dict[str, Any] = dict(images or {})

        self.status: GameStatus | None = None
        self._paddle: Paddle | None = None
        self._ball: Ball | None = None
        self.game_objects: list[GameObject] = []

    @property
    def paddle(self) -> Paddle:
        if self._paddle is None:
            raise GameNotStartedError("The game has no paddle before start()")
        return self._paddle

    @property
    def ball(self) -> Ball:
        if self._ball is None:
            raise GameNotStartedError("The game has no ball before start()")
        return self._ball

    @property
    def bricks(self) -> list[Brick]:
        """Live bricks, in update order"""
        return [obj for obj in self.game_objects if isinstance(obj, Brick)]

    def get_image(self, asset_id: str) -> Any:
        return self.images.get(asset_id)

    def start(self, level: Level | None = None) -> None:
        """Builds the paddle, ball and bricks and starts running"""
        self._paddle = Paddle(self)
        self._ball = Ball(self)

        bricks = build_level(self, level if level is not None else LEVEL_1)

        self.game_objects = [self._ball, self._paddle, *bricks]
        self.status = GameStatus.RUNNING
        logger.info("Game started with %d bricks", len(bricks))

    def _require_started(self) -> None:
        if self.status is None:
            raise GameNotStartedError("Call start() before driving the game")

    def toggle_pause(self) -> None:
        """Flips between PAUSED and RUNNING; other states are left alone"""
        self._require_started()
        if self.status == GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
        elif self.status == GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
        else:
            return
        logger.info("Game %s", "paused" if self.is_paused() else "resumed")

    def is_paused(self) -> bool:
        return self.status == GameStatus.PAUSED

    def update(self, dt: float = 0.0) -> None:
        """
        Advances every object once, in collection order, then drops the ones
        marked for deletion.

        The ball is updated first so bricks see its position for this tick.
        Only PAUSED freezes the simulation.
        """
        self._require_started()
        if self.status == GameStatus.PAUSED:
            return

        for obj in self.game_objects:
            obj.update(dt)

        self.game_objects = [obj for obj in self.game_objects if not obj.marked_for_deletion]

    def draw(self, surface: RenderSurface) -> None:
        """Draws every object, later objects on top, plus the pause overlay"""
        self._require_started()
        for obj in self.game_objects:
            obj.draw(surface)

        if self.is_paused():
            surface.fill_rect(
                0,
                0,
                self.game_width,
                self.game_height,
                (0, 0, 0),
                alpha=self.config.PAUSE_OVERLAY_ALPHA,
            )
            surface.fill_text(
                "paused",
                self.game_width / 2,
                self.game_height / 2,
                self.config.PAUSE_FONT_SIZE,
                self.config.TEXT_COLOR,
                align="center",
            )

    def is_cleared(self) -> bool:
        """True once every brick has been destroyed"""
        return not self.bricks

    def get_game_state(self) -> dict[str, Any]:
        """Returns a snapshot of the game state"""
        self._require_started()
        status = self.status.name.lower() if self.status is not None else None
        return {
            "status": status,
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.velocity.magnitude(),
            "paddle_position": self.paddle.position.to_tuple(),
            "paddle_speed": self.paddle.speed,
            "bricks": [brick.position.to_tuple() for brick in self.bricks],
            "field_bounds": (0, self.game_width, 0, self.game_height),
        }

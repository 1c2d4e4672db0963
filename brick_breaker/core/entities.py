"""
Brick Breaker game entities: paddle, ball, bricks
"""

import logging
from dataclasses import dataclass

import numpy as np

from brick_breaker.core.collision import detect_collision
from brick_breaker.core.interfaces import RenderSurface
from brick_breaker.core.interfaces import World

logger = logging.getLogger(__name__)

BALL_IMAGE_ID = "img_ball"
BRICK_IMAGE_ID = "img_brick"


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

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


class Paddle:
    """Player paddle, moving horizontally along the bottom of the field"""

    def __init__(self, world: World):
        config = world.config
        self.width = config.PADDLE_WIDTH
        self.height = config.PADDLE_HEIGHT
        self.game_width = world.game_width

        self.max_speed = config.PADDLE_MAX_SPEED
        self.speed = 0.0
        self.marked_for_deletion = False

        self.position = Vector2D(
            world.game_width / 2 - self.width / 2,
            world.game_height - self.height - config.PADDLE_BOTTOM_MARGIN,
        )
        self.color = config.PADDLE_COLOR

    def move_left(self) -> None:
        self.speed = -self.max_speed

    def move_right(self) -> None:
        self.speed = self.max_speed

    def stop(self) -> None:
        self.speed = 0.0

    def update(self, dt: float = 0.0) -> None:
        """Moves by the current speed, then clamps to the field (speed is kept)"""
        self.position.x += self.speed
        self.position.x = max(0.0, min(self.game_width - self.width, self.position.x))

    def draw(self, surface: RenderSurface) -> None:
        surface.fill_rect(self.position.x, self.position.y, self.width, self.height, self.color)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


class Ball:
    """Game ball, a square bounding box of side ``size``"""

    def __init__(self, world: World):
        config = world.config
        self.world = world
        self.image = world.get_image(BALL_IMAGE_ID)

        self.size = config.BALL_SIZE
        self.position = Vector2D(config.BALL_START_X, config.BALL_START_Y)
        self.velocity = Vector2D(config.BALL_SPEED_X, config.BALL_SPEED_Y)
        self.marked_for_deletion = False

        self.game_width = world.game_width
        self.game_height = world.game_height

        # Set when the ball reflected off the paddle or a brick this tick
        self.single_bounce = config.SINGLE_BOUNCE_PER_TICK
        self.collided_this_tick = False

    def update(self, dt: float = 0.0) -> None:
        """
        Advances the ball by one tick.

        Movement is per tick: ``dt`` is accepted for the update contract but
        does not scale the velocity.
        """
        self.collided_this_tick = False
        self.position += self.velocity

        # Walls: reflect without repositioning
        if self.position.x + self.size > self.game_width or self.position.x < 0:
            self.bounce_horizontal()
        if self.position.y + self.size > self.game_height or self.position.y < 0:
            self.bounce_vertical()

        paddle = self.world.paddle
        if detect_collision(self, paddle):
            self.collision_bounce()
            self.position.y = paddle.position.y - self.size

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls, paddle, bricks)"""
        self.velocity.y = -self.velocity.y

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (side walls)"""
        self.velocity.x = -self.velocity.x

    def collision_bounce(self) -> None:
        """
        Vertical bounce caused by hitting the paddle or a brick.

        With single bounce enabled, only the first collision of a tick
        reflects the ball.
        """
        if self.single_bounce and self.collided_this_tick:
            return
        self.bounce_vertical()
        self.collided_this_tick = True

    def draw(self, surface: RenderSurface) -> None:
        surface.draw_image(self.image, self.position.x, self.position.y, self.size, self.size)


class Brick:
    """Destructible brick; removed by the game at the end of the tick it is hit"""

    def __init__(self, world: World, position: Vector2D):
        config = world.config
        self.world = world
        self.image = world.get_image(BRICK_IMAGE_ID)
        self.position = position

        self.width = config.BRICK_WIDTH
        self.height = config.BRICK_HEIGHT

        self.marked_for_deletion = False

    def update(self, dt: float = 0.0) -> None:
        ball = self.world.ball
        if self.marked_for_deletion or not detect_collision(ball, self):
            return

        ball.collision_bounce()
        self.marked_for_deletion = True
        logger.debug("Brick at %s hit", self.position.to_tuple())

    def draw(self, surface: RenderSurface) -> None:
        surface.draw_image(self.image, self.position.x, self.position.y, self.width, self.height)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)

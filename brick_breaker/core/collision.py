"""
Collision detection for Brick Breaker
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from brick_breaker.core.entities import Ball, Vector2D

Rect = tuple[float, float, float, float]


class HasRect(Protocol):
    def get_rect(self) -> Rect: ...


def ball_rect_collision_at_position(position: "Vector2D", size: float, rect: Rect) -> bool:
    """
    Checks a ball bounding box at ``position`` against a rectangle.

    Vertically the two boxes only need to overlap (edges touching counts).
    Horizontally the whole ball must lie within the rectangle's span, so a
    ball clipping a corner is not a hit.
    """
    x, y, width, height = rect

    bottom_of_ball = position.y + size
    top_of_ball = position.y

    return (
        bottom_of_ball >= y
        and top_of_ball <= y + height
        and position.x >= x
        and position.x + size <= x + width
    )


def detect_collision(ball: "Ball", game_object: HasRect) -> bool:
    """Detects collision between the ball and a rectangular game object"""
    return ball_rect_collision_at_position(ball.position, ball.size, game_object.get_rect())

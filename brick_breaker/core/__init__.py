"""
Core module of Brick Breaker game
"""

from brick_breaker.core.collision import detect_collision
from brick_breaker.core.entities import Ball
from brick_breaker.core.entities import Brick
from brick_breaker.core.entities import Paddle
from brick_breaker.core.entities import Vector2D
from brick_breaker.core.game import Game
from brick_breaker.core.game import GameNotStartedError
from brick_breaker.core.game import GameStatus
from brick_breaker.core.level import LEVEL_1
from brick_breaker.core.level import build_level

__all__ = [
    "Ball",
    "Brick",
    "Paddle",
    "Vector2D",
    "Game",
    "GameStatus",
    "GameNotStartedError",
    "LEVEL_1",
    "build_level",
    "detect_collision",
]

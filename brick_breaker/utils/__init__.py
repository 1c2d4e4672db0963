"""
Brick Breaker utilities module
"""

from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

__all__ = ["game_config", "GameConfig"]

"""
Shared fixtures for Brick Breaker tests
"""

import os

# Headless SDL for every pygame test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from typing import Any  # noqa: E402

import pytest  # noqa: E402

from brick_breaker.core.game import Game  # noqa: E402
from brick_breaker.utils.config import GameConfig  # noqa: E402


class RecordingSurface:
    """Render surface that records every drawing call"""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def fill_rect(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append(("fill_rect", args, kwargs))

    def draw_image(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append(("draw_image", args, kwargs))

    def fill_text(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append(("fill_text", args, kwargs))

    def clear_rect(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append(("clear_rect", args, kwargs))

    def names(self) -> list[str]:
        return [name for name, _, _ in self.calls]


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def game(config: GameConfig) -> Game:
    """A started game on the default level"""
    game = Game(800, 600, config=config)
    game.start()
    return game


@pytest.fixture
def empty_game(config: GameConfig) -> Game:
    """A started game without bricks"""
    game = Game(800, 600, config=config)
    game.start(level=[])
    return game


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()

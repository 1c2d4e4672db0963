"""
Keyboard input for Brick Breaker: key identifiers to paddle and pause commands
"""

import logging

import pygame

from brick_breaker.core.entities import Paddle
from brick_breaker.core.game import Game

logger = logging.getLogger(__name__)

ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"
ESCAPE = "Escape"

# pygame key codes for the recognised key identifiers
PYGAME_KEY_NAMES: dict[int, str] = {
    pygame.K_LEFT: ARROW_LEFT,
    pygame.K_RIGHT: ARROW_RIGHT,
    pygame.K_ESCAPE: ESCAPE,
}


class InputHandler:
    """
    Applies key presses to the paddle and the game as soon as they arrive.

    There is no queue: several events between two ticks leave the last
    applied speed or pause state in effect.
    """

    def __init__(self, paddle: Paddle, game: Game):
        self.paddle = paddle
        self.game = game

    def key_down(self, key: str) -> None:
        """Handle a key press identified by its key name"""
        if key == ARROW_LEFT:
            self.paddle.move_left()
        elif key == ARROW_RIGHT:
            self.paddle.move_right()
        elif key == ESCAPE:
            self.game.toggle_pause()
        else:
            logger.debug("Ignoring key down %r", key)

    def key_up(self, key: str) -> None:
        """
        Handle a key release.

        Releasing an arrow only stops the paddle if it is still moving in that
        arrow's direction, so switching arrows without a gap keeps moving.
        """
        if key == ARROW_LEFT:
            if self.paddle.speed < 0:
                self.paddle.stop()
        elif key == ARROW_RIGHT:
            if self.paddle.speed > 0:
                self.paddle.stop()
        else:
            logger.debug("Ignoring key up %r", key)

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            "quit" when the window was closed, None otherwise
        """
        if event.type == pygame.QUIT:
            return "quit"

        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return None

        key = PYGAME_KEY_NAMES.get(event.key)
        if key is None:
            return None

        if event.type == pygame.KEYDOWN:
            self.key_down(key)
        else:
            self.key_up(key)
        return None

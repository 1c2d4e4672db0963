"""
Main game application with PyGame GUI
"""

import logging
from collections.abc import Mapping
from typing import Any

import pygame

from brick_breaker.core.game import Game
from brick_breaker.gui.input_handler import InputHandler
from brick_breaker.gui.pygame_renderer import PygameSurface
from brick_breaker.gui.pygame_renderer import load_images
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

logger = logging.getLogger(__name__)


class BreakoutApp:
    """
    Builds the game, its input handler and the window, and drives one update
    and one draw per frame.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        images: Mapping[str, Any] | None = None,
        headless: bool = False,
    ) -> None:
        self.config = config if config is not None else game_config
        self.headless = headless
        self.running = False

        self.screen: pygame.Surface | None = None
        self.surface: PygameSurface | None = None
        self.clock: pygame.time.Clock | None = None

        if not headless:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT)
            )
            pygame.display.set_caption("Brick Breaker")
            self.surface = PygameSurface(self.screen, self.config.BACKGROUND_COLOR)
            self.clock = pygame.time.Clock()

        # Images need the display for convert_alpha, so load them after set_mode
        if images is None:
            images = {} if headless else load_images(self.config.ASSETS_DIR)

        self.game = Game(
            self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT, config=self.config, images=images
        )
        self.game.start()
        self.input_handler = InputHandler(self.game.paddle, self.game)
        self.last_time = 0

    def handle_events(self) -> None:
        """Route pending pygame events to the input handler"""
        for event in pygame.event.get():
            if self.input_handler.handle_event(event) == "quit":
                self.running = False

    def frame(self, timestamp: int) -> None:
        """Runs one frame: update with the elapsed time, then draw"""
        dt = timestamp - self.last_time
        self.last_time = timestamp

        self.game.update(dt)

        if self.surface is not None:
            self.surface.clear_rect(0, 0, self.game.game_width, self.game.game_height)
            self.game.draw(self.surface)

    def run(self) -> None:
        """Main application loop"""
        if self.headless or self.clock is None:
            raise RuntimeError("run() needs a window, use run_headless() instead")

        logger.info("Starting Brick Breaker")
        self.running = True
        self.last_time = pygame.time.get_ticks()

        try:
            while self.running:
                self.handle_events()
                if not self.running:
                    break

                self.frame(pygame.time.get_ticks())
                pygame.display.flip()

                self.clock.tick(self.config.FPS)
        finally:
            self.cleanup()

    def run_headless(self, ticks: int) -> dict[str, Any]:
        """Advances the simulation ``ticks`` times without drawing"""
        step_ms = 1000 // self.config.FPS
        for _ in range(ticks):
            self.frame(self.last_time + step_ms)
            if self.game.is_cleared():
                logger.info("All bricks destroyed")
                break
        return self.game.get_game_state()

    def cleanup(self) -> None:
        """Clean up resources"""
        self.running = False
        if not self.headless:
            pygame.quit()
        logger.info("Brick Breaker closed")


def main(config: GameConfig | None = None) -> None:
    """Main entry point"""
    app = BreakoutApp(config)
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()

"""
PyGame render surface and image assets for Brick Breaker
"""

import logging
from pathlib import Path
from typing import Any

import pygame

from brick_breaker.core.entities import BALL_IMAGE_ID
from brick_breaker.core.entities import BRICK_IMAGE_ID
from brick_breaker.core.interfaces import Color

logger = logging.getLogger(__name__)

IMAGE_IDS = (BALL_IMAGE_ID, BRICK_IMAGE_ID)


def load_images(directory: str | Path) -> dict[str, pygame.Surface]:
    """
    Loads the game images from ``directory``.

    Each asset id maps to ``<asset id>.png``. Missing or unreadable files are
    skipped, the entities then draw nothing for them.
    """
    images: dict[str, pygame.Surface] = {}
    base = Path(directory)

    for asset_id in IMAGE_IDS:
        path = base / f"{asset_id}.png"
        if not path.exists():
            logger.warning("Image asset %s not found at %s", asset_id, path)
            continue
        try:
            image = pygame.image.load(str(path))
        except pygame.error as e:
            logger.warning("Could not load image asset %s: %s", asset_id, e)
            continue

        # convert_alpha needs an open display
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        images[asset_id] = image

    return images


class PygameSurface:
    """Render surface drawing onto a pygame Surface"""

    def __init__(self, screen: pygame.Surface, background_color: Color = (0, 0, 0)):
        self.screen = screen
        self.background_color = background_color
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def fill_rect(
        self, x: float, y: float, width: float, height: float, color: Color, alpha: int = 255
    ) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        if alpha >= 255:
            pygame.draw.rect(self.screen, color, rect)
            return

        # Semi-transparent fill
        overlay = pygame.Surface(rect.size)
        overlay.set_alpha(alpha)
        overlay.fill(color)
        self.screen.blit(overlay, rect.topleft)

    def draw_image(self, image: Any, x: float, y: float, width: float, height: float) -> None:
        if image is None:
            return
        scaled = pygame.transform.scale(image, (int(width), int(height)))
        self.screen.blit(scaled, (int(x), int(y)))

    def fill_text(
        self, text: str, x: float, y: float, size: int, color: Color, align: str = "center"
    ) -> None:
        text_surface = self._font(size).render(text, True, color)
        text_rect = text_surface.get_rect()
        if align == "left":
            text_rect.midleft = (int(x), int(y))
        elif align == "right":
            text_rect.midright = (int(x), int(y))
        else:
            text_rect.center = (int(x), int(y))
        self.screen.blit(text_surface, text_rect)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.screen.fill(
            self.background_color, pygame.Rect(int(x), int(y), int(width), int(height))
        )

"""
PyGame front-end for Brick Breaker
"""

from brick_breaker.gui.game_app import BreakoutApp
from brick_breaker.gui.input_handler import InputHandler
from brick_breaker.gui.pygame_renderer import PygameSurface
from brick_breaker.gui.pygame_renderer import load_images

__all__ = ["BreakoutApp", "InputHandler", "PygameSurface", "load_images"]

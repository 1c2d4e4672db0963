"""
Protocols shared between the simulation core and its backends
"""

from brick_breaker.core.interfaces.renderer import Color
from brick_breaker.core.interfaces.renderer import RenderSurface
from brick_breaker.core.interfaces.world import GameObject
from brick_breaker.core.interfaces.world import World

__all__ = ["Color", "RenderSurface", "GameObject", "World"]

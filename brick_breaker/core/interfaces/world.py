"""
World protocol - read-only view of the game that entities resolve collisions against
"""

from typing import TYPE_CHECKING, Any, Protocol

from brick_breaker.core.interfaces.renderer import RenderSurface
from brick_breaker.utils.config import GameConfig

if TYPE_CHECKING:
    from brick_breaker.core.entities import Ball, Paddle


class World(Protocol):
    """
    What an entity may read from the game that owns it.

    Entities keep a non-owning reference to their world; they never add or
    remove other entities through it.
    """

    game_width: float
    game_height: float
    config: GameConfig

    @property
    def paddle(self) -> "Paddle": ...

    @property
    def ball(self) -> "Ball": ...

    def get_image(self, asset_id: str) -> Any:
        """Return the pre-loaded image handle for ``asset_id``, or None"""
        ...


class GameObject(Protocol):
    """Anything taking part in the update/draw cycle"""

    marked_for_deletion: bool

    def update(self, dt: float) -> None:
        """Advance one tick"""
        ...

    def draw(self, surface: RenderSurface) -> None:
        """Draw onto the render surface"""
        ...

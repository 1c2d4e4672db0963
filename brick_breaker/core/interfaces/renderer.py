"""
Render surface protocol - defines the drawing primitives the game calls
"""

from typing import Any, Protocol

Color = tuple[int, int, int]


class RenderSurface(Protocol):
    """
    Protocol for 2D drawing surfaces.

    The simulation only calls these primitives; backends (pygame, a recording
    fake in tests, ...) implement them.
    """

    def fill_rect(
        self, x: float, y: float, width: float, height: float, color: Color, alpha: int = 255
    ) -> None:
        """
        Fill an axis-aligned rectangle.

        Args:
            x, y: Top-left corner
            width, height: Rectangle size
            color: RGB color
            alpha: Opacity from 0 (transparent) to 255 (opaque)
        """
        ...

    def draw_image(self, image: Any, x: float, y: float, width: float, height: float) -> None:
        """
        Draw an image scaled to the given box.

        A ``None`` image (asset not loaded) draws nothing.
        """
        ...

    def fill_text(
        self, text: str, x: float, y: float, size: int, color: Color, align: str = "center"
    ) -> None:
        """Draw text anchored at (x, y) with the given horizontal alignment"""
        ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Clear a rectangle back to the background"""
        ...

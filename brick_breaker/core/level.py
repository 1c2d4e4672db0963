"""
Level layouts and the brick grid builder
"""

from collections.abc import Sequence

from brick_breaker.core.entities import Brick
from brick_breaker.core.entities import Vector2D
from brick_breaker.core.interfaces import World

Level = Sequence[Sequence[int]]

LEVEL_1: Level = [
    [0, 1, 0, 1, 0, 1, 0, 1, 0, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
]


def build_level(world: World, level: Level) -> list[Brick]:
    """
    Builds the bricks of a level grid.

    Every cell equal to 1 becomes a brick placed on the brick pitch below the
    top offset; any other value is an empty cell. Bricks are returned in
    row-major order, rows may have different lengths.
    """
    config = world.config
    bricks = []
    for row_index, row in enumerate(level):
        for column_index, cell in enumerate(row):
            if cell != 1:
                continue
            position = Vector2D(
                config.BRICK_WIDTH * column_index,
                config.LEVEL_TOP_OFFSET + config.BRICK_HEIGHT * row_index,
            )
            bricks.append(Brick(world, position))
    return bricks

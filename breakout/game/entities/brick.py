"""Brick entity.

A brick is struck once and then stays broken for the rest of the game.
Broken bricks neither collide nor render.
"""

from dataclasses import dataclass, replace
from typing import List

from ...config import GameConfig
from ...models import Vector2D


@dataclass(frozen=True)
class Brick:
    """Immutable brick.

    Attributes:
        position: Center in arena coordinates
        size: Full width and height
        color: Color identifier for the skin (see BRICK_COLORS)
        points: Score awarded once broken
        broken: One-way flag, set by hit()
    """

    position: Vector2D
    size: Vector2D
    color: str = "red"
    points: int = 1
    broken: bool = False

    @property
    def half_size(self) -> Vector2D:
        return self.size.scale(0.5)

    @property
    def is_active(self) -> bool:
        """Check if brick can still be hit."""
        return not self.broken

    def hit(self) -> 'Brick':
        """Return the broken version of this brick."""
        if self.broken:
            return self
        return replace(self, broken=True)


# Classic rows, top to bottom: (color, points)
DEFAULT_ROWS = [
    ('red', 6),
    ('orange', 5),
    ('yellow', 4),
    ('green', 3),
    ('blue', 2),
    ('purple', 1),
]


def brick_grid(
    config: GameConfig,
    rows: int = len(DEFAULT_ROWS),
    cols: int = 12,
) -> List[Brick]:
    """Build the default wall of bricks centered horizontally.

    Row styles repeat if more rows than DEFAULT_ROWS are requested.

    Args:
        config: Supplies brick size, gap and the top edge of the first row
        rows: Number of rows
        cols: Number of columns

    Returns:
        Bricks ordered row by row, top row first
    """
    step_x = config.brick_width + config.brick_gap
    step_y = config.brick_height + config.brick_gap
    total_width = cols * step_x - config.brick_gap
    left = -total_width / 2 + config.brick_width / 2
    top = config.brick_top - config.brick_height / 2
    size = Vector2D(x=config.brick_width, y=config.brick_height)

    bricks = []
    for row in range(rows):
        color, points = DEFAULT_ROWS[row % len(DEFAULT_ROWS)]
        for col in range(cols):
            bricks.append(Brick(
                position=Vector2D(x=left + col * step_x, y=top - row * step_y),
                size=size,
                color=color,
                points=points,
            ))
    return bricks

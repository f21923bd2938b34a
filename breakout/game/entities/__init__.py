"""Breakout game entities."""

from .paddle import Paddle
from .ball import Ball
from .brick import Brick, brick_grid

__all__ = [
    'Paddle',
    'Ball',
    'Brick', 'brick_grid',
]

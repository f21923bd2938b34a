"""Breakout physics and collision detection."""

from .collision import (
    CollisionSide,
    circle_intersects_rect,
    collision_side,
    reflect,
    reflect_all,
    paddle_bounce,
)

__all__ = [
    'CollisionSide',
    'circle_intersects_rect',
    'collision_side',
    'reflect',
    'reflect_all',
    'paddle_bounce',
]

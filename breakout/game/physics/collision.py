"""Collision detection and velocity response for Breakout.

All functions are pure. Rectangles are axis-aligned and given by their
center and half extents; the y axis points up, so "bottom" is the edge
with the smaller y.
"""

import math
from enum import Enum
from typing import Iterable

from ...models import Vector2D


class CollisionSide(Enum):
    """Which edge of a rectangle the ball struck."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


def circle_intersects_rect(
    ball_pos: Vector2D,
    radius: float,
    rect_pos: Vector2D,
    half_size: Vector2D,
) -> bool:
    """Exact circle vs axis-aligned rectangle test.

    Clamps the circle center onto the rectangle to find the closest
    point, then compares squared distance against radius squared. Unlike
    a bounding-box overlap this rejects a ball sitting just off a corner.
    """
    closest_x = max(rect_pos.x - half_size.x, min(ball_pos.x, rect_pos.x + half_size.x))
    closest_y = max(rect_pos.y - half_size.y, min(ball_pos.y, rect_pos.y + half_size.y))
    dx = ball_pos.x - closest_x
    dy = ball_pos.y - closest_y
    return dx * dx + dy * dy <= radius * radius


def collision_side(
    ball_pos: Vector2D,
    radius: float,
    rect_pos: Vector2D,
    half_size: Vector2D,
) -> CollisionSide:
    """Determine which side of a rectangle the ball is touching.

    Vertical sides are tested before horizontal ones, so a ball touching
    a corner is always reported as BOTTOM or TOP. The order is fixed:
    bottom, top, left, then right as the fallback.

    Args:
        ball_pos: Ball center
        radius: Ball radius
        rect_pos: Rectangle center
        half_size: Rectangle half width and half height

    Returns:
        The struck side, or CollisionSide.NONE if they do not intersect
    """
    if not circle_intersects_rect(ball_pos, radius, rect_pos, half_size):
        return CollisionSide.NONE

    if ball_pos.y <= rect_pos.y - half_size.y:
        return CollisionSide.BOTTOM
    if ball_pos.y >= rect_pos.y + half_size.y:
        return CollisionSide.TOP
    if ball_pos.x <= rect_pos.x - half_size.x:
        return CollisionSide.LEFT
    return CollisionSide.RIGHT


def reflect(side: CollisionSide, velocity: Vector2D) -> Vector2D:
    """Elastic reflection off the given side.

    TOP and BOTTOM invert y, LEFT and RIGHT invert x, NONE leaves the
    velocity unchanged.
    """
    if side in (CollisionSide.TOP, CollisionSide.BOTTOM):
        return Vector2D(x=velocity.x, y=-velocity.y)
    if side in (CollisionSide.LEFT, CollisionSide.RIGHT):
        return Vector2D(x=-velocity.x, y=velocity.y)
    return velocity


def reflect_all(sides: Iterable[CollisionSide], velocity: Vector2D) -> Vector2D:
    """Fold reflect() over sides in order."""
    for side in sides:
        velocity = reflect(side, velocity)
    return velocity


def paddle_bounce(
    velocity: Vector2D,
    ball_x: float,
    paddle_x: float,
    paddle_width: float,
    angle_factor: float = 0.75,
) -> Vector2D:
    """Redirect the ball off the paddle based on where it landed.

    Speed is preserved. A center hit goes straight up; hits toward an
    edge leave at a shallower angle toward that side. The result always
    moves upward regardless of the incoming direction.

    Args:
        velocity: Incoming ball velocity
        ball_x: Ball center x
        paddle_x: Paddle center x
        paddle_width: Paddle width
        angle_factor: Fraction of the speed given to vx on an edge hit

    Returns:
        New velocity
    """
    speed = velocity.length
    pos_x = (ball_x - paddle_x) / (paddle_width / 2)
    new_vx = angle_factor * pos_x * speed
    # A ball clipping the paddle end can put pos_x past 1.
    radicand = max(0.0, speed * speed - new_vx * new_vx)
    return Vector2D(x=new_vx, y=math.sqrt(radicand))

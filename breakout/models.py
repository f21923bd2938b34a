"""
Shared primitive data types.

Positions, velocities and sizes all use the same immutable 2D vector.
Arena coordinates are origin-centered with the y axis pointing up.
"""

import math

from pydantic import BaseModel, ConfigDict


class Vector2D(BaseModel):
    """Immutable 2D vector for positions, velocities and sizes.

    Attributes:
        x: X coordinate (horizontal, positive is right)
        y: Y coordinate (vertical, positive is up)

    Examples:
        >>> pos = Vector2D(x=0.0, y=-270.0)
        >>> vel = Vector2D(x=150.0, y=-250.0)
        >>> (pos + vel.scale(0.5)).y
        -395.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(x=self.x + other.x, y=self.y + other.y)

    def scale(self, factor: float) -> 'Vector2D':
        """Multiply both components by factor."""
        return Vector2D(x=self.x * factor, y=self.y * factor)

    @property
    def length(self) -> float:
        """Euclidean length (speed, for a velocity)."""
        return math.hypot(self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Vector2D(x={self.x:.2f}, y={self.y:.2f})"


ZERO = Vector2D(x=0.0, y=0.0)

"""Arena to screen coordinate mapping.

The arena is scaled uniformly to fit the viewport and centered, leaving
letterbox bars on the longer axis. Screen y grows downward.
"""

from dataclasses import dataclass
from typing import Tuple

from ..config import GameConfig
from ..game.model import Viewport
from ..models import Vector2D


def viewport_scale(viewport: Viewport, config: GameConfig) -> float:
    """Largest uniform scale at which the arena fits the viewport."""
    return min(viewport.width / config.width, viewport.height / config.height)


@dataclass(frozen=True)
class ScreenTransform:
    """Maps arena coordinates to pixel coordinates."""
    scale: float
    center_x: float
    center_y: float

    @classmethod
    def for_viewport(cls, viewport: Viewport, config: GameConfig) -> 'ScreenTransform':
        return cls(
            scale=viewport_scale(viewport, config),
            center_x=viewport.width / 2,
            center_y=viewport.height / 2,
        )

    def point(self, p: Vector2D) -> Tuple[int, int]:
        """Screen pixel for an arena point."""
        return (
            round(self.center_x + p.x * self.scale),
            round(self.center_y - p.y * self.scale),
        )

    def length(self, value: float) -> int:
        """Screen length for an arena length, at least one pixel."""
        return max(1, round(value * self.scale))

    def rect(self, center: Vector2D, size: Vector2D) -> Tuple[int, int, int, int]:
        """Screen (left, top, width, height) for an arena rectangle."""
        left, top = self.point(Vector2D(x=center.x - size.x / 2, y=center.y + size.y / 2))
        return (left, top, self.length(size.x), self.length(size.y))

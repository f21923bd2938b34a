"""Paddle entity driven by held left/right keys.

The paddle only moves horizontally; its y, size and speed come from
GameConfig.
"""

from dataclasses import dataclass, replace

from ...config import GameConfig
from ...models import Vector2D


@dataclass(frozen=True)
class Paddle:
    """Immutable paddle state (center x only)."""

    x: float = 0.0

    def position(self, config: GameConfig) -> Vector2D:
        """Paddle center in arena coordinates."""
        return Vector2D(x=self.x, y=config.paddle_y)

    @staticmethod
    def half_size(config: GameConfig) -> Vector2D:
        """Paddle half extents."""
        return Vector2D(x=config.paddle_width / 2, y=config.paddle_height / 2)

    def move(self, velocity: float, dt: float, config: GameConfig) -> 'Paddle':
        """Integrate position over dt and clamp inside the arena.

        Args:
            velocity: Horizontal velocity (units/second)
            dt: Elapsed time in seconds
            config: Simulation constants

        Returns:
            New Paddle at the clamped position
        """
        new_x = self.x + velocity * dt
        new_x = max(config.paddle_min_x, min(config.paddle_max_x, new_x))
        return replace(self, x=new_x)

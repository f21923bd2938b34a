"""Ball entity with velocity-based movement.

The ball is immutable; every change returns a new Ball. Radius is a
GameConfig constant and is not stored per ball.
"""

from dataclasses import dataclass, replace

from ...config import GameConfig
from ...models import Vector2D, ZERO


@dataclass(frozen=True)
class Ball:
    """Ball position and velocity.

    Attributes:
        position: Center in arena coordinates
        velocity: Units per second
    """

    position: Vector2D = ZERO
    velocity: Vector2D = ZERO

    @classmethod
    def initial(cls, config: GameConfig) -> 'Ball':
        """Ball at its configured start position and velocity."""
        return cls(position=config.ball_start, velocity=config.ball_velocity)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def speed(self) -> float:
        """Get current ball speed."""
        return self.velocity.length

    def with_velocity(self, velocity: Vector2D) -> 'Ball':
        """Return a new Ball with velocity replaced."""
        return replace(self, velocity=velocity)

    def advance(self, dt: float, factor: float = 1.0) -> 'Ball':
        """Move along the current velocity.

        Args:
            dt: Delta time in seconds
            factor: Displacement multiplier for this step only

        Returns:
            New Ball with updated position; velocity is unchanged
        """
        return replace(self, position=self.position + self.velocity.scale(dt * factor))

    def stop(self) -> 'Ball':
        """Return a new Ball at rest."""
        return replace(self, velocity=ZERO)

"""The aggregate game snapshot.

A Model is created once at startup and then replaced, never mutated, by
each event. Renderers read it directly; it carries no behavior beyond
derived values.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from ..config import GameConfig
from .entities import Ball, Brick, Paddle, brick_grid
from .game_state import GameState


@dataclass(frozen=True)
class Controls:
    """Which movement keys are currently held."""
    left_held: bool = False
    right_held: bool = False

    def paddle_velocity(self, speed: float) -> float:
        """Instantaneous paddle velocity; left wins when both are held."""
        if self.left_held:
            return -speed
        if self.right_held:
            return speed
        return 0.0


@dataclass(frozen=True)
class Viewport:
    """Window size in pixels."""
    width: int = 800
    height: int = 600


@dataclass(frozen=True)
class Model:
    """Complete game snapshot.

    Attributes:
        paddle: Paddle state
        ball: Ball state
        bricks: Every brick of the level, broken ones included
        lives: Remaining lives
        state: Game state
        controls: Held-key flags
        viewport: Presentation size, never read by the physics
        layout: Bricks to restore on a full reset
    """
    paddle: Paddle
    ball: Ball
    bricks: Tuple[Brick, ...]
    lives: int
    state: GameState = GameState.NOT_STARTED
    controls: Controls = Controls()
    viewport: Viewport = Viewport()
    layout: Tuple[Brick, ...] = field(default=(), repr=False)

    @classmethod
    def initial(
        cls,
        config: GameConfig,
        bricks: Optional[Iterable[Brick]] = None,
        viewport: Optional[Viewport] = None,
    ) -> 'Model':
        """Fresh NOT_STARTED model with the ball at rest.

        Args:
            config: Simulation constants
            bricks: Level layout; the default grid when omitted
            viewport: Starting window size
        """
        layout = tuple(bricks) if bricks is not None else tuple(brick_grid(config))
        return cls(
            paddle=Paddle(),
            ball=Ball(position=config.ball_start),
            bricks=layout,
            lives=config.lives,
            viewport=viewport or Viewport(),
            layout=layout,
        )

    @property
    def score(self) -> int:
        """Sum of points over broken bricks."""
        return sum(brick.points for brick in self.bricks if brick.broken)

    @property
    def broken_count(self) -> int:
        return sum(1 for brick in self.bricks if brick.broken)

    @property
    def all_broken(self) -> bool:
        return all(brick.broken for brick in self.bricks)

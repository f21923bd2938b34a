"""Configuration for Breakout.

Contains the arena dimensions, physics constants, brick grid defaults
and color definitions. Everything the simulation reads lives in one
immutable GameConfig that is passed in explicitly.
"""

from pathlib import Path
from typing import Dict, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import Vector2D

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (20, 20, 30)
ARENA_COLOR: Tuple[int, int, int] = (0, 0, 0)

# Brick colors mapping
BRICK_COLORS: Dict[str, Tuple[int, int, int]] = {
    'red': (255, 100, 100),
    'blue': (100, 100, 255),
    'green': (100, 255, 100),
    'yellow': (255, 255, 100),
    'orange': (255, 180, 100),
    'purple': (200, 100, 255),
    'cyan': (100, 255, 255),
    'gray': (150, 150, 150),
    'white': (255, 255, 255),
}


class GameConfig(BaseModel):
    """Immutable simulation constants.

    The arena is origin-centered; `half_width` and `half_height` are the
    distances from the center to the walls.

    Attributes:
        half_width: Horizontal distance from center to the side walls
        half_height: Vertical distance from center to ceiling and floor
        paddle_width: Paddle width
        paddle_height: Paddle height
        paddle_speed: Paddle speed in units/second
        paddle_y: Fixed paddle center y
        ball_radius: Ball radius
        ball_start: Ball position at the start of a game and after a life is lost
        ball_velocity: Ball velocity at the same moments
        paddle_angle_factor: Share of the speed turned sideways by an edge hit
        brick_width: Default brick width for generated layouts
        brick_height: Default brick height for generated layouts
        brick_gap: Space between neighbouring bricks
        brick_top: Y of the top edge of the first brick row
        lives: Lives at the start of a game
    """
    half_width: float = Field(default=400.0, gt=0)
    half_height: float = Field(default=300.0, gt=0)

    paddle_width: float = Field(default=100.0, gt=0)
    paddle_height: float = Field(default=15.0, gt=0)
    paddle_speed: float = Field(default=400.0, gt=0)
    paddle_y: float = -270.0

    ball_radius: float = Field(default=5.0, gt=0)
    ball_start: Vector2D = Vector2D(x=0.0, y=0.0)
    ball_velocity: Vector2D = Vector2D(x=150.0, y=-250.0)
    paddle_angle_factor: float = Field(default=0.75, gt=0, lt=1)

    brick_width: float = Field(default=60.0, gt=0)
    brick_height: float = Field(default=20.0, gt=0)
    brick_gap: float = Field(default=4.0, ge=0)
    brick_top: float = 260.0

    lives: int = Field(default=3, ge=1)

    model_config = ConfigDict(frozen=True, extra='forbid')

    @model_validator(mode='after')
    def check_fits_arena(self) -> 'GameConfig':
        """Paddle and its row must fit inside the arena."""
        if self.paddle_width > 2 * self.half_width:
            raise ValueError(
                f'paddle_width {self.paddle_width} exceeds arena width {2 * self.half_width}'
            )
        if abs(self.paddle_y) + self.paddle_height / 2 > self.half_height:
            raise ValueError(f'paddle_y {self.paddle_y} places the paddle outside the arena')
        return self

    @property
    def width(self) -> float:
        """Full arena width."""
        return 2 * self.half_width

    @property
    def height(self) -> float:
        """Full arena height."""
        return 2 * self.half_height

    @property
    def paddle_min_x(self) -> float:
        """Leftmost legal paddle center."""
        return -self.half_width + self.paddle_width / 2

    @property
    def paddle_max_x(self) -> float:
        """Rightmost legal paddle center."""
        return self.half_width - self.paddle_width / 2


DEFAULT_CONFIG = GameConfig()


def load_config(path: Union[str, Path]) -> GameConfig:
    """Load a GameConfig from a YAML file.

    Keys not present in the file keep their defaults. Vector fields are
    written as mappings, e.g. ``ball_velocity: {x: 150, y: -250}``.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If a value is invalid or a key is unknown
    """
    path = Path(path)
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return GameConfig(**data)

"""
Events consumed by the update function.

Every event is immutable. Input adapters convert raw key codes to
InputSignal members; the frame clock produces Tick; the window produces
Resize.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


class InputSignal(Enum):
    """Abstract control signals, independent of any keyboard."""
    MOVE_LEFT_PRESSED = "move_left_pressed"
    MOVE_LEFT_RELEASED = "move_left_released"
    MOVE_RIGHT_PRESSED = "move_right_pressed"
    MOVE_RIGHT_RELEASED = "move_right_released"
    START_PRESSED = "start_pressed"


@dataclass(frozen=True)
class Tick:
    """Animation frame tick.

    Attributes:
        elapsed: Seconds since the previous tick (variable, uncapped)
    """
    elapsed: float

    def __post_init__(self):
        """Validate elapsed time is finite and non-negative."""
        if not math.isfinite(self.elapsed) or self.elapsed < 0:
            raise ValueError(f'Elapsed time must be finite and non-negative, got {self.elapsed}')


@dataclass(frozen=True)
class Resize:
    """Viewport size change, in pixels."""
    width: int
    height: int

    def __post_init__(self):
        """Validate dimensions are positive."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f'Viewport must be positive, got {self.width}x{self.height}')


Event = Union[Tick, Resize, InputSignal]

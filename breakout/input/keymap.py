"""
Key code to InputSignal mapping.

Two code tables map onto the same three controls: browser DOM key codes
(left arrow 37, right arrow 39, space 32) and pygame key constants.
"""
from enum import Enum
from typing import Dict, Optional

import pygame

from breakout.game.events import InputSignal


class Control(Enum):
    """Physical controls the game listens to."""
    LEFT = "left"
    RIGHT = "right"
    START = "start"


DOM_KEY_CODES: Dict[int, Control] = {
    37: Control.LEFT,
    39: Control.RIGHT,
    32: Control.START,
}

PYGAME_KEYS: Dict[int, Control] = {
    pygame.K_LEFT: Control.LEFT,
    pygame.K_RIGHT: Control.RIGHT,
    pygame.K_SPACE: Control.START,
}

_PRESSED = {
    Control.LEFT: InputSignal.MOVE_LEFT_PRESSED,
    Control.RIGHT: InputSignal.MOVE_RIGHT_PRESSED,
    Control.START: InputSignal.START_PRESSED,
}

_RELEASED = {
    Control.LEFT: InputSignal.MOVE_LEFT_RELEASED,
    Control.RIGHT: InputSignal.MOVE_RIGHT_RELEASED,
}


def signal_for(control: Control, pressed: bool) -> Optional[InputSignal]:
    """Signal for a control going down or up.

    Releasing start produces nothing.
    """
    if pressed:
        return _PRESSED[control]
    return _RELEASED.get(control)


def signal_for_key_code(
    code: int,
    pressed: bool,
    table: Dict[int, Control] = DOM_KEY_CODES,
) -> Optional[InputSignal]:
    """Translate a raw key code; unmapped keys give None."""
    control = table.get(code)
    if control is None:
        return None
    return signal_for(control, pressed)

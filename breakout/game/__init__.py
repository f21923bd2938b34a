"""
Breakout game core.

Provides:
- physics: circle vs rectangle collision, reflection, paddle bounce
- entities: immutable Paddle, Ball and Brick
- model: the Model snapshot plus Controls and Viewport
- simulation: the per-tick step
- update: event dispatch and start/reset
- level_loader: YAML brick layouts
"""

from .game_state import GameState
from .events import Event, InputSignal, Resize, Tick
from .model import Controls, Model, Viewport
from .simulation import tick
from .update import start_game, update

__all__ = [
    'GameState',
    'Event',
    'InputSignal',
    'Resize',
    'Tick',
    'Controls',
    'Model',
    'Viewport',
    'tick',
    'start_game',
    'update',
]

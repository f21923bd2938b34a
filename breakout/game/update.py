"""Pure event dispatch: update(model, event, config) -> model.

The driver owns the single current Model and feeds every event through
update() in arrival order.
"""

from dataclasses import replace

from ..config import GameConfig
from ..logging import get_logger
from .entities import Ball, Paddle
from .events import Event, InputSignal, Resize, Tick
from .game_state import GameState
from .model import Model, Viewport
from .simulation import tick

log = get_logger('update')


def start_game(model: Model, config: GameConfig) -> Model:
    """Begin a new game from NOT_STARTED, WON or LOST.

    Lives, paddle, ball and bricks are all reinitialized; held keys and
    viewport carry over. Ignored while already PLAYING.
    """
    if not model.state.can_start:
        return model
    log.info("Starting game from %s", model.state.value)
    return replace(
        model,
        paddle=Paddle(),
        ball=Ball.initial(config),
        bricks=model.layout,
        lives=config.lives,
        state=GameState.PLAYING,
    )


def apply_signal(model: Model, signal: InputSignal, config: GameConfig) -> Model:
    """Update held-key flags or handle the start signal."""
    controls = model.controls
    if signal is InputSignal.MOVE_LEFT_PRESSED:
        controls = replace(controls, left_held=True)
    elif signal is InputSignal.MOVE_LEFT_RELEASED:
        controls = replace(controls, left_held=False)
    elif signal is InputSignal.MOVE_RIGHT_PRESSED:
        controls = replace(controls, right_held=True)
    elif signal is InputSignal.MOVE_RIGHT_RELEASED:
        controls = replace(controls, right_held=False)
    elif signal is InputSignal.START_PRESSED:
        return start_game(model, config)
    return replace(model, controls=controls)


def update(model: Model, event: Event, config: GameConfig) -> Model:
    """Produce the next snapshot for one event.

    Args:
        model: Current snapshot
        event: Tick, Resize or an InputSignal
        config: Simulation constants

    Returns:
        Next snapshot

    Raises:
        TypeError: For an object that is not a known event
    """
    if isinstance(event, Tick):
        return tick(model, event.elapsed, config)
    if isinstance(event, InputSignal):
        return apply_signal(model, event, config)
    if isinstance(event, Resize):
        return replace(model, viewport=Viewport(width=event.width, height=event.height))
    raise TypeError(f"Unknown event: {event!r}")

"""GameState enum for Breakout.

States:
    NOT_STARTED: Before the first start signal
    PLAYING: Simulation runs on every tick
    WON: Every brick broken
    LOST: No lives left

Only the simulation step (win/lose) and the start signal change state.
"""
from enum import Enum


class GameState(Enum):
    """Top-level game states."""
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def can_start(self) -> bool:
        """Whether the start signal begins a new game from this state."""
        return self is not GameState.PLAYING

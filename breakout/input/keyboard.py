"""
Keyboard Input Source - pygame key events to InputSignal.
"""
from abc import ABC, abstractmethod
from typing import List

import pygame

from breakout.game.events import InputSignal
from breakout.input.keymap import PYGAME_KEYS, signal_for_key_code


class InputSource(ABC):
    """Abstract base class for input sources.

    Sources receive raw pygame events from the main loop and queue the
    abstract signals they produce.
    """

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Offer a raw event to the source.

        Returns:
            True if the event was consumed
        """
        pass

    @abstractmethod
    def poll_signals(self) -> List[InputSignal]:
        """Get signals queued since the last poll."""
        pass


class KeyboardInputSource(InputSource):
    """Arrow keys move the paddle, space starts a game."""

    def __init__(self):
        """Initialize the keyboard input source."""
        self._queue: List[InputSignal] = []

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Queue a signal for mapped KEYDOWN/KEYUP events."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        signal = signal_for_key_code(event.key, event.type == pygame.KEYDOWN, PYGAME_KEYS)
        if signal is None:
            return False

        self._queue.append(signal)
        return True

    def poll_signals(self) -> List[InputSignal]:
        """Get new signals since last poll."""
        signals = self._queue.copy()
        self._queue.clear()
        return signals

    def clear(self) -> None:
        """Clear the signal queue."""
        self._queue.clear()

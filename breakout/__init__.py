"""
Breakout: a paddle-and-ball brick breaker.

The core (breakout.game) is a pure, immutable simulation driven by
update(model, event, config). pygame is only used by the adapters:
breakout.input, breakout.skins, breakout.game_mode and breakout.main.
"""

__version__ = "1.0.0"

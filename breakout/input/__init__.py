"""
Input adapter: raw keys to abstract InputSignal values.
"""

from breakout.input.keymap import Control, DOM_KEY_CODES, PYGAME_KEYS, signal_for, signal_for_key_code
from breakout.input.keyboard import InputSource, KeyboardInputSource

__all__ = [
    'Control',
    'DOM_KEY_CODES',
    'PYGAME_KEYS',
    'signal_for',
    'signal_for_key_code',
    'InputSource',
    'KeyboardInputSource',
]

"""Breakout skins (rendering)."""

from .base import BreakoutSkin
from .geometric import GeometricSkin
from .transform import ScreenTransform, viewport_scale

SKINS = {
    GeometricSkin.NAME: GeometricSkin,
}

__all__ = ['BreakoutSkin', 'GeometricSkin', 'ScreenTransform', 'viewport_scale', 'SKINS']
